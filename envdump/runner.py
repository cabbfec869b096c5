"""Sequential dispatch of the selected exporters."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import boto3

from envdump import cognito, dynamodb, s3
from envdump.config import ExportConfig, Mode
from envdump.paths import (
    bucket_export_dir,
    table_export_path,
    users_export_path,
)
from envdump.resources import ExportTargets, resolve_targets
from envdump.session import make_client, make_session

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    written: list[Path] = field(default_factory=list)


def log_plan(config: ExportConfig, targets: ExportTargets) -> None:
    """Log what a run would export, without touching AWS."""
    if config.mode.includes(Mode.DYNAMODB):
        for table in targets.tables:
            path = table_export_path(config.output_root, table, config.env_name)
            logger.info(f"[dry run] table {table} -> {path}")
    if config.mode.includes(Mode.S3):
        for bucket in targets.buckets:
            path = bucket_export_dir(config.output_root, bucket, config.env_name)
            logger.info(f"[dry run] bucket {bucket} -> {path}/")
    if config.mode.includes(Mode.COGNITO):
        name = cognito.user_pool_parameter(config.env_name)
        path = users_export_path(config.output_root)
        logger.info(f"[dry run] user pool from {name} -> {path}")


def run(
    config: ExportConfig,
    session_factory: Callable[[ExportConfig], boto3.Session] = make_session,
) -> ExportSummary:
    """Run the exporters selected by ``config.mode`` in order.

    Raises:
        ExportError: on the first failure; remaining exports are skipped and
            files already written are left in place.
    """
    targets = resolve_targets(config.env_name)
    summary = ExportSummary()

    if config.dry_run:
        log_plan(config, targets)
        return summary

    session = session_factory(config)

    if config.mode.includes(Mode.DYNAMODB):
        client = make_client(session, "dynamodb")
        summary.written.extend(dynamodb.export_tables(client, targets.tables, config))

    if config.mode.includes(Mode.S3):
        client = make_client(session, "s3")
        summary.written.extend(s3.export_buckets(client, targets.buckets, config))

    if config.mode.includes(Mode.COGNITO):
        ssm_client = make_client(session, "ssm")
        cognito_client = make_client(session, "cognito-idp")
        summary.written.append(cognito.export_users(ssm_client, cognito_client, config))

    return summary
