"""DynamoDB table export.

Each table is scanned, its items converted to plain records and written as a
two-space indented JSON array to ``<output-root>/dynamodb/<table>.json`` with
the environment name replaced by the placeholder.
"""

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from botocore.exceptions import BotoCoreError, ClientError

from envdump.config import ExportConfig
from envdump.errors import ConversionError, RemoteCallError, SerializationError
from envdump.files import write_bytes
from envdump.paths import table_export_path
from envdump.serialize import dumps_indented, from_dynamo_json

logger = logging.getLogger(__name__)


def scan_table(client: Any, table_name: str, paginate: bool = True) -> list[dict[str, Any]]:
    """Return the raw (AttributeValue encoded) items of a table.

    With ``paginate`` false only the first scan page is read.
    """
    try:
        if paginate:
            items = []
            paginator = client.get_paginator("scan")
            for page in paginator.paginate(TableName=table_name):
                items.extend(page.get("Items", []))
            return items

        response = client.scan(TableName=table_name)
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError(f"failed to scan table {table_name}: {e}") from e

    if "LastEvaluatedKey" in response:
        logger.warning(
            f"Table {table_name} has more than one page of items; "
            "only the first page was exported"
        )
    return response.get("Items", [])


def convert_items(items: Iterable[dict[str, Any]]) -> Iterator[dict[str, Any]]:
    for item in items:
        yield from_dynamo_json(item)


def export_table(client: Any, table_name: str, config: ExportConfig) -> Path:
    """Scan one table and write it to its export file."""
    items = scan_table(client, table_name, paginate=config.paginate)
    try:
        records = list(convert_items(items))
        data = dumps_indented(records)
    except (ConversionError, SerializationError) as e:
        raise type(e)(f"table {table_name}: {e}") from e
    path = table_export_path(config.output_root, table_name, config.env_name)
    write_bytes(path, data)
    logger.info(f"Dumped table '{table_name}' ({len(records)} items) to {path}")
    return path


def export_tables(client: Any, table_names: Iterable[str], config: ExportConfig) -> list[Path]:
    """Export tables in order, stopping at the first failure."""
    return [export_table(client, name, config) for name in table_names]
