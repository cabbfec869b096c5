"""Resource names derived from an environment name."""

from dataclasses import dataclass

TABLE_SUFFIXES = (
    "contacts_api",
    "access_control_api",
    "audit_api",
    "commit_api",
    "data_warehouse_api",
    "entities_api",
    "firms_api",
    "notification_api",
    "onboarding_api",
    "relationships_api",
    "reports_api",
    "requests",
    "rule_api",
    "schema_api",
    "tasks_api",
    "template_api",
    "transactions_api",
)

BUCKET_SUFFIXES = (
    "documents-bucket",
    "events-bucket",
    "files-bucket",
)

BUCKET_PREFIX = "ingenio.ca"


@dataclass(frozen=True)
class ExportTargets:
    tables: tuple[str, ...]
    buckets: tuple[str, ...]


def table_name(env_name: str, suffix: str) -> str:
    return f"{env_name}-{suffix}"


def bucket_name(env_name: str, suffix: str) -> str:
    return f"{BUCKET_PREFIX}-{env_name}-{suffix}"


def resolve_targets(env_name: str) -> ExportTargets:
    """Build the ordered table and bucket names for an environment.

    The environment name is not validated; it is interpolated as given.
    """
    return ExportTargets(
        tables=tuple(table_name(env_name, s) for s in TABLE_SUFFIXES),
        buckets=tuple(bucket_name(env_name, s) for s in BUCKET_SUFFIXES),
    )
