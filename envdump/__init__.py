"""Export an environment's DynamoDB tables, S3 buckets and Cognito users to local files."""

from envdump.config import ExportConfig, Mode
from envdump.errors import ExportError
from envdump.resources import ExportTargets, resolve_targets
from envdump.runner import ExportSummary, run

__all__ = [
    "ExportConfig",
    "ExportError",
    "ExportSummary",
    "ExportTargets",
    "Mode",
    "resolve_targets",
    "run",
]

__version__ = "0.1.0"
