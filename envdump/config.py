"""Run configuration passed explicitly to every exporter."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DEFAULT_PROFILE = "ingenio-dev"
DEFAULT_OUTPUT_ROOT = Path("../output")


class Mode(str, Enum):
    ALL = "all"
    DYNAMODB = "dynamodb"
    S3 = "s3"
    COGNITO = "cognito"

    def includes(self, other: "Mode") -> bool:
        return self is Mode.ALL or self is other


@dataclass(frozen=True)
class ExportConfig:
    env_name: str
    mode: Mode = Mode.ALL
    output_root: Path = DEFAULT_OUTPUT_ROOT
    profile: str | None = DEFAULT_PROFILE
    region: str | None = None
    # False reads only the first page of every scan and listing
    paginate: bool = True
    dry_run: bool = False
