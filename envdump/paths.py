"""Output path construction.

Exported paths never contain the environment name: its first occurrence in a
table or bucket name is replaced with the ``envName`` placeholder so that
dumps from different environments line up file for file.
"""

import posixpath
from pathlib import Path

from envdump.errors import OutputWriteError

PLACEHOLDER = "envName"


def sanitize(name: str, env_name: str) -> str:
    """Replace the first occurrence of ``env_name`` in ``name``."""
    return name.replace(env_name, PLACEHOLDER, 1)


def table_export_path(output_root: Path, table_name: str, env_name: str) -> Path:
    return Path(output_root) / "dynamodb" / sanitize(f"{table_name}.json", env_name)


def bucket_export_dir(output_root: Path, bucket_name: str, env_name: str) -> Path:
    return Path(output_root) / "s3" / sanitize(bucket_name, env_name)


def object_export_path(
    output_root: Path, bucket_name: str, key: str, env_name: str
) -> Path:
    """Local path mirroring ``key`` under the bucket's export directory.

    Raises:
        OutputWriteError: if the key would resolve outside that directory.
    """
    relative = posixpath.normpath(key.lstrip("/"))
    if relative == ".." or relative.startswith("../"):
        raise OutputWriteError(
            f"object key {key!r} in bucket {bucket_name} escapes the export directory"
        )
    base = bucket_export_dir(output_root, bucket_name, env_name)
    if relative == ".":
        return base
    return base.joinpath(*relative.split("/"))


def users_export_path(output_root: Path) -> Path:
    return Path(output_root) / "cognito" / "users.json"
