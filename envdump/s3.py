"""S3 bucket export.

Objects are downloaded to ``<output-root>/s3/<bucket>/<key>``; ``/`` in keys
becomes directory structure.
"""

import logging
from contextlib import closing
from pathlib import Path
from typing import Any, Iterable

from botocore.exceptions import BotoCoreError, ClientError

from envdump.config import ExportConfig
from envdump.errors import OutputWriteError, RemoteCallError
from envdump.files import write_chunks
from envdump.paths import object_export_path

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def list_keys(client: Any, bucket_name: str, paginate: bool = True) -> list[str]:
    try:
        if paginate:
            keys = []
            paginator = client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=bucket_name):
                keys.extend(obj["Key"] for obj in page.get("Contents", []))
            return keys

        response = client.list_objects_v2(Bucket=bucket_name)
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError(f"failed to list s3 objects in {bucket_name}: {e}") from e

    if response.get("IsTruncated"):
        logger.warning(
            f"Bucket {bucket_name} has more than one page of objects; "
            "only the first page was exported"
        )
    return [obj["Key"] for obj in response.get("Contents", [])]


def download_object(client: Any, bucket_name: str, key: str, config: ExportConfig) -> Path:
    """Download one object into its mirrored local path."""
    path = object_export_path(config.output_root, bucket_name, key, config.env_name)
    if key.endswith("/"):
        # folder marker, nothing to download
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"failed to create directories {path}: {e}") from e
        return path

    try:
        response = client.get_object(Bucket=bucket_name, Key=key)
        with closing(response["Body"]) as body:
            size = write_chunks(path, body.iter_chunks(CHUNK_SIZE))
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError(
            f"failed to download {key} from bucket {bucket_name}: {e}"
        ) from e
    logger.debug(f"Downloaded s3://{bucket_name}/{key} ({size} bytes) to {path}")
    return path


def export_bucket(client: Any, bucket_name: str, config: ExportConfig) -> list[Path]:
    keys = list_keys(client, bucket_name, paginate=config.paginate)
    paths = [download_object(client, bucket_name, key, config) for key in keys]
    logger.info(f"Downloaded {len(paths)} objects from bucket '{bucket_name}'")
    return paths


def export_buckets(client: Any, bucket_names: Iterable[str], config: ExportConfig) -> list[Path]:
    paths = []
    for name in bucket_names:
        paths.extend(export_bucket(client, name, config))
    return paths
