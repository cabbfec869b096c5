from pathlib import Path

import pytest

from envdump.errors import OutputWriteError
from envdump.paths import (
    object_export_path,
    sanitize,
    table_export_path,
    users_export_path,
)
from envdump.resources import resolve_targets

ROOT = Path("out")


def test_table_path_uses_placeholder():
    assert table_export_path(ROOT, "dev-requests", "dev") == ROOT / "dynamodb" / "envName-requests.json"


def test_object_path_mirrors_key():
    path = object_export_path(ROOT, "ingenio.ca-dev-documents-bucket", "a/b.txt", "dev")

    assert path == ROOT / "s3" / "ingenio.ca-envName-documents-bucket" / "a" / "b.txt"


def test_only_first_occurrence_is_replaced():
    assert sanitize("dev-devices_api", "dev") == "envName-devices_api"


def test_output_root_is_never_rewritten():
    path = object_export_path(Path("s3root"), "ingenio.ca-s3-files-bucket", "k", "s3")

    assert path == Path("s3root") / "s3" / "ingenio.ca-envName-files-bucket" / "k"


def test_paths_agree_across_environments():
    dev = resolve_targets("dev")
    prod = resolve_targets("production")

    for dev_table, prod_table in zip(dev.tables, prod.tables):
        assert table_export_path(ROOT, dev_table, "dev") == table_export_path(ROOT, prod_table, "production")
    for dev_bucket, prod_bucket in zip(dev.buckets, prod.buckets):
        assert object_export_path(ROOT, dev_bucket, "x", "dev") == object_export_path(
            ROOT, prod_bucket, "x", "production"
        )


def test_table_paths_are_distinct():
    tables = resolve_targets("dev").tables

    assert len({table_export_path(ROOT, t, "dev") for t in tables}) == len(tables)


def test_sanitize_is_idempotent():
    once = sanitize("ingenio.ca-dev-files-bucket", "dev")

    assert sanitize(once, "dev") == once


@pytest.mark.parametrize("key", ["../escape.txt", "a/../../escape.txt"])
def test_key_escaping_bucket_dir_is_rejected(key):
    with pytest.raises(OutputWriteError):
        object_export_path(ROOT, "ingenio.ca-dev-files-bucket", key, "dev")


def test_leading_slash_stays_inside_bucket_dir():
    path = object_export_path(ROOT, "ingenio.ca-dev-files-bucket", "/abs/key", "dev")

    assert path == ROOT / "s3" / "ingenio.ca-envName-files-bucket" / "abs" / "key"


def test_users_path():
    assert users_export_path(ROOT) == ROOT / "cognito" / "users.json"
