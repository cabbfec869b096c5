import pytest

from envdump.errors import SessionError
from envdump.session import make_client, make_session


@pytest.fixture(autouse=True)
def empty_aws_config(monkeypatch, tmp_path):
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "credentials"))
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_PROFILE", raising=False)


def test_unknown_profile(config):
    with pytest.raises(SessionError, match="session error"):
        make_session(config(profile="does-not-exist"))


def test_session_without_profile(config):
    session = make_session(config(profile=None, region="eu-west-1"))

    assert session.region_name == "eu-west-1"
    assert make_client(session, "dynamodb").meta.region_name == "eu-west-1"
