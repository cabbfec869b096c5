import boto3
import pytest
from botocore.stub import Stubber

from envdump.config import ExportConfig


def make_stubbed_client(service_name):
    client = boto3.client(
        service_name,
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    return client, Stubber(client)


class FakeSession:
    """Hands out pre-built clients instead of creating real ones."""

    def __init__(self, clients):
        self.clients = clients
        self.requested = []

    def client(self, service_name):
        self.requested.append(service_name)
        return self.clients[service_name]


@pytest.fixture
def config(tmp_path):
    def _make(**overrides):
        values = {"env_name": "dev", "output_root": tmp_path / "output"}
        values.update(overrides)
        return ExportConfig(**values)

    return _make


@pytest.fixture
def dynamodb_stub():
    client, stubber = make_stubbed_client("dynamodb")
    with stubber:
        yield client, stubber


@pytest.fixture
def s3_stub():
    client, stubber = make_stubbed_client("s3")
    with stubber:
        yield client, stubber


@pytest.fixture
def ssm_stub():
    client, stubber = make_stubbed_client("ssm")
    with stubber:
        yield client, stubber


@pytest.fixture
def cognito_stub():
    client, stubber = make_stubbed_client("cognito-idp")
    with stubber:
        yield client, stubber
