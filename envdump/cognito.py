"""Cognito user pool export.

The pool id is looked up in SSM Parameter Store under ``/<env>/userPoolId``;
every user in the pool is flattened and written as compact JSON to
``<output-root>/cognito/users.json``.
"""

import logging
from pathlib import Path
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from envdump.config import ExportConfig
from envdump.errors import RemoteCallError, SerializationError
from envdump.files import write_bytes
from envdump.paths import users_export_path
from envdump.serialize import dumps_compact

logger = logging.getLogger(__name__)


def user_pool_parameter(env_name: str) -> str:
    return f"/{env_name}/userPoolId"


def get_user_pool_id(ssm_client: Any, env_name: str) -> str:
    name = user_pool_parameter(env_name)
    try:
        response = ssm_client.get_parameter(Name=name, WithDecryption=True)
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError(f"failed to get parameter {name}: {e}") from e
    return response["Parameter"]["Value"]


def list_users(cognito_client: Any, user_pool_id: str, paginate: bool = True) -> list[dict[str, Any]]:
    try:
        if paginate:
            users = []
            paginator = cognito_client.get_paginator("list_users")
            for page in paginator.paginate(UserPoolId=user_pool_id):
                users.extend(page.get("Users", []))
            return users

        response = cognito_client.list_users(UserPoolId=user_pool_id)
    except (ClientError, BotoCoreError) as e:
        raise RemoteCallError(f"failed to list users in pool {user_pool_id}: {e}") from e

    if response.get("PaginationToken"):
        logger.warning(
            f"User pool {user_pool_id} has more than one page of users; "
            "only the first page was exported"
        )
    return response.get("Users", [])


def flatten_user(user: dict[str, Any]) -> dict[str, Any]:
    """Reduce a ListUsers entry to the exported fields."""
    return {
        "Username": user.get("Username"),
        "UserCreateDate": user.get("UserCreateDate"),
        "UserLastModifiedDate": user.get("UserLastModifiedDate"),
        "Enabled": user.get("Enabled"),
        "UserStatus": user.get("UserStatus"),
        "Attributes": [
            {"Name": attr["Name"], "Value": attr.get("Value")}
            for attr in user.get("Attributes", [])
        ],
    }


def export_users(ssm_client: Any, cognito_client: Any, config: ExportConfig) -> Path:
    user_pool_id = get_user_pool_id(ssm_client, config.env_name)
    users = [
        flatten_user(u)
        for u in list_users(cognito_client, user_pool_id, paginate=config.paginate)
    ]
    path = users_export_path(config.output_root)
    try:
        data = dumps_compact(users)
    except SerializationError as e:
        raise SerializationError(f"users of pool {user_pool_id} for {path}: {e}") from e
    write_bytes(path, data)
    logger.info(f"Dumped {len(users)} users from pool {user_pool_id} to {path}")
    return path
