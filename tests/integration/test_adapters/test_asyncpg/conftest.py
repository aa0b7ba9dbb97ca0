import os
from collections.abc import AsyncGenerator

import pytest

from sqlfacade.adapters.asyncpg import AsyncpgConfig
from sqlfacade.driver import MainConnection


@pytest.fixture
def asyncpg_dsn() -> str:
    dsn = os.environ.get("SQLFACADE_TEST_DSN")
    if not dsn:
        pytest.skip("SQLFACADE_TEST_DSN is not set")
    return dsn


@pytest.fixture
async def asyncpg_connection(asyncpg_dsn: str) -> "AsyncGenerator[MainConnection, None]":
    """Connection with a ``users`` table whose ``id`` is mapped for RETURNING."""
    config = AsyncpgConfig(
        connection_config=asyncpg_dsn,
        options={"autoinc_mapping": {"users": "id"}, "use_returning_all": True, "in_memory_cursor": True},
    )
    async with config.provide_connection() as connection:
        await connection.script("""
            DROP TABLE IF EXISTS users;
            DROP TABLE IF EXISTS posts;
            CREATE TABLE users (id SERIAL PRIMARY KEY, name TEXT NOT NULL);
            CREATE TABLE posts (posts_id SERIAL PRIMARY KEY, title TEXT NOT NULL);
        """)
        yield connection
        await connection.script("DROP TABLE IF EXISTS users; DROP TABLE IF EXISTS posts;")
