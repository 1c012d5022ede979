"""Shared fixtures for phonestore tests."""

from collections import namedtuple
from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy.engine import Connection, Engine

from phonestore.postgres import PgAdapter

Row = namedtuple("Row", ["id", "number"])


@pytest.fixture
def mock_connection():
    """Create a mock SQLAlchemy connection that tracks whether it is closed."""
    connection = MagicMock(spec=Connection)
    connection.closed = False

    def close():
        connection.closed = True

    connection.close.side_effect = close
    connection.execution_options.return_value = connection
    return connection


@pytest.fixture
def mock_engine(mock_connection):
    """Create a mock engine handing out the mock connection."""
    engine = MagicMock(spec=Engine)
    engine.connect.return_value = mock_connection
    return engine


@pytest.fixture
def create_engine_mock(mock_engine):
    """Patch engine creation in the adapter module."""
    with patch(
        "phonestore.postgres.adapter.create_engine", return_value=mock_engine
    ) as create_engine:
        yield create_engine


@pytest.fixture
def adapter(create_engine_mock, mock_connection):
    """Create a PgAdapter on the mock connection, with setup calls cleared."""
    adapter = PgAdapter("localhost", "5432", "postgres", "phone_numbers")
    mock_connection.execute.reset_mock()
    return adapter


def executed_sql(connection) -> list[str]:
    """Return the SQL text of every statement run on the mock connection."""
    return [str(c.args[0]) for c in connection.execute.call_args_list]
