"""
PostgreSQL storage adapter for phone numbers.

Opens one long-lived SQLAlchemy connection from a libpq connection string,
verifies it, creates the phone number table when missing, and maps each
storage operation to a parameterized SQL statement.
"""

from collections.abc import Iterator, Sequence
from contextlib import contextmanager

import psycopg2
from psycopg2.errors import DuplicateTable
from pydantic import ValidationError
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, CursorResult, Engine
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    ProgrammingError,
    ResourceClosedError,
    SQLAlchemyError,
)

from phonestore.base import PhoneNumberStorage
from phonestore.config import PostgresSettings, get_db_settings
from phonestore.exceptions import StorageConnectionError, StorageQueryError
from phonestore.postgres.options import (
    PgOptionFunc,
    PgOptions,
    apply_options,
    build_dsn,
    options_from_settings,
)
from phonestore.schemas import PhoneNumber
from phonestore.utils.logger import logger

_CONNECTION_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    ResourceClosedError,
)


class PgAdapter(PhoneNumberStorage):
    """Phone number storage backed by a PostgreSQL table."""

    def __init__(
        self,
        host: str,
        port: str | int,
        user: str,
        db_name: str,
        *opts: PgOptionFunc,
        echo: bool = False,
    ):
        """
        Connect to the database and make sure the table exists.

        Args:
            host: Database host
            port: Database port
            user: Database user
            db_name: Database name, also the default table name
            *opts: Option functions such as with_password or with_table_name
            echo: Echo SQL statements to logs

        Raises:
            StorageConnectionError: If the connection or liveness check fails
            StorageQueryError: If the table cannot be created for any reason
                other than already existing
        """
        options = apply_options(PgOptions(), opts)
        dsn = build_dsn(host, port, user, db_name, options)

        self.table_name = options.table_name or db_name
        self.db_name = db_name

        logger.info(
            "Connecting to PostgreSQL",
            host=host,
            port=str(port),
            database=db_name,
            user=user,
            sslmode=options.ssl_mode,
        )

        self._engine: Engine = create_engine(
            "postgresql+psycopg2://",
            creator=lambda: psycopg2.connect(dsn),
            echo=echo,
        )
        self._conn: Connection | None = None

        try:
            with self._translate_errors(f"connect to database {db_name} at {host}:{port}"):
                self._conn = self._engine.connect().execution_options(
                    isolation_level="AUTOCOMMIT"
                )
                self._conn.execute(text("SELECT 1"))
            self._create_table()
        except Exception:
            self.close()
            raise

    @classmethod
    def from_settings(cls, settings: PostgresSettings | None = None) -> "PgAdapter":
        """
        Build an adapter from database settings.

        Args:
            settings: Settings to use; the global settings when omitted

        Returns:
            PgAdapter: Connected adapter
        """
        settings = settings or get_db_settings()
        return cls(
            settings.host,
            settings.port,
            settings.username,
            settings.name,
            *options_from_settings(settings),
            echo=settings.echo,
        )

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        """Re-raise SQLAlchemy failures as storage errors with context."""
        try:
            yield
        except _CONNECTION_ERRORS as e:
            logger.error(f"Failed to {action}", error=str(e), table=self.table_name)
            raise StorageConnectionError(f"failed to {action}", e) from e
        except SQLAlchemyError as e:
            logger.error(f"Failed to {action}", error=str(e), table=self.table_name)
            raise StorageQueryError(f"failed to {action}", e) from e

    def _execute(
        self, action: str, statement: str, params: dict | list[dict] | None = None
    ) -> CursorResult:
        if self._conn is None or self._conn.closed:
            raise StorageConnectionError(f"failed to {action}: connection is closed")

        with self._translate_errors(action):
            return self._conn.execute(text(statement), params)

    def _create_table(self) -> None:
        statement = f"CREATE TABLE {self.table_name} (id SERIAL PRIMARY KEY, number TEXT)"
        with self._translate_errors(f"create table {self.table_name}"):
            try:
                self._conn.execute(text(statement))
            except ProgrammingError as e:
                if not isinstance(e.orig, DuplicateTable):
                    raise
                logger.info("Table already exists", table=self.table_name)
                return
        logger.info("Created table", table=self.table_name)

    def create_phone_number(self, number: str) -> int:
        """Insert a phone number and return the identifier the database assigned."""
        action = "create phone number"
        result = self._execute(
            action,
            f"INSERT INTO {self.table_name} (number) VALUES (:number) RETURNING id",
            {"number": number},
        )
        with self._translate_errors(action):
            return result.scalar_one()

    def get_phone_numbers(self) -> list[PhoneNumber]:
        """Return every phone number ordered by identifier."""
        # Updates write new row versions, so physical order is not stable
        result = self._execute(
            "list phone numbers",
            f"SELECT id, number FROM {self.table_name} ORDER BY id",
        )

        numbers: list[PhoneNumber] = []
        try:
            for row in result:
                numbers.append(PhoneNumber.model_validate(row))
        except ValidationError as e:
            logger.error(
                "Could not transform rows into phone numbers",
                error=str(e),
                table=self.table_name,
            )
            raise StorageQueryError("could not transform rows into phone numbers", e) from e
        except SQLAlchemyError as e:
            logger.error(
                "Error while iterating over rows", error=str(e), table=self.table_name
            )
            raise StorageQueryError("error while iterating over rows", e) from e

        return numbers

    def update_phone_number(self, number: PhoneNumber) -> None:
        """Replace the stored value for ``number.id``."""
        self._execute(
            "update phone number",
            f"UPDATE {self.table_name} SET number=:number WHERE id=:id",
            {"number": number.number, "id": number.id},
        )

    def remove_phone_number(self, id: int) -> None:
        """Delete the record with the given identifier, if present."""
        self._execute(
            "remove phone number",
            f"DELETE FROM {self.table_name} WHERE id=:id",
            {"id": id},
        )

    def insert_phone_numbers(self, numbers: Sequence[PhoneNumber]) -> None:
        """
        Insert several phone numbers at once.

        Only the values are written; the database assigns new identifiers
        and any ``id`` on the given records is ignored.

        Args:
            numbers: Records whose values should be stored
        """
        if not numbers:
            return
        self._execute(
            "insert phone numbers",
            f"INSERT INTO {self.table_name} (number) VALUES (:number)",
            [{"number": n.number} for n in numbers],
        )

    def close(self) -> None:
        """Close the connection and dispose of the engine. Safe to call twice."""
        if self._conn is not None and not self._conn.closed:
            self._conn.close()
            logger.info("Closed database connection", database=self.db_name)
        self._engine.dispose()
