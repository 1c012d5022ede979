"""
Optional connection settings for the PostgreSQL adapter.

Options are plain functions that mutate a shared PgOptions accumulator.
They are applied in call order, so a later option wins over an earlier one.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from psycopg2.extensions import make_dsn

if TYPE_CHECKING:
    from phonestore.config import PostgresSettings

SSL_MODE_DISABLED = "disable"
SSL_MODE_ENABLED = "require"


@dataclass
class PgOptions:
    """Optional settings collected before connecting."""

    password: str | None = None
    table_name: str | None = None
    ssl_mode: str = SSL_MODE_DISABLED


PgOptionFunc = Callable[[PgOptions], None]


def with_password(password: str) -> PgOptionFunc:
    """Connect with a password; by default none is sent."""

    def apply(options: PgOptions) -> None:
        options.password = password

    return apply


def with_table_name(table_name: str) -> PgOptionFunc:
    """Use a table name other than the database name."""

    def apply(options: PgOptions) -> None:
        options.table_name = table_name

    return apply


def with_ssl_on() -> PgOptionFunc:
    """Require TLS on the connection; by default it is disabled."""

    def apply(options: PgOptions) -> None:
        options.ssl_mode = SSL_MODE_ENABLED

    return apply


def apply_options(options: PgOptions, opts: Iterable[PgOptionFunc]) -> PgOptions:
    """Apply each option function to the accumulator in order."""
    for opt in opts:
        opt(options)
    return options


def build_dsn(
    host: str,
    port: str | int,
    user: str,
    db_name: str,
    options: PgOptions,
) -> str:
    """
    Build a libpq connection string from the connection parameters.

    Pairs always appear in the order host, port, dbname, user, sslmode,
    then password when one was given. The table name is not a connection
    parameter and is never included.

    Args:
        host: Database host
        port: Database port
        user: Database user
        db_name: Database name
        options: Accumulated optional settings

    Returns:
        str: Space-separated key=value pairs, values quoted where needed
    """
    # make_dsn keeps keyword order and drops None values
    return make_dsn(
        host=host,
        port=port,
        dbname=db_name,
        user=user,
        sslmode=options.ssl_mode,
        password=options.password,
    )


def options_from_settings(settings: "PostgresSettings") -> list[PgOptionFunc]:
    """
    Translate the optional database settings into option functions.

    Args:
        settings: Database settings

    Returns:
        list[PgOptionFunc]: One option per optional setting that is set
    """
    opts: list[PgOptionFunc] = []
    if settings.password is not None:
        opts.append(with_password(settings.password))
    if settings.table_name:
        opts.append(with_table_name(settings.table_name))
    if settings.ssl_enabled:
        opts.append(with_ssl_on())
    return opts
