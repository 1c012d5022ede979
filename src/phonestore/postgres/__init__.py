"""PostgreSQL implementation of phone number storage."""

from phonestore.postgres.adapter import PgAdapter
from phonestore.postgres.options import (
    PgOptionFunc,
    PgOptions,
    build_dsn,
    options_from_settings,
    with_password,
    with_ssl_on,
    with_table_name,
)

__all__ = [
    "PgAdapter",
    "PgOptionFunc",
    "PgOptions",
    "build_dsn",
    "options_from_settings",
    "with_password",
    "with_ssl_on",
    "with_table_name",
]
