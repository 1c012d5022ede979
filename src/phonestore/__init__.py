"""Phone number persistence behind a storage-agnostic interface."""

from phonestore.base import PhoneNumberStorage
from phonestore.config import PostgresSettings, get_db_settings
from phonestore.exceptions import (
    StorageConnectionError,
    StorageError,
    StorageQueryError,
)
from phonestore.postgres import (
    PgAdapter,
    with_password,
    with_ssl_on,
    with_table_name,
)
from phonestore.schemas import PhoneNumber

__all__ = [
    "PgAdapter",
    "PhoneNumber",
    "PhoneNumberStorage",
    "PostgresSettings",
    "StorageConnectionError",
    "StorageError",
    "StorageQueryError",
    "get_db_settings",
    "with_password",
    "with_ssl_on",
    "with_table_name",
]
