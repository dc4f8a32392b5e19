"""tabsql dialects package.

Dialects are looked up by identifier in ``DIALECTS``. The registry is
explicit: adding a dialect means adding a class here (or calling
``register_dialect``), never resolving classes by dotted name at export
time.
"""

from __future__ import annotations

from typing import Optional, Union

from tabsql.core.dialect import Dialect
from tabsql.dialects.generic import GenericDialect
from tabsql.dialects.iris import IRISDialect
from tabsql.dialects.postgres import PostgresDialect
from tabsql.dialects.sqlite import SQLiteDialect
from tabsql.exceptions import ConfigurationError

DIALECTS: dict[str, type[Dialect]] = {
    "generic": GenericDialect,
    "sqlite": SQLiteDialect,
    "postgres": PostgresDialect,
    "iris": IRISDialect,
}

# postgresql+psycopg -> postgres
ALIASES = {
    "postgresql": "postgres",
    "sql": "generic",
}


def register_dialect(dialect_class: type[Dialect], name: Optional[str] = None) -> None:
    """Add a dialect to the registry.

    Args:
        dialect_class: Dialect subclass
        name: Registry identifier (defaults to dialect_class.name)

    Raises:
        ConfigurationError: If no identifier is available
    """
    key = (name or dialect_class.name).lower()
    if not key:
        raise ConfigurationError(f"{dialect_class.__name__} has no dialect name")
    DIALECTS[key] = dialect_class


def get_dialect(dialect: Union[str, Dialect, None] = None) -> Dialect:
    """Resolve a dialect identifier to a dialect instance.

    Args:
        dialect: Identifier, an existing instance, or None for the configured default

    Returns:
        Dialect instance

    Raises:
        ConfigurationError: If the identifier is not registered
    """
    if isinstance(dialect, Dialect):
        return dialect
    if dialect is None:
        from tabsql.core.config import config

        dialect = config.dialect

    key = dialect.lower().split("+")[0]
    key = ALIASES.get(key, key)
    if key not in DIALECTS:
        raise ConfigurationError(
            f"Unknown dialect '{dialect}'. Available dialects: {', '.join(sorted(DIALECTS))}"
        )
    return DIALECTS[key]()


__all__ = [
    "DIALECTS",
    "Dialect",
    "GenericDialect",
    "IRISDialect",
    "PostgresDialect",
    "SQLiteDialect",
    "get_dialect",
    "register_dialect",
]
