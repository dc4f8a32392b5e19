"""Generic SQL dialect.

Produces standard SQL text and never executes it.
"""

from __future__ import annotations

from tabsql.core.dialect import Dialect


class GenericDialect(Dialect):
    """Text-only dialect with ANSI quoting and VARCHAR(255) text columns."""

    name = "generic"
