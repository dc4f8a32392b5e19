"""Connection profile model.

The profile is assembled outside the exporter (a YAML/JSON file, a secrets
store). The exporter only reads it when live execution is requested.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field as PydanticField
from sqlalchemy.engine import URL, make_url


class ConnectionProfile(BaseModel):
    """Credentials and address of a live database.

    Examples:
        >>> profile = ConnectionProfile(
        ...     driver="iris",
        ...     host="db.internal",
        ...     port=5050,
        ...     database="refine",
        ...     user="loader",
        ...     password="secret",
        ... )
        >>> profile.url
        'iris://db.internal:5050/refine'

        SQLite only needs a database path:
        >>> ConnectionProfile(driver="sqlite", database="/tmp/export.db")
    """

    driver: Optional[str] = PydanticField(
        None,
        description="SQLAlchemy dialect+driver name (e.g., 'iris', 'postgresql+psycopg'). "
        "Defaults to the dialect's driver.",
    )

    host: Optional[str] = PydanticField(None, description="Database host")

    port: Optional[int] = PydanticField(None, description="Database port", gt=0)

    database: Optional[str] = PydanticField(
        None,
        description="Database name, or file path for SQLite",
    )

    user: Optional[str] = PydanticField(None, description="Username")

    password: Optional[str] = PydanticField(
        None,
        description="Password",
        repr=False,
    )

    connection_string: Optional[str] = PydanticField(
        None,
        description="Full SQLAlchemy URL; overrides the individual fields",
        repr=False,
    )

    model_config = {"extra": "forbid"}

    def with_driver(self, driver: str) -> ConnectionProfile:
        """Return a copy with ``driver`` filled in when it is not set."""
        if self.driver:
            return self
        return self.model_copy(update={"driver": driver})

    @property
    def url(self) -> str:
        """Connection address as ``<scheme>://<host>:<port>/<database>``.

        Credentials are never part of this string; it is safe to log.
        """
        if self.connection_string:
            return make_url(self.connection_string).render_as_string(hide_password=True)
        scheme = self.driver or "unknown"
        if self.host is None:
            return f"{scheme}:///{self.database or ''}"
        port = f":{self.port}" if self.port is not None else ""
        return f"{scheme}://{self.host}{port}/{self.database or ''}"

    def sqlalchemy_url(self) -> URL:
        """Build the SQLAlchemy URL, credentials included.

        Returns:
            sqlalchemy.engine.URL

        Raises:
            ValueError: If neither driver nor connection_string is set
        """
        if self.connection_string:
            return make_url(self.connection_string)
        if not self.driver:
            raise ValueError("Connection profile has no driver")
        return URL.create(
            self.driver,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )
