# ==============================================================================
# MYSQL ADAPTER - Async MySQL with aiomysql
# ==============================================================================

from __future__ import annotations

import logging
import re
from urllib.parse import parse_qsl

from sqlalchemy.engine import URL

from catalog_api.core.exceptions import ConfigurationError
from catalog_api.database.adapters.sqlalchemy_adapter import SQLAlchemyAdapter

logger = logging.getLogger(__name__)

MYSQL_SCHEME = "mysql+aiomysql"

# user:password@tcp(host:port)/dbname?charset=utf8mb4
_NETWORK_DSN = re.compile(
    r"^(?P<user>[^:@/]*)(?::(?P<password>[^@]*))?@"
    r"(?:tcp\((?P<host>[^:)]*)(?::(?P<port>\d+))?\))?"
    r"/(?P<database>[^?]*)(?:\?(?P<query>.*))?$"
)


def to_mysql_url(dsn: str) -> str:
    """
    Convert a MySQL DSN to an aiomysql SQLAlchemy URL.

    Accepts ``mysql://`` URLs and the ``user:pass@tcp(host:3306)/db``
    network form. Only the ``charset`` query option is carried over.

    Raises:
        ConfigurationError: If the DSN is neither form
    """
    if "://" in dsn:
        scheme, rest = dsn.split("://", 1)
        if scheme not in {"mysql", MYSQL_SCHEME}:
            raise ConfigurationError(f"Not a MySQL DSN: {scheme}://...")
        return f"{MYSQL_SCHEME}://{rest}"

    match = _NETWORK_DSN.match(dsn)
    if not match:
        raise ConfigurationError("Malformed MySQL DSN")

    options = dict(parse_qsl(match.group("query") or ""))
    query = {"charset": options["charset"]} if "charset" in options else {}
    port = match.group("port")
    return URL.create(
        MYSQL_SCHEME,
        username=match.group("user") or None,
        password=match.group("password"),
        host=match.group("host") or "localhost",
        port=int(port) if port else None,
        database=match.group("database") or None,
        query=query,
    ).render_as_string(hide_password=False)


class MySQLAdapter(SQLAlchemyAdapter):
    """MySQL adapter using aiomysql."""

    dialect_name = "mysql"

    def __init__(
        self,
        dsn: str,
        echo: bool = False,
        slow_query_ms: int = 200,
        pool_size: int = 10,
        max_overflow: int = 20,
        pool_recycle: int = 3600,
    ) -> None:
        super().__init__(
            database_url=to_mysql_url(dsn),
            echo=echo,
            slow_query_ms=slow_query_ms,
            engine_options={
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": pool_recycle,
                "pool_pre_ping": True,
            },
        )
