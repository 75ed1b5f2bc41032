"""
목적: PostgreSQL 기반 읽기 엔진을 제공한다.
설명: psycopg2 ThreadedConnectionPool로 커넥션을 풀링하고 `$n` 플레이스홀더를 `%s`로 변환한다.
디자인 패턴: 어댑터 패턴, 오브젝트 풀
참조: src/relation_reader/integrations/db/base/engine.py, src/relation_reader/integrations/db/base/pool.py
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from psycopg2.pool import PoolError, ThreadedConnectionPool

from relation_reader.integrations.db.base.engine import BaseDBEngine
from relation_reader.integrations.db.base.pool import BaseConnectionPool
from relation_reader.integrations.db.base.sql_common import rewrite_positional
from relation_reader.shared.const import SharedConst
from relation_reader.shared.logging import Logger, create_default_logger


class PostgresConnectionPool(BaseConnectionPool):
    """psycopg2 스레드 안전 커넥션 풀 래퍼.

    읽기 전용 계층이므로 커넥션은 autocommit으로 빌려준다.
    """

    def __init__(self, dsn: str, min_size: int, max_size: int) -> None:
        self._pool = ThreadedConnectionPool(min_size, max_size, dsn)

    def acquire(self) -> Any:
        try:
            connection = self._pool.getconn()
        except PoolError as exc:
            raise RuntimeError("PostgreSQL 커넥션 풀이 고갈되었습니다.") from exc
        connection.autocommit = True
        return connection

    def release(self, connection: Any) -> None:
        self._pool.putconn(connection, close=bool(connection.closed))

    def close(self) -> None:
        self._pool.closeall()


class PostgresEngine(BaseDBEngine):
    """PostgreSQL 엔진 구현체."""

    def __init__(
        self,
        dsn: Optional[str] = None,
        host: str = SharedConst.DEFAULT_POSTGRES_HOST,
        port: int = SharedConst.DEFAULT_POSTGRES_PORT,
        user: str = "postgres",
        password: Optional[str] = None,
        database: str = "postgres",
        scheme: str = "postgresql",
        pool_min_size: int = SharedConst.DEFAULT_POOL_MIN_SIZE,
        pool_max_size: int = SharedConst.DEFAULT_POOL_MAX_SIZE,
        logger: Optional[Logger] = None,
    ) -> None:
        super().__init__(logger or create_default_logger("PostgresEngine"))
        if not dsn:
            auth = f"{user}:{password}" if password else user
            dsn = f"{scheme}://{auth}@{host}:{port}/{database}"
        self._dsn = dsn
        self._pool_min_size = pool_min_size
        self._pool_max_size = pool_max_size

    @property
    def name(self) -> str:
        return "postgres"

    @property
    def dsn(self) -> str:
        return self._dsn

    def adapt_placeholders(self, sql: str, values: Sequence[Any]) -> Tuple[str, List[Any]]:
        # psycopg2는 값이 주어지면 %를 포맷 문자로 해석한다.
        return rewrite_positional(sql.replace("%", "%%"), values, lambda _index: "%s")

    def _create_pool(self) -> BaseConnectionPool:
        return PostgresConnectionPool(self._dsn, self._pool_min_size, self._pool_max_size)
