"""
목적: SQLite 기반 읽기 엔진을 제공한다.
설명: 표준 sqlite3 커넥션을 LIFO 큐로 풀링하고 `$n` 플레이스홀더를 `?`로 변환한다.
디자인 패턴: 어댑터 패턴, 오브젝트 풀
참조: src/relation_reader/integrations/db/base/engine.py, src/relation_reader/integrations/db/base/pool.py
"""

from __future__ import annotations

import os
import sqlite3
import threading
from queue import Empty, LifoQueue
from typing import Any, List, Optional, Sequence, Tuple

from relation_reader.integrations.db.base.engine import BaseDBEngine
from relation_reader.integrations.db.base.pool import BaseConnectionPool
from relation_reader.integrations.db.base.sql_common import rewrite_positional
from relation_reader.shared.const import SharedConst
from relation_reader.shared.logging import Logger, create_default_logger

_MEMORY_DATABASE = ":memory:"


class SqliteConnectionPool(BaseConnectionPool):
    """sqlite3 커넥션 풀.

    유휴 커넥션을 재사용하고, max_size까지 새 커넥션을 만든 뒤에는 반환을 기다린다.

    Args:
        database_path: SQLite 파일 경로. `:memory:`는 커넥션마다 DB가 달라 크기를 1로 고정한다.
        max_size: 동시에 열 수 있는 최대 커넥션 수.
        acquire_timeout: 풀이 가득 찼을 때 반환을 기다리는 최대 초.
        busy_timeout_ms: SQLite 잠금 대기 시간.
    """

    def __init__(
        self,
        database_path: str,
        max_size: int = SharedConst.DEFAULT_POOL_MAX_SIZE,
        acquire_timeout: float = 5.0,
        busy_timeout_ms: int = 5000,
    ) -> None:
        if max_size < 1:
            raise ValueError("max_size는 1 이상이어야 합니다.")
        self._database_path = database_path
        self._max_size = 1 if database_path == _MEMORY_DATABASE else max_size
        self._acquire_timeout = acquire_timeout
        self._busy_timeout_ms = busy_timeout_ms
        self._idle: "LifoQueue[sqlite3.Connection]" = LifoQueue()
        self._created = 0
        self._closed = False
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        """지금까지 열린 커넥션 수를 반환한다."""

        return self._created

    @property
    def idle_count(self) -> int:
        return self._idle.qsize()

    def acquire(self) -> sqlite3.Connection:
        if self._closed:
            raise RuntimeError("SQLite 커넥션 풀이 이미 종료되었습니다.")
        try:
            return self._idle.get_nowait()
        except Empty:
            pass
        with self._lock:
            if self._created < self._max_size:
                connection = self._open()
                self._created += 1
                return connection
        try:
            return self._idle.get(timeout=self._acquire_timeout)
        except Empty as exc:
            raise RuntimeError(
                f"SQLite 커넥션 풀이 고갈되었습니다. (max_size={self._max_size})"
            ) from exc

    def release(self, connection: sqlite3.Connection) -> None:
        if self._closed:
            connection.close()
            with self._lock:
                self._created -= 1
            return
        self._idle.put(connection)

    def close(self) -> None:
        self._closed = True
        while True:
            try:
                connection = self._idle.get_nowait()
            except Empty:
                break
            connection.close()
            with self._lock:
                self._created -= 1

    def _open(self) -> sqlite3.Connection:
        return sqlite3.connect(
            self._database_path,
            timeout=self._busy_timeout_ms / 1000.0,
            check_same_thread=False,
        )


class SqliteEngine(BaseDBEngine):
    """SQLite 엔진 구현체."""

    def __init__(
        self,
        database_path: str = SharedConst.DEFAULT_SQLITE_PATH,
        pool_size: int = SharedConst.DEFAULT_POOL_MAX_SIZE,
        logger: Optional[Logger] = None,
        busy_timeout_ms: Optional[int] = None,
    ) -> None:
        super().__init__(logger or create_default_logger("SqliteEngine"))
        self._database_path = database_path
        self._pool_size = pool_size
        self._busy_timeout_ms = (
            busy_timeout_ms if busy_timeout_ms is not None else _read_busy_timeout_ms()
        )

    @property
    def name(self) -> str:
        return "sqlite"

    @property
    def database_path(self) -> str:
        return self._database_path

    def adapt_placeholders(self, sql: str, values: Sequence[Any]) -> Tuple[str, List[Any]]:
        return rewrite_positional(sql, values, lambda _index: "?")

    def _create_pool(self) -> BaseConnectionPool:
        return SqliteConnectionPool(
            self._database_path,
            max_size=self._pool_size,
            busy_timeout_ms=self._busy_timeout_ms,
        )


def _read_busy_timeout_ms() -> int:
    raw = os.getenv("SQLITE_BUSY_TIMEOUT_MS", "5000")
    try:
        value = int(raw)
    except ValueError:
        return 5000
    return max(0, value)
