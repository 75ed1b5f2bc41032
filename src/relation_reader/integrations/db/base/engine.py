"""
목적: DB 엔진 추상 인터페이스를 정의한다.
설명: 커넥션 풀 수명 주기, 커넥션 획득/반환, 드라이버별 플레이스홀더 변환, 식별자 이스케이프를 표준화한다.
디자인 패턴: 전략 패턴, 템플릿 메서드
참조: src/relation_reader/integrations/db/base/pool.py, src/relation_reader/integrations/db/base/sql_common.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence, Tuple

from relation_reader.integrations.db.base.pool import BaseConnectionPool
from relation_reader.integrations.db.base.sql_common import SQLIdentifierHelper
from relation_reader.shared.logging import Logger


class BaseDBEngine(ABC):
    """DB 엔진 인터페이스.

    하위 클래스는 풀 생성과 플레이스홀더 변환만 구현한다.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger
        self._pool: Optional[BaseConnectionPool] = None
        self._identifier = SQLIdentifierHelper()

    @property
    @abstractmethod
    def name(self) -> str:
        """엔진 이름을 반환한다."""

    @abstractmethod
    def _create_pool(self) -> BaseConnectionPool:
        """드라이버별 커넥션 풀을 생성한다."""

    @abstractmethod
    def adapt_placeholders(self, sql: str, values: Sequence[Any]) -> Tuple[str, List[Any]]:
        """`$1..$n` 플레이스홀더 SQL을 드라이버 형식으로 변환한다."""

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    @property
    def pool(self) -> Optional[BaseConnectionPool]:
        """현재 커넥션 풀을 반환한다. 연결 전이면 None이다."""

        return self._pool

    def connect(self) -> None:
        """커넥션 풀을 초기화한다. 이미 초기화되었으면 아무것도 하지 않는다."""

        if self._pool is not None:
            return
        self._pool = self._create_pool()
        self._logger.info(f"{self.name} 커넥션 풀이 초기화되었습니다.")

    def close(self) -> None:
        """커넥션 풀을 종료한다."""

        if self._pool is None:
            return
        self._pool.close()
        self._pool = None
        self._logger.info(f"{self.name} 커넥션 풀이 종료되었습니다.")

    def acquire(self) -> Any:
        return self._ensure_pool().acquire()

    def release(self, connection: Any) -> None:
        if self._pool is None:
            # 풀이 먼저 닫혔으면 커넥션만 정리한다.
            connection.close()
            return
        self._pool.release(connection)

    def escape_identifier(self, name: str) -> str:
        return self._identifier.quote_identifier(name)

    def _ensure_pool(self) -> BaseConnectionPool:
        if self._pool is None:
            raise RuntimeError(f"{self.name} 엔진이 연결되지 않았습니다. connect()를 먼저 호출하세요.")
        return self._pool

    def __enter__(self) -> "BaseDBEngine":
        self.connect()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
