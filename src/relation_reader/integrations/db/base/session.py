"""
목적: SQL 실행 세션을 제공한다.
설명: `$*` 플레이스홀더 번호 매기기, 드라이버 형식 변환, 풀 커넥션 획득 후 단 한 번 실행해 행 소스를 돌려준다.
디자인 패턴: 파사드
참조: src/relation_reader/integrations/db/base/engine.py, src/relation_reader/integrations/db/base/row_source.py
"""

from __future__ import annotations

import uuid
from typing import Any, List, Optional, Sequence

from relation_reader.integrations.db.base.engine import BaseDBEngine
from relation_reader.integrations.db.base.row_source import RowSource
from relation_reader.integrations.db.base.sql_common import number_placeholders
from relation_reader.shared.logging import LogContext, Logger, create_default_logger


class Session:
    """엔진 위에서 쿼리를 실행하는 세션.

    실행 오류는 커넥션을 반환한 뒤 드라이버 예외 그대로 전파한다.
    재시도나 트랜잭션 관리는 하지 않는다.

    Args:
        engine: 연결된 DB 엔진.
        logger: 주입 가능한 로거.
        session_id: 로그 상관관계용 식별자.
    """

    def __init__(
        self,
        engine: BaseDBEngine,
        logger: Optional[Logger] = None,
        session_id: Optional[str] = None,
    ) -> None:
        self._engine = engine
        self._session_id = session_id or uuid.uuid4().hex[:12]
        base_logger = logger or create_default_logger("Session")
        self._logger = base_logger.with_context(LogContext(session_id=self._session_id))

    @property
    def engine(self) -> BaseDBEngine:
        return self._engine

    @property
    def session_id(self) -> str:
        return self._session_id

    def escape_identifier(self, name: str) -> str:
        return self._engine.escape_identifier(name)

    def execute(self, sql: str, values: Optional[Sequence[Any]] = None) -> RowSource:
        """쿼리를 한 번 실행하고 열린 행 소스를 반환한다."""

        bound: List[Any] = list(values or [])
        numbered = number_placeholders(sql)
        driver_sql, driver_values = self._engine.adapt_placeholders(numbered, bound)
        metadata = {"sql": numbered, "value_count": len(bound)}
        connection = self._engine.acquire()
        cursor = None
        try:
            cursor = connection.cursor()
            cursor.execute(driver_sql, driver_values)
        except Exception as error:
            try:
                if cursor is not None:
                    cursor.close()
            finally:
                self._engine.release(connection)
            self._logger.error(f"쿼리 실행 실패: {error}", metadata=metadata)
            raise
        self._logger.debug("쿼리 실행", metadata=metadata)
        return RowSource(cursor, on_close=lambda: self._engine.release(connection))
