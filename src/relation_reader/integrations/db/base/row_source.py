"""
목적: 실행된 커서를 감싸는 순차 행 소스를 제공한다.
설명: 행을 컬럼 이름 기준 dict로 하나씩 꺼내며, 소진/오류/명시적 종료 시 커서를 닫고 커넥션을 풀에 돌려준다.
디자인 패턴: 이터레이터 패턴
참조: src/relation_reader/integrations/db/base/session.py, src/relation_reader/model/iterator.py
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional


class RowSource:
    """DB-API 커서 기반 단일 패스 행 소스.

    Args:
        cursor: execute가 끝난 DB-API 커서.
        on_close: 커서를 닫은 뒤 한 번 호출되는 정리 함수(커넥션 반환).
    """

    def __init__(self, cursor: Any, on_close: Callable[[], None]) -> None:
        self._cursor = cursor
        self._on_close = on_close
        self._closed = False
        description = cursor.description or []
        self._columns: List[str] = [column[0] for column in description]

    @property
    def columns(self) -> List[str]:
        return list(self._columns)

    @property
    def closed(self) -> bool:
        return self._closed

    def fetch_one(self) -> Optional[Dict[str, Any]]:
        """다음 행을 반환한다. 소진되면 자원을 정리하고 None을 반환한다."""

        if self._closed:
            return None
        try:
            row = self._cursor.fetchone()
        except Exception:
            self.close()
            raise
        if row is None:
            self.close()
            return None
        return dict(zip(self._columns, row))

    def fetch_column(self, name: str) -> List[Any]:
        """남은 행에서 한 컬럼 값을 모두 꺼내고 자원을 정리한다."""

        try:
            if name not in self._columns:
                raise KeyError(name)
            return [row[name] for row in self]
        finally:
            self.close()

    def close(self) -> None:
        """커서를 닫고 커넥션을 반환한다. 여러 번 호출해도 안전하다."""

        if self._closed:
            return
        self._closed = True
        try:
            self._cursor.close()
        finally:
            self._on_close()

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        while True:
            row = self.fetch_one()
            if row is None:
                return
            yield row
