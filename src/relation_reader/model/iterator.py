"""
목적: 조회 결과를 지연 생성하는 엔티티 이터레이터를 제공한다.
설명: 행 소스에서 한 행씩 꺼내 엔티티로 변환하며, 소진/종료/오류/GC 어느 경로에서도 커서를 정리한다.
디자인 패턴: 이터레이터 패턴
참조: src/relation_reader/integrations/db/base/row_source.py, src/relation_reader/model/read_queries.py
"""

from __future__ import annotations

import weakref
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from relation_reader.integrations.db.base.row_source import RowSource

EntityT = TypeVar("EntityT")


class ResultIterator(Generic[EntityT]):
    """단일 패스 결과 시퀀스.

    재시작할 수 없으며 한 소비자만 사용해야 한다. 다 읽기 전에 버리는 경우
    with 문이나 close()로 정리하는 것이 원칙이고, 놓친 경우에도 GC 시점에 정리된다.

    Args:
        rows: 실행된 쿼리의 행 소스.
        hydrate: 행 dict를 엔티티로 바꾸는 함수.
    """

    def __init__(self, rows: RowSource, hydrate: Callable[[Dict[str, Any]], EntityT]) -> None:
        self._rows = rows
        self._hydrate = hydrate
        self._peeked: Optional[Dict[str, Any]] = None
        self._has_peeked = False
        self._finalizer = weakref.finalize(self, rows.close)

    @property
    def closed(self) -> bool:
        return self._rows.closed and not self._has_peeked

    def __iter__(self) -> Iterator[EntityT]:
        return self

    def __next__(self) -> EntityT:
        row = self._next_row()
        if row is None:
            raise StopIteration
        try:
            return self._hydrate(row)
        except Exception:
            self.close()
            raise

    def is_empty(self) -> bool:
        """남은 행이 없는지 확인한다. 다음 행을 미리 읽어 두지만 소비하지는 않는다."""

        return self._peek() is None

    def current(self) -> Optional[EntityT]:
        """다음에 반환될 엔티티를 소비하지 않고 돌려준다."""

        row = self._peek()
        return None if row is None else self._hydrate(row)

    def extract(self) -> List[Dict[str, Any]]:
        """남은 행을 dict 목록으로 모두 꺼낸다."""

        rows: List[Dict[str, Any]] = []
        while True:
            row = self._next_row()
            if row is None:
                return rows
            rows.append(row)

    def close(self) -> None:
        self._peeked = None
        self._has_peeked = False
        self._finalizer()

    def _peek(self) -> Optional[Dict[str, Any]]:
        if not self._has_peeked:
            self._peeked = self._rows.fetch_one()
            self._has_peeked = True
        return self._peeked

    def _next_row(self) -> Optional[Dict[str, Any]]:
        if self._has_peeked:
            row = self._peeked
            self._peeked = None
            self._has_peeked = False
            return row
        return self._rows.fetch_one()

    def __enter__(self) -> "ResultIterator[EntityT]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
