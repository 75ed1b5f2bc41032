"""
목적: 페이지 단위 조회 결과를 표현한다.
설명: 현재 페이지 이터레이터와 전체 건수로 마지막 페이지, 이전/다음 여부, 결과 범위를 계산한다.
디자인 패턴: 값 객체
참조: src/relation_reader/model/read_queries.py
"""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from relation_reader.model.iterator import ResultIterator

EntityT = TypeVar("EntityT")


class Pager(Generic[EntityT]):
    """페이지 조회 결과.

    Args:
        iterator: 현재 페이지의 결과 이터레이터.
        count: 조건에 맞는 전체 행 수.
        max_per_page: 페이지당 최대 행 수.
        page: 1부터 시작하는 현재 페이지 번호.
    """

    def __init__(self, iterator: ResultIterator[EntityT], count: int, max_per_page: int, page: int) -> None:
        self.iterator = iterator
        self.count = count
        self.max_per_page = max_per_page
        self.page = page

    @property
    def last_page(self) -> int:
        if self.count == 0:
            return 1
        return math.ceil(self.count / self.max_per_page)

    @property
    def is_next_page(self) -> bool:
        return self.page < self.last_page

    @property
    def is_previous_page(self) -> bool:
        return self.page > 1

    @property
    def result_min(self) -> int:
        """현재 페이지 첫 행의 1 기반 순번. 결과가 없으면 0이다."""

        return min(1 + self.max_per_page * (self.page - 1), self.count)

    @property
    def result_max(self) -> int:
        return min(self.count, self.page * self.max_per_page)
