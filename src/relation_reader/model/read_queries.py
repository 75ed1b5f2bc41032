"""
목적: 모델 인스턴스용 기본 읽기 쿼리를 제공한다.
설명: 릴레이션 구조와 조건으로 SELECT 문을 조립해 세션에서 한 번 실행하고 엔티티 이터레이터나 스칼라를 돌려준다.
디자인 패턴: 믹스인, 템플릿 메서드
참조: src/relation_reader/model/model.py, src/relation_reader/integrations/db/query_builder/where.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from relation_reader.integrations.db.base.row_source import RowSource
from relation_reader.integrations.db.query_builder import Projection, SuffixLike, TrustedFragment, Where
from relation_reader.model.exceptions import (
    AmbiguousMatchError,
    InconsistentResultError,
    InvalidPrimaryKeyError,
)
from relation_reader.model.iterator import ResultIterator
from relation_reader.model.pager import Pager
from relation_reader.model.structure import RelationStructure

ConditionLike = Union[Where, str]


class ReadQueries(ABC):
    """읽기 쿼리 믹스인.

    사용하는 클래스는 structure, create_projection(), escape_identifier(),
    execute(), query()를 구현해야 한다. suffix 인자는 이스케이프 없이 그대로 붙으므로
    ORDER BY/LIMIT처럼 호출 코드가 직접 쓴 텍스트만 넘겨야 한다.
    """

    @property
    @abstractmethod
    def structure(self) -> RelationStructure:
        """조회 대상 릴레이션 구조를 반환한다."""

    @abstractmethod
    def create_projection(self) -> Projection:
        """SELECT 절 프로젝션을 만든다."""

    @abstractmethod
    def escape_identifier(self, name: str) -> str:
        """식별자를 이스케이프한다."""

    @abstractmethod
    def execute(self, sql: str, values: Sequence[Any], operation: str) -> RowSource:
        """연산 이름과 함께 SQL을 한 번 실행하고 행 소스를 반환한다."""

    @abstractmethod
    def query(
        self,
        sql: str,
        values: Optional[Sequence[Any]] = None,
        operation: str = "query",
    ) -> ResultIterator:
        """SQL을 실행하고 엔티티 이터레이터를 반환한다."""

    def find_all(self, suffix: SuffixLike = None) -> ResultIterator:
        """릴레이션 전체를 조회한다."""

        sql = f"select {self.create_projection().format_fields()} from {self.structure.relation}"
        return self.query(_append_suffix(sql, suffix), [], operation="find_all")

    def find_where(
        self,
        where: ConditionLike,
        values: Optional[Sequence[Any]] = None,
        suffix: SuffixLike = "",
    ) -> ResultIterator:
        """조건에 맞는 행을 조회한다.

        where가 Where 객체이면 그 바인딩 값을 쓰고 values 인자는 무시한다.
        문자열이면 values가 플레이스홀더 순서와 맞아야 한다.
        """

        condition, bound = _resolve_condition(where, values)
        sql = (
            f"select {self.create_projection().format_fields_with_field_alias()}"
            f" from {self.structure.relation} where {condition}"
        )
        return self.query(_append_suffix(sql, suffix), bound, operation="find_where")

    def find_by_pk(self, primary_key: Mapping[str, Any]) -> Optional[Any]:
        """기본 키로 엔티티 하나를 조회한다. 없으면 None을 반환한다.

        Raises:
            InvalidPrimaryKeyError: 선언된 기본 키 필드가 빠진 경우. SQL 실행 전에 발생한다.
            AmbiguousMatchError: 두 행 이상이 일치한 경우.
        """

        self._check_primary_key(primary_key)
        key_values = {field: primary_key[field] for field in self.structure.primary_key}
        where = self._get_where_from(key_values)
        with self.find_where(where) as iterator:
            entity = next(iterator, None)
            if entity is None:
                return None
            if not iterator.is_empty():
                raise AmbiguousMatchError(self.structure.relation, key_values)
        return entity

    def count_where(self, where: ConditionLike, values: Optional[Sequence[Any]] = None) -> int:
        """조건에 맞는 행 수를 반환한다."""

        condition, bound = _resolve_condition(where, values)
        sql = f"select count(*) as count from {self.structure.relation} where {condition}"
        return int(self.fetch_single_value(sql, bound, "count", operation="count_where"))

    def exists_where(self, where: ConditionLike, values: Optional[Sequence[Any]] = None) -> bool:
        """조건에 맞는 행이 하나라도 있는지 확인한다."""

        condition, bound = _resolve_condition(where, values)
        sql = (
            f"select exists (select true from {self.structure.relation}"
            f" where {condition}) as result"
        )
        return bool(self.fetch_single_value(sql, bound, "result", operation="exists_where"))

    def paginate_find_where(
        self,
        where: ConditionLike,
        item_per_page: int,
        page: int = 1,
        values: Optional[Sequence[Any]] = None,
        suffix: SuffixLike = "",
    ) -> Pager:
        """조건 조회 결과의 한 페이지와 전체 건수를 함께 반환한다."""

        if item_per_page < 1:
            raise ValueError("item_per_page는 1 이상이어야 합니다.")
        if page < 1:
            raise ValueError("page는 1 이상이어야 합니다.")
        count = self.count_where(where, values)
        window = f"limit {item_per_page} offset {item_per_page * (page - 1)}"
        base = TrustedFragment.coerce(suffix)
        paged_suffix = TrustedFragment(f"{base} {window}" if not base.is_empty() else window)
        iterator = self.find_where(where, values, paged_suffix)
        return Pager(iterator, count, item_per_page, page)

    def fetch_single_value(
        self,
        sql: str,
        values: Sequence[Any],
        column: str,
        operation: str = "fetch_single_value",
    ) -> Any:
        """첫 행의 한 컬럼 값을 읽는다. 행 소스는 읽은 직후 정리된다."""

        rows = self.execute(sql, values, operation)
        try:
            column_values = rows.fetch_column(column)
        except KeyError as exc:
            raise InconsistentResultError(self.structure.relation, column, sql) from exc
        if not column_values:
            raise InconsistentResultError(self.structure.relation, column, sql)
        return column_values[0]

    def _check_primary_key(self, values: Mapping[str, Any]) -> None:
        # 값이 None이어도 키가 있으면 통과한다.
        for field in self.structure.primary_key:
            if field not in values:
                raise InvalidPrimaryKeyError(field, self.structure.primary_key, self.structure.relation)

    def _get_where_from(self, values: Mapping[str, Any]) -> Where:
        """값 맵의 순회 순서대로 `"field" = $*` 조건을 AND로 묶는다."""

        where = Where()
        for field, value in values.items():
            where.and_where(f"{self.escape_identifier(field)} = $*", [value])
        return where


def _resolve_condition(
    where: ConditionLike,
    values: Optional[Sequence[Any]],
) -> Tuple[str, List[Any]]:
    if isinstance(where, Where):
        return str(where), where.values
    if isinstance(where, str):
        return where, list(values or [])
    raise TypeError(f"조건은 Where 또는 문자열이어야 합니다: {type(where).__name__}")


def _append_suffix(sql: str, suffix: SuffixLike) -> str:
    fragment = TrustedFragment.coerce(suffix)
    if fragment.is_empty():
        return sql
    return f"{sql} {fragment}"
