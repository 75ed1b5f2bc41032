"""
목적: 파라미터 바인딩 기반 WHERE 조건 빌더를 제공한다.
설명: 조건 조각을 AND/OR 트리로 누적하고 `$*` 플레이스홀더 텍스트와 바인딩 값 목록을 함께 렌더링한다.
디자인 패턴: 빌더 패턴, 컴포지트 패턴
참조: src/relation_reader/model/read_queries.py, src/relation_reader/integrations/db/base/session.py
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Union

PLACEHOLDER = "$*"
AND = "AND"
OR = "OR"


class Where:
    """WHERE 조건 트리.

    단일 조건(element)을 가진 잎 노드이거나, 같은 연산자로 묶인 하위 조건 스택을 가진다.
    비어 있는 조건은 항상 참인 `true`로 렌더링된다.

    Args:
        element: `$*` 플레이스홀더를 포함할 수 있는 조건 텍스트.
        values: element의 플레이스홀더 순서에 맞춘 바인딩 값.
    """

    def __init__(self, element: Optional[str] = None, values: Optional[Sequence[Any]] = None) -> None:
        self._element: Optional[str] = element or None
        self._values: List[Any] = list(values or [])
        self._stack: List[Where] = []
        self._operator: Optional[str] = None

    @classmethod
    def create(cls, element: Optional[str] = None, values: Optional[Sequence[Any]] = None) -> "Where":
        return cls(element, values)

    @classmethod
    def create_where_in(cls, element: str, values: Iterable[Any]) -> "Where":
        """`element IN ($*, ...)` 조건을 만든다. 빈 목록은 항상 거짓이다."""

        values = list(values)
        if not values:
            return cls("false")
        return cls(f"{element} IN ({_placeholders(len(values))})", values)

    @classmethod
    def create_where_not_in(cls, element: str, values: Iterable[Any]) -> "Where":
        """`element NOT IN ($*, ...)` 조건을 만든다. 빈 목록은 항상 참이다."""

        values = list(values)
        if not values:
            return cls("true")
        return cls(f"{element} NOT IN ({_placeholders(len(values))})", values)

    @property
    def operator(self) -> Optional[str]:
        return self._operator

    @property
    def values(self) -> List[Any]:
        """플레이스홀더 순서대로 평탄화한 바인딩 값을 반환한다."""

        if self.is_empty():
            return []
        if self.has_element():
            return list(self._values)
        collected: List[Any] = []
        for child in self._stack:
            collected.extend(child.values)
        return collected

    def is_empty(self) -> bool:
        return self._element is None and not self._stack

    def has_element(self) -> bool:
        return self._element is not None

    def and_where(
        self,
        element: Union[str, "Where"],
        values: Optional[Sequence[Any]] = None,
    ) -> "Where":
        """AND로 조건을 추가한다."""

        return self.add_where(element, values, AND)

    def or_where(
        self,
        element: Union[str, "Where"],
        values: Optional[Sequence[Any]] = None,
    ) -> "Where":
        """OR로 조건을 추가한다."""

        return self.add_where(element, values, OR)

    def add_where(
        self,
        element: Union[str, "Where"],
        values: Optional[Sequence[Any]],
        operator: str,
    ) -> "Where":
        """주어진 연산자로 조건을 결합한다.

        연산자가 현재 트리와 다르면 기존 트리 전체를 하나의 하위 조건으로 감싼다.
        """

        operator = operator.upper()
        if operator not in {AND, OR}:
            raise ValueError(f"지원하지 않는 결합 연산자입니다: {operator}")
        other = element._copy() if isinstance(element, Where) else Where(element, values)
        if other.is_empty():
            return self
        if self.is_empty():
            self._transmute(other)
            return self
        if self.has_element():
            self._stack = [Where(self._element, self._values), other]
            self._element = None
            self._values = []
        elif self._operator == operator:
            self._stack.append(other)
        else:
            self._stack = [self._copy(), other]
        self._operator = operator
        return self

    def _transmute(self, other: "Where") -> None:
        self._element = other._element
        self._values = list(other._values)
        self._stack = list(other._stack)
        self._operator = other._operator

    def _copy(self) -> "Where":
        # 하위 조건까지 복제해 원본을 나중에 바꿔도 결합된 트리는 유지된다.
        clone = Where(self._element, self._values)
        clone._stack = [child._copy() for child in self._stack]
        clone._operator = self._operator
        return clone

    def _render(self) -> str:
        if self.has_element():
            return self._element  # type: ignore[return-value]
        joiner = f" {self._operator} "
        return "(" + joiner.join(child._render() for child in self._stack) + ")"

    def __str__(self) -> str:
        if self.is_empty():
            return "true"
        return self._render()

    def __repr__(self) -> str:
        return f"Where({str(self)!r}, values={self.values!r})"


def _placeholders(count: int) -> str:
    return ", ".join([PLACEHOLDER] * count)
