"""
목적: SELECT 절 컬럼 목록(프로젝션)을 만든다.
설명: 릴레이션 구조에서 필드 목록을 받아 별칭 없는 목록과 `field AS field` 목록을 렌더링한다.
디자인 패턴: 빌더 패턴
참조: src/relation_reader/model/structure.py, src/relation_reader/model/read_queries.py
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from relation_reader.model.structure import RelationStructure


class Projection:
    """필드 이름과 SELECT 표현식의 순서 있는 매핑.

    기본 필드의 표현식은 필드 이름 자체이며, set_field로 계산 컬럼을 추가할 수 있다.
    """

    def __init__(self, fields: Optional[Mapping[str, str]] = None) -> None:
        self._fields: Dict[str, str] = {}
        for name, expression in (fields or {}).items():
            self.set_field(name, expression)

    @classmethod
    def from_structure(cls, structure: "RelationStructure") -> "Projection":
        """릴레이션 구조의 필드 순서를 그대로 따르는 프로젝션을 만든다."""

        return cls({name: name for name in structure.fields})

    def set_field(self, name: str, expression: str) -> "Projection":
        if not name:
            raise ValueError("필드 이름이 비어 있습니다.")
        if not expression:
            raise ValueError(f"필드 '{name}'의 표현식이 비어 있습니다.")
        self._fields[name] = expression
        return self

    def unset_field(self, name: str) -> "Projection":
        if name not in self._fields:
            raise ValueError(f"프로젝션에 없는 필드입니다: {name}")
        del self._fields[name]
        return self

    def has_field(self, name: str) -> bool:
        return name in self._fields

    def field_names(self) -> List[str]:
        return list(self._fields)

    def format_fields(self, alias: Optional[str] = None) -> str:
        """`id, name, age` 형태의 컬럼 목록을 반환한다."""

        return ", ".join(self._expressions(alias))

    def format_fields_with_field_alias(self, alias: Optional[str] = None) -> str:
        """`id AS id, name AS name` 형태의 컬럼 목록을 반환한다."""

        return ", ".join(
            f"{expression} AS {name}"
            for name, expression in zip(self._fields, self._expressions(alias))
        )

    def _expressions(self, alias: Optional[str]) -> List[str]:
        if not self._fields:
            raise ValueError("프로젝션에 필드가 없습니다.")
        # 테이블 별칭은 계산 컬럼이 아닌 일반 컬럼에만 붙인다.
        return [
            f"{alias}.{expression}" if alias and expression == name else expression
            for name, expression in self._fields.items()
        ]

    def __repr__(self) -> str:
        return f"Projection({self._fields!r})"
