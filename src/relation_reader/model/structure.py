"""
목적: 릴레이션 구조 메타데이터를 정의한다.
설명: 릴레이션 이름, 필드 순서, 기본 키 필드 순서를 불변 Pydantic 모델로 보관하고 생성 시 검증한다.
디자인 패턴: 값 객체
참조: src/relation_reader/model/model.py, src/relation_reader/integrations/db/query_builder/projection.py
"""

from __future__ import annotations

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class RelationStructure(BaseModel):
    """릴레이션 구조 모델이다.

    Args:
        relation: 스키마를 포함할 수 있는 릴레이션 이름(예: public.person).
        fields: 순서 있는 필드 이름 목록.
        primary_key: 순서 있는 기본 키 필드 목록. 모두 fields에 있어야 한다.
    """

    model_config = ConfigDict(frozen=True)

    relation: str
    fields: Tuple[str, ...]
    primary_key: Tuple[str, ...]

    @field_validator("relation")
    @classmethod
    def _check_relation(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("릴레이션 이름이 비어 있습니다.")
        return value

    @field_validator("fields", "primary_key")
    @classmethod
    def _check_names(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("필드 목록이 비어 있습니다.")
        if any(not name for name in value):
            raise ValueError("빈 필드 이름은 사용할 수 없습니다.")
        if len(set(value)) != len(value):
            raise ValueError(f"중복된 필드 이름이 있습니다: {list(value)}")
        return value

    @model_validator(mode="after")
    def _check_primary_key(self) -> "RelationStructure":
        unknown = [name for name in self.primary_key if name not in self.fields]
        if unknown:
            raise ValueError(f"기본 키 필드가 필드 목록에 없습니다: {unknown}")
        return self

    def field_names(self) -> List[str]:
        return list(self.fields)

    def has_field(self, name: str) -> bool:
        return name in self.fields
