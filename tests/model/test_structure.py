"""
목적: 릴레이션 구조, 엔티티, 페이저 모델을 검증한다.
설명: 구조 생성 검증 규칙과 불변성, 유연 엔티티 접근자, 페이지 계산을 확인한다.
디자인 패턴: 테스트 케이스
참조: src/relation_reader/model/structure.py, src/relation_reader/model/entity.py, src/relation_reader/model/pager.py
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from relation_reader.model import FlexibleEntity, Pager, RelationStructure


def test_structure_keeps_declared_order() -> None:
    structure = RelationStructure(
        relation=" public.person ",
        fields=["id", "name", "age"],
        primary_key=["id"],
    )

    assert structure.relation == "public.person"
    assert structure.field_names() == ["id", "name", "age"]
    assert structure.primary_key == ("id",)
    assert structure.has_field("age")
    assert not structure.has_field("email")


@pytest.mark.parametrize(
    "payload",
    [
        {"relation": "", "fields": ["id"], "primary_key": ["id"]},
        {"relation": "person", "fields": [], "primary_key": ["id"]},
        {"relation": "person", "fields": ["id", "id"], "primary_key": ["id"]},
        {"relation": "person", "fields": ["id"], "primary_key": []},
        {"relation": "person", "fields": ["id", "name"], "primary_key": ["email"]},
    ],
)
def test_structure_rejects_invalid_metadata(payload) -> None:
    """잘못된 구조 메타데이터가 생성 시점에 거부되는지 확인한다."""

    with pytest.raises(ValidationError):
        RelationStructure(**payload)


def test_structure_is_immutable() -> None:
    structure = RelationStructure(relation="person", fields=["id"], primary_key=["id"])

    with pytest.raises(ValidationError):
        structure.relation = "other"  # type: ignore[misc]


def test_flexible_entity_accessors() -> None:
    entity = FlexibleEntity.model_validate({"id": 1, "name": "kim", "nickname": None})

    assert entity.has("nickname")
    assert not entity.has("age")
    assert entity.get("age", 0) == 0
    assert entity["name"] == "kim"
    assert entity.extract() == {"id": 1, "name": "kim", "nickname": None}
    with pytest.raises(KeyError):
        entity["age"]


def test_pager_middle_page() -> None:
    pager = Pager(iterator=None, count=5, max_per_page=2, page=2)  # type: ignore[arg-type]

    assert pager.last_page == 3
    assert pager.is_next_page
    assert pager.is_previous_page
    assert pager.result_min == 3
    assert pager.result_max == 4


def test_pager_last_and_empty_pages() -> None:
    last = Pager(iterator=None, count=5, max_per_page=2, page=3)  # type: ignore[arg-type]
    empty = Pager(iterator=None, count=0, max_per_page=10, page=1)  # type: ignore[arg-type]

    assert not last.is_next_page
    assert last.result_min == 5
    assert last.result_max == 5
    assert empty.last_page == 1
    assert not empty.is_next_page
    assert not empty.is_previous_page
    assert empty.result_min == 0
    assert empty.result_max == 0
