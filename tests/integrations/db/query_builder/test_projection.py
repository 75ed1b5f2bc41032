"""
목적: 프로젝션과 신뢰된 접미 조각을 검증한다.
설명: 컬럼 목록 렌더링, 테이블 별칭, 계산 컬럼, 조각 정규화를 확인한다.
디자인 패턴: 테스트 케이스
참조: src/relation_reader/integrations/db/query_builder/projection.py, src/relation_reader/integrations/db/query_builder/fragment.py
"""

from __future__ import annotations

import pytest

from relation_reader.integrations.db.query_builder import Projection, TrustedFragment, trusted
from relation_reader.model import RelationStructure


@pytest.fixture
def projection() -> Projection:
    structure = RelationStructure(relation="person", fields=["id", "name", "age"], primary_key=["id"])
    return Projection.from_structure(structure)


def test_format_fields(projection) -> None:
    assert projection.format_fields() == "id, name, age"
    assert projection.format_fields("p") == "p.id, p.name, p.age"


def test_format_fields_with_field_alias(projection) -> None:
    assert projection.format_fields_with_field_alias() == "id AS id, name AS name, age AS age"
    assert projection.format_fields_with_field_alias("p") == "p.id AS id, p.name AS name, p.age AS age"


def test_computed_field_is_not_prefixed(projection) -> None:
    """계산 컬럼에는 테이블 별칭을 붙이지 않는지 확인한다."""

    projection.set_field("is_adult", "age >= 20").unset_field("name")

    assert projection.field_names() == ["id", "age", "is_adult"]
    assert projection.has_field("is_adult")
    assert projection.format_fields_with_field_alias("p") == "p.id AS id, p.age AS age, age >= 20 AS is_adult"


def test_invalid_projection_operations(projection) -> None:
    with pytest.raises(ValueError):
        projection.unset_field("email")
    with pytest.raises(ValueError):
        projection.set_field("", "1")
    with pytest.raises(ValueError):
        Projection().format_fields()


def test_trusted_fragment_coerce() -> None:
    assert TrustedFragment.coerce(None).is_empty()
    assert TrustedFragment.coerce("").is_empty()
    assert str(TrustedFragment.coerce("order by id")) == "order by id"

    fragment = trusted("limit 10")
    assert TrustedFragment.coerce(fragment) is fragment


def test_trusted_fragment_requires_text() -> None:
    with pytest.raises(TypeError):
        TrustedFragment(10)  # type: ignore[arg-type]
