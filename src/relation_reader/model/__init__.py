"""
목적: 모델 모듈 공개 API를 제공한다.
설명: 릴레이션 구조, 엔티티, 결과 이터레이터, 읽기 모델, 페이저, 모델 예외를 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/model/model.py, src/relation_reader/model/read_queries.py
"""

from relation_reader.model.entity import FlexibleEntity
from relation_reader.model.exceptions import (
    AmbiguousMatchError,
    InconsistentResultError,
    InvalidPrimaryKeyError,
    ModelException,
)
from relation_reader.model.iterator import ResultIterator
from relation_reader.model.model import Model
from relation_reader.model.pager import Pager
from relation_reader.model.read_queries import ConditionLike, ReadQueries
from relation_reader.model.structure import RelationStructure

__all__ = [
    "RelationStructure",
    "FlexibleEntity",
    "ResultIterator",
    "ReadQueries",
    "ConditionLike",
    "Model",
    "Pager",
    "ModelException",
    "InvalidPrimaryKeyError",
    "AmbiguousMatchError",
    "InconsistentResultError",
]
