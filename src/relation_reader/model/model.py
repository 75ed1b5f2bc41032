"""
목적: 릴레이션 하나에 대한 모델(읽기 관리자)을 제공한다.
설명: 세션과 릴레이션 구조를 묶고, 읽기 쿼리 믹스인이 요구하는 프로젝션/식별자 이스케이프/쿼리 실행을 구현한다.
디자인 패턴: 템플릿 메서드, 리포지토리
참조: src/relation_reader/model/read_queries.py, src/relation_reader/integrations/db/base/session.py
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence, Type

from pydantic import BaseModel

from relation_reader.integrations.db.base.row_source import RowSource
from relation_reader.integrations.db.base.session import Session
from relation_reader.integrations.db.query_builder import Projection
from relation_reader.model.entity import FlexibleEntity
from relation_reader.model.iterator import ResultIterator
from relation_reader.model.read_queries import ReadQueries
from relation_reader.model.structure import RelationStructure
from relation_reader.shared.logging import LogContext, Logger, create_default_logger


class Model(ReadQueries):
    """릴레이션 읽기 모델.

    Args:
        session: 쿼리를 실행할 세션.
        structure: 릴레이션 구조 메타데이터.
        entity_class: 행을 변환할 Pydantic 모델 클래스.
        logger: 주입 가능한 로거.
    """

    def __init__(
        self,
        session: Session,
        structure: RelationStructure,
        entity_class: Type[BaseModel] = FlexibleEntity,
        logger: Optional[Logger] = None,
    ) -> None:
        self._session = session
        self._structure = structure
        self._entity_class = entity_class
        base_logger = logger or create_default_logger(type(self).__name__)
        self._logger = base_logger.with_context(LogContext(relation=structure.relation))

    @property
    def session(self) -> Session:
        return self._session

    @property
    def structure(self) -> RelationStructure:
        return self._structure

    @property
    def entity_class(self) -> Type[BaseModel]:
        return self._entity_class

    def create_projection(self) -> Projection:
        """구조의 필드 순서를 그대로 따르는 기본 프로젝션을 만든다."""

        return Projection.from_structure(self._structure)

    def escape_identifier(self, name: str) -> str:
        return self._session.escape_identifier(name)

    def execute(self, sql: str, values: Sequence[Any], operation: str) -> RowSource:
        """읽기 연산 컨텍스트로 로깅한 뒤 세션에서 SQL을 실행한다."""

        bound = list(values or [])
        self._logger.debug(
            "읽기 쿼리 실행",
            context=LogContext(operation=operation),
            metadata={"sql": sql, "value_count": len(bound)},
        )
        return self._session.execute(sql, bound)

    def query(
        self,
        sql: str,
        values: Optional[Sequence[Any]] = None,
        operation: str = "query",
    ) -> ResultIterator:
        """SQL을 실행하고 엔티티 이터레이터를 반환한다."""

        return ResultIterator(self.execute(sql, values or [], operation), self._hydrate)

    def _hydrate(self, row: Dict[str, Any]) -> BaseModel:
        return self._entity_class.model_validate(row)
