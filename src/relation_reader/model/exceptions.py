"""
목적: 읽기 계층 도메인 예외를 정의한다.
설명: 기본 키 누락, 기본 키 다중 일치, 스칼라 결과 불일치를 구조화된 상세 정보와 함께 표현한다.
디자인 패턴: 도메인 예외 객체
참조: src/relation_reader/shared/exceptions/base.py, src/relation_reader/model/read_queries.py
"""

from __future__ import annotations

from typing import Sequence, Tuple

from relation_reader.shared.exceptions import BaseAppException, ErrorCode, ExceptionDetail


class ModelException(BaseAppException):
    """모델 계층 예외의 공통 부모."""


class InvalidPrimaryKeyError(ModelException):
    """기본 키 값 맵에 선언된 키 필드가 빠졌을 때 발생한다.

    Args:
        missing_field: 처음 발견된 누락 필드.
        primary_key: 선언된 전체 기본 키 필드.
        relation: 대상 릴레이션 이름.
    """

    def __init__(self, missing_field: str, primary_key: Sequence[str], relation: str) -> None:
        self.missing_field = missing_field
        self.primary_key: Tuple[str, ...] = tuple(primary_key)
        expected = ", ".join(self.primary_key)
        super().__init__(
            message=f"기본 키 {{{expected}}}를 완성하려면 '{missing_field}' 키가 필요합니다.",
            detail=ExceptionDetail(
                code=ErrorCode.INVALID_PRIMARY_KEY.value,
                cause=f"기본 키 필드 '{missing_field}'가 없습니다.",
                hint=f"{relation}의 기본 키 {{{expected}}}를 모두 전달하세요.",
                metadata={
                    "relation": relation,
                    "missing_field": missing_field,
                    "primary_key": list(self.primary_key),
                },
            ),
        )


class AmbiguousMatchError(ModelException):
    """기본 키 조회가 두 행 이상과 일치했을 때 발생한다. 스키마와 구조 메타데이터가 어긋났다는 뜻이다."""

    def __init__(self, relation: str, primary_key: dict) -> None:
        self.primary_key = dict(primary_key)
        super().__init__(
            message=f"'{relation}' 기본 키 조회가 두 행 이상과 일치했습니다.",
            detail=ExceptionDetail(
                code=ErrorCode.AMBIGUOUS_MATCH.value,
                cause="기본 키 조건이 여러 행과 일치했습니다.",
                hint="릴레이션 구조의 기본 키 선언이 실제 스키마와 같은지 확인하세요.",
                metadata={"relation": relation, "primary_key": {k: repr(v) for k, v in primary_key.items()}},
            ),
        )


class InconsistentResultError(ModelException):
    """스칼라 조회 결과에 행 또는 컬럼이 없을 때 발생한다."""

    def __init__(self, relation: str, column: str, sql: str) -> None:
        super().__init__(
            message=f"'{relation}' 스칼라 조회 결과에 '{column}' 값이 없습니다.",
            detail=ExceptionDetail(
                code=ErrorCode.INCONSISTENT_RESULT.value,
                cause="스칼라 쿼리 결과가 비어 있거나 컬럼이 없습니다.",
                metadata={"relation": relation, "column": column, "sql": sql},
            ),
        )
