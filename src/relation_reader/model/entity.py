"""
목적: 조회 결과 행을 담는 기본 엔티티를 제공한다.
설명: 선언되지 않은 컬럼도 그대로 받는 Pydantic 모델로, 속성/키 접근과 dict 추출을 지원한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/relation_reader/model/model.py
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class FlexibleEntity(BaseModel):
    """컬럼 구성이 고정되지 않은 엔티티."""

    model_config = ConfigDict(extra="allow")

    def has(self, name: str) -> bool:
        return name in self.extract()

    def get(self, name: str, default: Any = None) -> Any:
        return self.extract().get(name, default)

    def extract(self) -> Dict[str, Any]:
        """엔티티 값을 dict로 반환한다."""

        return self.model_dump()

    def __getitem__(self, name: str) -> Any:
        values = self.extract()
        if name not in values:
            raise KeyError(name)
        return values[name]
