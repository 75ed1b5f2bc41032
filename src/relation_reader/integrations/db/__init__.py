"""
목적: DB 통합 모듈 공개 API를 제공한다.
설명: 엔진 구현체, 세션, 조건/프로젝션 빌더, 엔진 팩토리를 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/integrations/db/engines, src/relation_reader/integrations/db/query_builder
"""

from relation_reader.integrations.db.base import BaseConnectionPool, BaseDBEngine, RowSource, Session
from relation_reader.integrations.db.engines import (
    PostgresConnectionPool,
    PostgresEngine,
    SqliteConnectionPool,
    SqliteEngine,
)
from relation_reader.integrations.db.factory import create_engine
from relation_reader.integrations.db.query_builder import Projection, TrustedFragment, Where, trusted

__all__ = [
    "BaseDBEngine",
    "BaseConnectionPool",
    "RowSource",
    "Session",
    "SqliteEngine",
    "SqliteConnectionPool",
    "PostgresEngine",
    "PostgresConnectionPool",
    "create_engine",
    "Where",
    "Projection",
    "TrustedFragment",
    "trusted",
]
