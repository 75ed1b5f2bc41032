"""
목적: DB 베이스 모듈 공개 API를 제공한다.
설명: 엔진/풀/세션 인터페이스와 행 소스, SQL 공통 유틸리티를 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/integrations/db/base/engine.py, src/relation_reader/integrations/db/base/session.py
"""

from relation_reader.integrations.db.base.engine import BaseDBEngine
from relation_reader.integrations.db.base.pool import BaseConnectionPool
from relation_reader.integrations.db.base.row_source import RowSource
from relation_reader.integrations.db.base.session import Session
from relation_reader.integrations.db.base.sql_common import (
    SQLIdentifierHelper,
    number_placeholders,
    rewrite_positional,
)

__all__ = [
    "BaseDBEngine",
    "BaseConnectionPool",
    "RowSource",
    "Session",
    "SQLIdentifierHelper",
    "number_placeholders",
    "rewrite_positional",
]
