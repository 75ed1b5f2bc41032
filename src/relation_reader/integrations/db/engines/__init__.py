"""
목적: DB 엔진 구현체 공개 API를 제공한다.
설명: SQLite/PostgreSQL 엔진과 커넥션 풀을 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/integrations/db/engines/sqlite.py, src/relation_reader/integrations/db/engines/postgres.py
"""

from relation_reader.integrations.db.engines.postgres import PostgresConnectionPool, PostgresEngine
from relation_reader.integrations.db.engines.sqlite import SqliteConnectionPool, SqliteEngine

__all__ = [
    "SqliteEngine",
    "SqliteConnectionPool",
    "PostgresEngine",
    "PostgresConnectionPool",
]
