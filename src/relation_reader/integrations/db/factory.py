"""
목적: 설정 모델로부터 DB 엔진을 생성한다.
설명: DatabaseSettings의 엔진 종류에 따라 SQLite/PostgreSQL 엔진을 조립한다.
디자인 패턴: 팩토리 메서드
참조: src/relation_reader/shared/config/settings.py, src/relation_reader/integrations/db/engines
"""

from __future__ import annotations

from typing import Optional

from relation_reader.integrations.db.base.engine import BaseDBEngine
from relation_reader.integrations.db.engines import PostgresEngine, SqliteEngine
from relation_reader.shared.config import DatabaseSettings, EngineKind
from relation_reader.shared.logging import Logger


def create_engine(settings: DatabaseSettings, logger: Optional[Logger] = None) -> BaseDBEngine:
    """설정에 맞는 엔진을 생성한다. 연결은 호출자가 connect()로 시작한다."""

    if settings.engine == EngineKind.SQLITE:
        return SqliteEngine(
            database_path=settings.database_path,
            pool_size=settings.pool.max_size,
            logger=logger,
        )
    if settings.engine == EngineKind.POSTGRES:
        return PostgresEngine(
            dsn=settings.dsn,
            host=settings.host,
            port=settings.port,
            user=settings.user,
            password=settings.password,
            database=settings.database,
            pool_min_size=settings.pool.min_size,
            pool_max_size=settings.pool.max_size,
            logger=logger,
        )
    raise ValueError(f"지원하지 않는 엔진입니다: {settings.engine}")
