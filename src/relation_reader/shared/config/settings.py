"""
목적: DB 연결 설정 모델을 정의한다.
설명: 엔진 종류, 접속 정보, 커넥션 풀 크기를 Pydantic으로 검증하고 로더와 연결한다.
디자인 패턴: 데이터 전송 객체(DTO), 팩토리 함수
참조: src/relation_reader/shared/config/loader.py, src/relation_reader/integrations/db/factory.py
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from relation_reader.shared.config.loader import ConfigLoader
from relation_reader.shared.const import SharedConst
from relation_reader.shared.logging import Logger


class EngineKind(str, Enum):
    """지원하는 DB 엔진 종류."""

    SQLITE = "sqlite"
    POSTGRES = "postgres"


class PoolSettings(BaseModel):
    """커넥션 풀 크기 설정."""

    min_size: int = Field(default=SharedConst.DEFAULT_POOL_MIN_SIZE, ge=0)
    max_size: int = Field(default=SharedConst.DEFAULT_POOL_MAX_SIZE, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "PoolSettings":
        if self.min_size > self.max_size:
            raise ValueError("pool.min_size는 pool.max_size보다 클 수 없습니다.")
        return self


class DatabaseSettings(BaseModel):
    """DB 연결 설정 모델이다.

    Args:
        engine: 사용할 엔진 종류.
        database_path: SQLite 파일 경로.
        dsn: PostgreSQL DSN. 지정되면 개별 접속 정보보다 우선한다.
        host: PostgreSQL 호스트.
        port: PostgreSQL 포트.
        user: PostgreSQL 사용자.
        password: PostgreSQL 비밀번호.
        database: PostgreSQL 데이터베이스 이름.
        pool: 커넥션 풀 설정.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    engine: EngineKind = EngineKind.SQLITE
    database_path: str = SharedConst.DEFAULT_SQLITE_PATH
    dsn: Optional[str] = None
    host: str = SharedConst.DEFAULT_POSTGRES_HOST
    port: int = SharedConst.DEFAULT_POSTGRES_PORT
    user: str = "postgres"
    password: Optional[str] = None
    database: str = "postgres"
    pool: PoolSettings = Field(default_factory=PoolSettings)


def load_database_settings(
    json_path: Optional[str] = None,
    env_prefix: str = SharedConst.ENV_PREFIX,
    overrides: Optional[Mapping[str, Any]] = None,
    logger: Optional[Logger] = None,
) -> DatabaseSettings:
    """JSON 파일, 환경 변수, 오버라이드 순으로 병합해 설정을 만든다."""

    loader = ConfigLoader(logger=logger)
    if json_path:
        loader.add_json_file(json_path)
    loader.add_env(prefix=env_prefix)
    return loader.build_model(DatabaseSettings, overrides)
