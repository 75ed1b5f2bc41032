"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 예외, 로깅, 설정 하위 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/shared/exceptions, src/relation_reader/shared/logging, src/relation_reader/shared/config
"""

from relation_reader.shared.config import (
    ConfigLoader,
    DatabaseSettings,
    EngineKind,
    PoolSettings,
    load_database_settings,
)
from relation_reader.shared.exceptions import BaseAppException, ErrorCode, ExceptionDetail
from relation_reader.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)

__all__ = [
    "BaseAppException",
    "ErrorCode",
    "ExceptionDetail",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogRepository",
    "InMemoryLogger",
    "create_default_logger",
    "ConfigLoader",
    "DatabaseSettings",
    "EngineKind",
    "PoolSettings",
    "load_database_settings",
]
