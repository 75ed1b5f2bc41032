"""
목적: 패키지 전역 상수를 제공한다.
설명: 설정 로더, 로거, DB 엔진이 공유하는 기본값을 한 곳에 모은다.
디자인 패턴: 상수 객체
참조: src/relation_reader/shared/config/loader.py, src/relation_reader/integrations/db/engines
"""

from __future__ import annotations


class SharedConst:
    """공통 상수 모음."""

    DEFAULT_ENCODING = "utf-8"
    ENV_NESTED_DELIMITER = "__"
    ENV_PREFIX = "RELATION_READER_"
    LOG_STDOUT_ENV = "LOG_STDOUT"

    DEFAULT_SQLITE_PATH = "data/db/relation_reader.sqlite"
    DEFAULT_POSTGRES_HOST = "127.0.0.1"
    DEFAULT_POSTGRES_PORT = 5432
    DEFAULT_POOL_MIN_SIZE = 1
    DEFAULT_POOL_MAX_SIZE = 5


__all__ = ["SharedConst"]
