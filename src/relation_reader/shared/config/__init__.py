"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 설정 병합 로더와 DB 설정 모델을 외부에 노출한다.
디자인 패턴: 퍼사드
참조: src/relation_reader/shared/config/loader.py, src/relation_reader/shared/config/settings.py
"""

from relation_reader.shared.config.loader import ConfigLoader
from relation_reader.shared.config.settings import (
    DatabaseSettings,
    EngineKind,
    PoolSettings,
    load_database_settings,
)

__all__ = [
    "ConfigLoader",
    "DatabaseSettings",
    "EngineKind",
    "PoolSettings",
    "load_database_settings",
]
