"""
목적: 설정 소스 병합 로더를 제공한다.
설명: dict/JSON 파일/접두사 환경 변수를 순서대로 병합하고 Pydantic 설정 모델로 검증한다.
디자인 패턴: 빌더 패턴
참조: src/relation_reader/shared/config/settings.py, src/relation_reader/shared/const/__init__.py
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel

from relation_reader.shared.const import SharedConst
from relation_reader.shared.logging import Logger, create_default_logger

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigLoader:
    """설정 로더 구현체이다.

    뒤에 추가된 소스가 앞선 소스를 덮어쓰며, 중첩 dict는 재귀적으로 병합한다.

    Args:
        logger: 주입 가능한 로거.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self._logger = logger or create_default_logger("ConfigLoader")
        self._sources: List[Dict[str, Any]] = []

    def add_dict(self, data: Optional[Mapping[str, Any]]) -> "ConfigLoader":
        """딕셔너리 설정을 추가한다."""

        if data:
            self._sources.append(dict(data))
        return self

    def add_json_file(
        self,
        path: Optional[str],
        required: bool = False,
        encoding: str = SharedConst.DEFAULT_ENCODING,
    ) -> "ConfigLoader":
        """JSON 파일 설정을 추가한다. 파일이 없고 필수가 아니면 경고만 남긴다."""

        if not path:
            raise ValueError("path는 비어 있을 수 없습니다.")
        if not os.path.exists(path):
            if required:
                raise FileNotFoundError(path)
            self._logger.warning(f"설정 파일이 없어 건너뜁니다: {path}")
            return self
        with open(path, "r", encoding=encoding) as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"JSON 설정 파일 파싱에 실패했습니다: {path}") from exc
        if not isinstance(payload, dict):
            raise ValueError("JSON 설정 파일은 최상위가 객체여야 합니다.")
        self._sources.append(payload)
        return self

    def add_env(
        self,
        prefix: str = SharedConst.ENV_PREFIX,
        delimiter: str = SharedConst.ENV_NESTED_DELIMITER,
    ) -> "ConfigLoader":
        """접두사가 붙은 환경 변수를 소문자 키로 추가한다.

        RELATION_READER_POOL__MAX_SIZE=3 은 {"pool": {"max_size": 3}} 이 된다.
        """

        env_data: Dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            parts = [part.lower() for part in key[len(prefix) :].split(delimiter) if part]
            if not parts:
                continue
            _assign_nested(env_data, parts, _parse_value(value))
        if env_data:
            self._sources.append(env_data)
        return self

    def build(self, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """수집된 설정을 병합해 반환한다."""

        merged: Dict[str, Any] = {}
        for source in self._sources:
            merged = _merge(merged, source)
        if overrides:
            merged = _merge(merged, dict(overrides))
        return merged

    def build_model(
        self,
        model: Type[ModelT],
        overrides: Optional[Mapping[str, Any]] = None,
    ) -> ModelT:
        """병합된 설정을 Pydantic 모델로 검증해 반환한다."""

        return model.model_validate(self.build(overrides))


def _assign_nested(root: Dict[str, Any], keys: List[str], value: Any) -> None:
    current = root
    for part in keys[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[keys[-1]] = value


def _merge(base: Dict[str, Any], incoming: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in incoming.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _parse_value(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    if lowered in {"null", "none"}:
        return None
    try:
        return float(raw) if "." in raw else int(raw)
    except ValueError:
        pass
    if (raw.startswith("{") and raw.endswith("}")) or (
        raw.startswith("[") and raw.endswith("]")
    ):
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw
    return raw
