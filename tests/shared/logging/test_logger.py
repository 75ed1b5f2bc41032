"""
목적: 인메모리 로거와 로그 모델 동작을 검증한다.
설명: 로그 기록, 쿼리 컨텍스트 병합, 저장소 공유, 최소 레벨 필터, JSON 라인 출력을 확인한다.
디자인 패턴: 전략 패턴, 저장소 패턴
참조: src/relation_reader/shared/logging/logger.py, src/relation_reader/shared/logging/models.py
"""

from __future__ import annotations

import json

from relation_reader.shared.logging import (
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    create_default_logger,
)


def test_inmemory_logger_records_log() -> None:
    """기본 로거가 로그를 기록하는지 확인한다."""

    logger = create_default_logger("unit-test")
    logger.info("시작 로그")

    records = logger.repository.list()

    assert len(records) == 1
    assert records[0].level == LogLevel.INFO
    assert records[0].message == "시작 로그"
    assert records[0].logger_name == "unit-test"


def test_logger_with_context_merges_query_context() -> None:
    """컨텍스트 병합 규칙이 올바른지 확인한다."""

    base_context = LogContext(relation="person", tags={"engine": "sqlite", "env": "dev"})
    logger = InMemoryLogger(name="ctx-test", base_context=base_context)

    logger.info("기본 컨텍스트 로그")

    child_logger = logger.with_context(LogContext(session_id="s-1", tags={"env": "prod"}))
    child_logger.debug("확장 컨텍스트 로그", context=LogContext(operation="find_all"))

    records = logger.repository.list()

    assert len(records) == 2
    assert records[0].context is not None
    assert records[0].context.relation == "person"
    assert records[0].context.operation is None
    assert records[1].context is not None
    assert records[1].context.relation == "person"
    assert records[1].context.session_id == "s-1"
    assert records[1].context.operation == "find_all"
    assert records[1].context.tags == {"engine": "sqlite", "env": "prod"}


def test_min_level_drops_lower_records() -> None:
    repository = InMemoryLogRepository()
    logger = InMemoryLogger(name="level-test", repository=repository, min_level=LogLevel.WARNING)

    logger.debug("버려짐")
    logger.info("버려짐")
    logger.warning("남음")
    logger.critical("남음", metadata={"sql": "select 1"})

    assert [record.level for record in repository.list()] == [LogLevel.WARNING, LogLevel.CRITICAL]
    assert repository.list()[1].metadata == {"sql": "select 1"}

    repository.clear()
    assert repository.list() == []


def test_stdout_emission_writes_json_line(capsys) -> None:
    """stdout 출력이 켜지면 JSON 한 줄을 쓰는지 확인한다."""

    logger = InMemoryLogger(name="stdout-test", emit_stdout=True)
    logger.error("쿼리 실패", context=LogContext(relation="person"), metadata={"value_count": 1})

    payload = json.loads(capsys.readouterr().out.strip())

    assert payload["level"] == "ERROR"
    assert payload["logger"] == "stdout-test"
    assert payload["message"] == "쿼리 실패"
    assert payload["context"]["relation"] == "person"
    assert payload["metadata"] == {"value_count": 1}


def test_stdout_emission_follows_env(monkeypatch, capsys) -> None:
    monkeypatch.setenv("LOG_STDOUT", "true")
    create_default_logger("env-on").info("출력")
    assert capsys.readouterr().out

    monkeypatch.setenv("LOG_STDOUT", "0")
    create_default_logger("env-off").info("출력 안 함")
    assert capsys.readouterr().out == ""
