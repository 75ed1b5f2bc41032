"""
목적: pytest 공통 로깅 훅과 person 릴레이션 픽스처를 제공한다.
설명: 테스트 시작/종료와 결과를 로깅하고, 임시 SQLite 파일 위에 엔진/세션/모델을 조립한다.
디자인 패턴: 테스트 훅, 픽스처 팩토리
참조: pyproject.toml, src/relation_reader/model/model.py
"""

from __future__ import annotations

import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pytest
from dotenv import load_dotenv

from relation_reader.integrations.db import Session, SqliteEngine
from relation_reader.integrations.db.base import RowSource
from relation_reader.model import Model, RelationStructure
from relation_reader.shared.logging import InMemoryLogger


_LOGGER = logging.getLogger("tests")


def _load_env_files() -> None:
    """환경 변수 파일이 있으면 로딩한다. 라이브 DB 테스트에만 필요하다."""

    root = Path(__file__).resolve().parents[1]
    env_path = root / ".env"
    if not env_path.exists():
        return
    load_dotenv(env_path, override=False)


def _set_if_missing(key: str, value: str | None) -> None:
    """환경 변수가 없을 때만 값을 설정한다."""

    if not value:
        return
    if not os.getenv(key):
        os.environ[key] = value


def _build_postgres_dsn() -> str | None:
    """PostgreSQL DSN을 조합한다."""

    user = os.getenv("POSTGRES_USER")
    password = os.getenv("POSTGRES_PW")
    host = os.getenv("POSTGRES_HOST", "127.0.0.1")
    port = os.getenv("POSTGRES_PORT", "5432")
    database = os.getenv("POSTGRES_DATABASE")
    if not all([user, password, host, port, database]):
        return None
    return f"postgresql://{user}:{password}@{host}:{port}/{database}"


_load_env_files()
_set_if_missing("POSTGRES_DSN", _build_postgres_dsn())


PERSON_FIELDS = ("id", "name", "age")


class RecordingSession(Session):
    """실행된 SQL과 바인딩 값을 기록하는 세션."""

    def __init__(self, engine, logger=None) -> None:
        super().__init__(engine, logger=logger)
        self.calls: List[Tuple[str, List[Any]]] = []

    def execute(self, sql: str, values: Optional[Sequence[Any]] = None) -> RowSource:
        self.calls.append((sql, list(values or [])))
        return super().execute(sql, values)


def seed_people(db_path: Path, rows: Iterable[Tuple[Any, ...]]) -> None:
    """person 테이블에 행을 넣는다."""

    connection = sqlite3.connect(str(db_path))
    try:
        connection.executemany("INSERT INTO person (id, name, age) VALUES (?, ?, ?)", list(rows))
        connection.commit()
    finally:
        connection.close()


@pytest.fixture
def person_db_path(tmp_path) -> Path:
    """빈 person 테이블을 가진 SQLite 파일 경로를 반환한다."""

    db_path = tmp_path / "person.sqlite"
    connection = sqlite3.connect(str(db_path))
    try:
        connection.execute("CREATE TABLE person (id INTEGER, name TEXT, age INTEGER)")
        connection.commit()
    finally:
        connection.close()
    return db_path


@pytest.fixture
def seed_person(person_db_path):
    """person 테이블에 행을 넣는 함수를 반환한다."""

    def _seed(rows: Iterable[Tuple[Any, ...]]) -> None:
        seed_people(person_db_path, rows)

    return _seed


@pytest.fixture
def log_sink() -> InMemoryLogger:
    """테스트 전용 인메모리 로거를 반환한다."""

    return InMemoryLogger(name="test", emit_stdout=False)


@pytest.fixture
def sqlite_engine(person_db_path, log_sink):
    """연결된 SQLite 엔진을 반환하고 테스트 후 종료한다."""

    engine = SqliteEngine(str(person_db_path), pool_size=2, logger=log_sink)
    engine.connect()
    yield engine
    engine.close()


@pytest.fixture
def person_structure() -> RelationStructure:
    return RelationStructure(relation="person", fields=PERSON_FIELDS, primary_key=("id",))


@pytest.fixture
def recording_session(sqlite_engine, log_sink) -> RecordingSession:
    return RecordingSession(sqlite_engine, logger=log_sink)


@pytest.fixture
def person_model(recording_session, person_structure, log_sink) -> Model:
    """기록 세션 위의 person 모델을 반환한다."""

    return Model(recording_session, person_structure, logger=log_sink)


def pytest_sessionstart(session) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 시작을 로깅한다."""

    _LOGGER.info("테스트 세션 시작")


def pytest_sessionfinish(session, exitstatus: int) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 세션 종료를 로깅한다."""

    _LOGGER.info("테스트 세션 종료 (exitstatus=%s)", exitstatus)


def pytest_runtest_logstart(nodeid: str, location) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """각 테스트 시작을 로깅한다."""

    _LOGGER.info("테스트 시작: %s", nodeid)


def pytest_runtest_logreport(report) -> None:  # noqa: D401 - pytest 훅 시그니처 유지
    """테스트 결과를 로깅한다."""

    if report.when != "call":
        return
    if report.passed:
        _LOGGER.info("테스트 완료: %s", report.nodeid)
        return
    if report.skipped:
        _LOGGER.warning("테스트 스킵: %s", report.nodeid)
        return
    _LOGGER.error("테스트 실패: %s", report.nodeid)
