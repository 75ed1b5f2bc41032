"""
목적: DB 커넥션 풀 추상화를 제공한다.
설명: 커넥션 획득/반환/종료와 with 문 사용을 위한 인터페이스를 정의한다.
디자인 패턴: 오브젝트 풀
참조: src/relation_reader/integrations/db/base/engine.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator


class BaseConnectionPool(ABC):
    """커넥션 풀 인터페이스."""

    @abstractmethod
    def acquire(self) -> Any:
        """커넥션을 획득한다."""

    @abstractmethod
    def release(self, connection: Any) -> None:
        """커넥션을 반환한다."""

    @abstractmethod
    def close(self) -> None:
        """유휴 커넥션을 모두 닫고 풀을 종료한다."""

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """블록이 끝나면 커넥션을 반드시 반환한다."""

        connection = self.acquire()
        try:
            yield connection
        finally:
            self.release(connection)
