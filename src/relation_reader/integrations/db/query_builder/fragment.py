"""
목적: 이스케이프 없이 SQL 끝에 붙는 신뢰된 조각 타입을 제공한다.
설명: ORDER BY/LIMIT/GROUP BY처럼 호출 코드가 직접 작성한 텍스트만 담는다. 외부 입력이나 조건식을 넣으면 안 된다.
디자인 패턴: 값 객체
참조: src/relation_reader/model/read_queries.py
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TrustedFragment:
    """검증/이스케이프 없이 그대로 삽입되는 SQL 조각."""

    text: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("TrustedFragment에는 문자열만 담을 수 있습니다.")

    @classmethod
    def coerce(cls, value: Optional[Union["TrustedFragment", str]]) -> "TrustedFragment":
        """None/문자열/조각을 조각으로 통일한다. 문자열은 호출 코드가 작성한 텍스트로 간주한다."""

        if value is None:
            return cls()
        if isinstance(value, TrustedFragment):
            return value
        return cls(value)

    def is_empty(self) -> bool:
        return not self.text

    def __str__(self) -> str:
        return self.text


def trusted(text: str) -> TrustedFragment:
    return TrustedFragment(text)


SuffixLike = Union[TrustedFragment, str, None]
