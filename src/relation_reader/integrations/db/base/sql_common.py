"""
목적: SQL 엔진 공통 유틸리티를 제공한다.
설명: 식별자 이스케이프와 위치 기반 플레이스홀더 번호 매기기/탐색 규칙을 모은다.
디자인 패턴: 유틸리티 모듈
참조: src/relation_reader/integrations/db/base/engine.py, src/relation_reader/integrations/db/base/session.py
"""

from __future__ import annotations

import re
from typing import Any, Callable, List, Sequence, Tuple

ANONYMOUS_PARAMETER = "$*"
# 작은따옴표 문자열과 큰따옴표 식별자는 그대로 두고 바깥의 플레이스홀더만 찾는다.
_QUOTED = r"'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\""
ANONYMOUS_PARAMETER_RE = re.compile(rf"({_QUOTED})|\$\*")
POSITIONAL_PARAMETER_RE = re.compile(rf"({_QUOTED})|\$(\d+)")


class SQLIdentifierHelper:
    """SQL 식별자 이스케이프 도우미."""

    def quote_identifier(self, name: str) -> str:
        """큰따옴표로 감싸고 내부 큰따옴표는 두 번 쓴다."""

        if not name:
            raise ValueError("식별자 이름이 비어 있습니다.")
        escaped = name.replace('"', '""')
        return f'"{escaped}"'


def number_placeholders(sql: str) -> str:
    """따옴표 밖의 `$*`를 등장 순서대로 `$1`, `$2`, ...로 바꾼다."""

    counter = 0

    def _replace(match: "re.Match[str]") -> str:
        nonlocal counter
        if match.group(1) is not None:
            return match.group(1)
        counter += 1
        return f"${counter}"

    return ANONYMOUS_PARAMETER_RE.sub(_replace, sql)


def rewrite_positional(
    sql: str,
    values: Sequence[Any],
    render: Callable[[int], str],
) -> Tuple[str, List[Any]]:
    """따옴표 밖의 `$n`을 render(n) 결과로 치환하고 등장 순서대로 값 목록을 만든다."""

    ordered: List[Any] = []

    def _replace(match: "re.Match[str]") -> str:
        if match.group(1) is not None:
            return match.group(1)
        index = int(match.group(2))
        if index < 1 or index > len(values):
            raise ValueError(
                f"플레이스홀더 ${index}에 대응하는 값이 없습니다. (값 {len(values)}개)"
            )
        ordered.append(values[index - 1])
        return render(index)

    return POSITIONAL_PARAMETER_RE.sub(_replace, sql), ordered
