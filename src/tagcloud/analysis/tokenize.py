"""텍스트 라인을 정규화된 단어 토큰으로 분리하는 모듈."""

from __future__ import annotations

from typing import Iterable, Iterator

from tagcloud.constants import SEPARATORS

# 로케일과 무관하게 A-Z만 소문자로 바꾼다
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)

_SENTINEL = SEPARATORS[0]
_SEPARATOR_SET = frozenset(SEPARATORS)


def ascii_lower(text: str) -> str:
    """ASCII 대문자만 소문자로 변환한다."""
    return text.translate(_ASCII_LOWER)


def iter_line_tokens(line: str) -> Iterator[str]:
    """한 줄에서 토큰을 순서대로 생성한다.

    줄 끝에 구분자를 덧붙여 마지막 단어도 항상 방출되게 한다.
    연속된 구분자는 하나로 취급되며 빈 토큰은 생성되지 않는다.
    """
    buffer: list[str] = []
    for char in line + _SENTINEL:
        if char not in _SEPARATOR_SET:
            buffer.append(char)
        elif buffer:
            yield ascii_lower("".join(buffer))
            buffer.clear()


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """여러 줄의 텍스트에서 토큰 스트림을 생성한다.

    각 줄은 독립적으로 처리되므로 토큰이 줄 경계를 넘지 않는다.

    Args:
        lines: 텍스트 라인 이터러블 (줄바꿈 문자 포함 여부 무관)

    Yields:
        소문자로 정규화된 비어 있지 않은 토큰
    """
    for line in lines:
        yield from iter_line_tokens(line)
