"""출현 빈도를 글꼴 크기로 변환하는 모듈.

선정된 단어들의 최소/최대 빈도 사이를 설정된 글꼴 범위로 선형 보간한다.
반올림은 올림(ceil)으로 통일한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from tagcloud.constants import FONT_MAX, FONT_MIN
from tagcloud.errors import InvalidFontRange

from .selection import FrequencyEntry


@dataclass(frozen=True, slots=True)
class RenderEntry:
    """글꼴 크기가 계산된 단어 항목."""

    word: str
    count: int
    font_size: int


def validate_font_range(font_min: int, font_max: int) -> tuple[int, int]:
    """글꼴 크기 범위를 검증한다.

    Raises:
        InvalidFontRange: 정수가 아니거나 음수, 또는 font_min > font_max인 경우
    """
    for value in (font_min, font_max):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidFontRange(f"글꼴 크기는 정수여야 합니다: {value!r}")
        if value < 0:
            raise InvalidFontRange(f"글꼴 크기는 0 이상이어야 합니다: {value}")
    if font_min > font_max:
        raise InvalidFontRange(f"최소 글꼴 크기({font_min})가 최대 글꼴 크기({font_max})보다 큽니다.")
    return font_min, font_max


def parse_font_size(text: str) -> int:
    """문자열로 입력된 글꼴 크기를 파싱하고 검증한다.

    Raises:
        InvalidFontRange: 정수로 해석할 수 없거나 음수인 경우
    """
    try:
        value = int(text.strip())
    except ValueError as e:
        raise InvalidFontRange(f"글꼴 크기는 정수여야 합니다: {text!r}") from e
    validate_font_range(value, value)
    return value


def count_range(entries: Sequence[FrequencyEntry]) -> tuple[int, int]:
    """선정된 항목들의 (최소 빈도, 최대 빈도)를 반환한다. 비어 있으면 (0, 0)."""
    if not entries:
        return 0, 0
    counts = [entry.count for entry in entries]
    return min(counts), max(counts)


def font_size_for(
    count: int,
    min_count: int,
    max_count: int,
    font_min: int = FONT_MIN,
    font_max: int = FONT_MAX,
) -> int:
    """단일 빈도에 대한 글꼴 크기를 계산한다.

    max_count <= min_count이면 max_count = min_count + 1로 보정하여
    0으로 나누는 일이 없게 한다. 따라서 모든 빈도가 같으면 전부 font_min이 된다.
    """
    if max_count <= min_count:
        max_count = min_count + 1
    if count <= min_count:
        return font_min

    numerator = (font_max - font_min) * (count - min_count)
    # 정수 올림 나눗셈
    step = -(-numerator // (max_count - min_count))
    return min(font_min + step, font_max)


def scale_fonts(
    entries: Iterable[FrequencyEntry],
    min_count: int,
    max_count: int,
    font_min: int = FONT_MIN,
    font_max: int = FONT_MAX,
) -> list[RenderEntry]:
    """각 항목에 글꼴 크기를 부여한다.

    Args:
        entries: 알파벳순으로 정렬된 선정 항목
        min_count: 선정 항목 중 최소 빈도
        max_count: 선정 항목 중 최대 빈도
        font_min: 최소 글꼴 크기
        font_max: 최대 글꼴 크기

    Returns:
        입력 순서를 유지한 RenderEntry 리스트

    Raises:
        InvalidFontRange: 글꼴 범위가 올바르지 않은 경우
    """
    validate_font_range(font_min, font_max)
    return [
        RenderEntry(
            word=entry.word,
            count=entry.count,
            font_size=font_size_for(entry.count, min_count, max_count, font_min, font_max),
        )
        for entry in entries
    ]
