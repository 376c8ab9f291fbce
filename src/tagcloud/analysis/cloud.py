"""태그 클라우드 데이터 생성 파이프라인.

토큰화 → 빈도 집계 → 상위 N개 선정 → 알파벳순 정렬 → 글꼴 크기 계산을
순서대로 수행한다. 입출력은 하지 않으며 텍스트 라인만 입력으로 받는다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tagcloud.constants import FONT_MAX, FONT_MIN
from tagcloud.utils.logging_config import get_logger

from .font_scaling import RenderEntry, count_range, scale_fonts, validate_font_range
from .selection import alphabetize, select_top_words, validate_selection_size
from .tokenize import iter_tokens
from .word_frequency import count_words

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class CloudResult:
    """렌더러에 전달할 태그 클라우드 데이터.

    Attributes:
        entries: 알파벳순으로 정렬된 RenderEntry 튜플
        min_count: 선정 항목 중 최소 빈도 (비어 있으면 0)
        max_count: 선정 항목 중 최대 빈도 (비어 있으면 0)
        selection_size: 요청된 단어 수
        total_words: 입력 전체의 토큰 수
        unique_words: 입력 전체의 고유 단어 수
    """

    entries: tuple[RenderEntry, ...] = ()
    min_count: int = 0
    max_count: int = 0
    selection_size: int = 0
    total_words: int = 0
    unique_words: int = 0


def build_cloud(
    lines: Iterable[str],
    selection_size: int,
    font_min: int = FONT_MIN,
    font_max: int = FONT_MAX,
) -> CloudResult:
    """텍스트 라인으로부터 태그 클라우드 데이터를 생성한다.

    설정값은 입력을 읽기 전에 먼저 검증한다.

    Args:
        lines: 텍스트 라인 이터러블
        selection_size: 선택할 단어 수 (0 이상)
        font_min: 최소 글꼴 크기
        font_max: 최대 글꼴 크기

    Returns:
        CloudResult

    Raises:
        InvalidSelectionSize: selection_size가 올바르지 않은 경우
        InvalidFontRange: 글꼴 범위가 올바르지 않은 경우
    """
    validate_selection_size(selection_size)
    validate_font_range(font_min, font_max)

    frequencies = count_words(iter_tokens(lines))
    total_words = sum(frequencies.values())
    if not frequencies:
        logger.warning("입력에서 단어를 찾지 못했습니다. 빈 태그 클라우드를 생성합니다.")

    selected = alphabetize(select_top_words(frequencies, selection_size))
    min_count, max_count = count_range(selected)
    entries = scale_fonts(selected, min_count, max_count, font_min, font_max)

    logger.info(
        "태그 클라우드 데이터 생성 완료 (단어 %d개, 빈도 범위 %d~%d)",
        len(entries),
        min_count,
        max_count,
    )
    return CloudResult(
        entries=tuple(entries),
        min_count=min_count,
        max_count=max_count,
        selection_size=selection_size,
        total_words=total_words,
        unique_words=len(frequencies),
    )
