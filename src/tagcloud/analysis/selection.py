"""상위 빈도 단어 선정 및 알파벳순 정렬 모듈.

전체 빈도 사전에서 빈도가 높은 순으로 N개 단어를 고르고,
렌더러가 위에서 아래로 읽을 수 있도록 단어 기준으로 다시 정렬한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from tagcloud.errors import InvalidSelectionSize
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FrequencyEntry:
    """단어와 출현 빈도 쌍."""

    word: str
    count: int


def validate_selection_size(selection_size: int) -> int:
    """선택할 단어 수를 검증한다.

    Raises:
        InvalidSelectionSize: 정수가 아니거나 음수인 경우
    """
    if isinstance(selection_size, bool) or not isinstance(selection_size, int):
        raise InvalidSelectionSize(f"단어 수는 정수여야 합니다: {selection_size!r}")
    if selection_size < 0:
        raise InvalidSelectionSize(f"단어 수는 0 이상이어야 합니다: {selection_size}")
    return selection_size


def parse_selection_size(text: str) -> int:
    """문자열로 입력된 단어 수를 파싱하고 검증한다.

    Raises:
        InvalidSelectionSize: 정수로 해석할 수 없거나 음수인 경우
    """
    try:
        value = int(text.strip())
    except ValueError as e:
        raise InvalidSelectionSize(f"정수를 입력해야 합니다: {text!r}") from e
    return validate_selection_size(value)


def select_top_words(frequencies: Mapping[str, int], selection_size: int) -> list[FrequencyEntry]:
    """빈도가 가장 높은 단어 *selection_size* 개를 선정한다.

    빈도 내림차순 → 동일 빈도 시 단어 오름차순으로 전체를 정렬한 뒤 앞에서부터 자른다.
    경계에서 빈도가 같으면 사전순으로 앞선 단어가 선택된다.

    Args:
        frequencies: {단어: 빈도} 사전
        selection_size: 선택할 단어 수 (0 이상)

    Returns:
        선정된 항목 리스트 (길이 = min(selection_size, 고유 단어 수))

    Raises:
        InvalidSelectionSize: selection_size가 음수이거나 정수가 아닌 경우
    """
    validate_selection_size(selection_size)

    ranked = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    selected = [FrequencyEntry(word, count) for word, count in ranked[:selection_size]]

    logger.debug("상위 단어 %d개 선정 (요청 %d개, 후보 %d개)", len(selected), selection_size, len(ranked))
    return selected


def alphabetize(entries: Iterable[FrequencyEntry]) -> list[FrequencyEntry]:
    """항목을 단어 오름차순 → 동일 단어 시 빈도 오름차순으로 정렬한다."""
    return sorted(entries, key=lambda entry: (entry.word, entry.count))
