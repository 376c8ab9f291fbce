"""단어 빈도 분석 및 태그 클라우드 데이터 생성 모듈.

텍스트를 토큰화하여 단어 빈도를 집계하고, 상위 빈도 단어를 선정하여
글꼴 크기를 계산한다.
"""

from __future__ import annotations

from .cloud import CloudResult, build_cloud
from .font_scaling import RenderEntry, count_range, scale_fonts
from .selection import FrequencyEntry, alphabetize, parse_selection_size, select_top_words
from .tokenize import iter_tokens
from .word_frequency import count_words

__all__ = [
    "CloudResult",
    "FrequencyEntry",
    "RenderEntry",
    "alphabetize",
    "build_cloud",
    "count_range",
    "count_words",
    "iter_tokens",
    "parse_selection_size",
    "scale_fonts",
    "select_top_words",
]
