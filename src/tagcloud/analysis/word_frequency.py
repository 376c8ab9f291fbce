from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Iterable, Mapping

import pyarrow as pa
import pyarrow.parquet as pq

from tagcloud.errors import TagCloudIOError
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def count_words(tokens: Iterable[str]) -> Counter[str]:
    """토큰 스트림을 모두 소비하여 단어별 출현 빈도를 집계한다.

    Args:
        tokens: 정규화된 토큰 이터러블

    Returns:
        {단어: 빈도} 카운터 (스트림을 끝까지 읽은 뒤에만 반환)
    """
    counter: Counter[str] = Counter()
    for token in tokens:
        counter[token] += 1

    logger.debug("단어 빈도 집계 완료 (총 %d개, 고유 %d개)", sum(counter.values()), len(counter))
    return counter


def write_frequency_parquet(frequencies: Mapping[str, int], output_path: Path) -> None:
    """단어 빈도를 parquet로 저장한다."""
    rows = sorted(frequencies.items(), key=lambda item: (-item[1], item[0]))
    words = [word for word, _ in rows]
    counts = [count for _, count in rows]
    table = pa.Table.from_pydict(
        {"word": words, "frequency": counts},
        schema=pa.schema([("word", pa.string()), ("frequency", pa.int64())]),
    )
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        pq.write_table(table, output_path)
    except OSError as e:
        raise TagCloudIOError(f"빈도 파일을 쓸 수 없습니다: {output_path}") from e


def load_frequency(path: Path) -> dict[str, int]:
    """word_frequency.parquet 에서 {word: frequency} 사전을 로드한다."""
    if not path.is_file():
        raise TagCloudIOError(f"빈도 파일이 없습니다: {path}")
    table = pq.read_table(path, columns=["word", "frequency"])
    words: list[str] = table.column("word").to_pylist()
    frequencies: list[int] = table.column("frequency").to_pylist()
    return dict(zip(words, frequencies))
