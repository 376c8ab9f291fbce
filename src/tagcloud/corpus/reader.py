"""입력 텍스트 파일을 라인 단위로 읽는 헬퍼입니다."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Iterator

from tqdm import tqdm

from tagcloud.errors import TagCloudIOError

logger = logging.getLogger(__name__)


def iter_lines(path: Path, encoding: str = "utf-8", show_progress: bool = False) -> Iterator[str]:
    """텍스트 파일의 각 줄을 순차적으로 반환합니다.

    Args:
        path: 입력 파일 경로
        encoding: 파일 인코딩
        show_progress: 바이트 단위 진행바 표시 여부

    Yields:
        줄바꿈 문자가 포함된 원본 라인

    Raises:
        TagCloudIOError: 파일이 없거나 읽을 수 없는 경우, 또는 알 수 없는 인코딩인 경우
    """
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise TagCloudIOError(f"알 수 없는 인코딩입니다: {encoding!r}") from e

    if not path.is_file():
        raise TagCloudIOError(f"입력 파일을 찾을 수 없습니다: {path}")

    logger.debug("입력 파일을 엽니다: %s (%s)", path, encoding)
    try:
        with path.open("r", encoding=encoding) as handle:
            with tqdm(
                total=path.stat().st_size,
                desc=f"📖 {path.name}",
                unit="B",
                unit_scale=True,
                disable=not show_progress,
            ) as pbar:
                for line in handle:
                    pbar.update(len(line.encode(encoding, errors="replace")))
                    yield line
    except (OSError, UnicodeDecodeError) as e:
        raise TagCloudIOError(f"입력 파일을 읽을 수 없습니다: {path} ({e})") from e
