"""태그 클라우드 생성 설정."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path

from tagcloud.analysis.font_scaling import validate_font_range
from tagcloud.analysis.selection import validate_selection_size
from tagcloud.constants import CLOUDS_DIR, DEFAULT_SELECTION_SIZE, FONT_MAX, FONT_MIN


def default_output_path(input_path: Path) -> Path:
    """입력 파일 이름을 따라 기본 출력 경로를 만든다."""
    return CLOUDS_DIR / f"{input_path.stem}.html"


@dataclass
class CloudConfig:
    """태그 클라우드 생성 설정.

    Attributes:
        input_path: 입력 텍스트 파일 경로
        output_path: 출력 HTML 파일 경로
        selection_size: 선택할 단어 수
        font_min: 최소 글꼴 크기
        font_max: 최대 글꼴 크기
        encoding: 입력 파일 인코딩
        title: 문서 제목 (None이면 입력 파일 이름)
    """

    input_path: Path
    output_path: Path
    selection_size: int = DEFAULT_SELECTION_SIZE
    font_min: int = FONT_MIN
    font_max: int = FONT_MAX
    encoding: str = "utf-8"
    title: str | None = None

    @property
    def document_title(self) -> str:
        return self.title or self.input_path.name

    def validate(self) -> "CloudConfig":
        """설정값을 검증한다.

        Raises:
            InvalidSelectionSize: 단어 수가 올바르지 않은 경우
            InvalidFontRange: 글꼴 범위가 올바르지 않은 경우
        """
        validate_selection_size(self.selection_size)
        validate_font_range(self.font_min, self.font_max)
        return self

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "CloudConfig":
        """파싱된 CLI 인자로부터 설정을 생성한다."""
        input_path = Path(args.input)
        output_path = Path(args.output) if args.output else default_output_path(input_path)
        return cls(
            input_path=input_path,
            output_path=output_path,
            selection_size=args.size,
            font_min=args.font_min,
            font_max=args.font_max,
            encoding=args.encoding,
            title=args.title,
        )
