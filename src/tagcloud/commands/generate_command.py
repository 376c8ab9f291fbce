"""태그 클라우드 생성 커맨드.

텍스트 파일을 읽어 상위 빈도 단어를 선정하고, 글꼴 크기를 계산하여
알파벳순 HTML 태그 클라우드 문서를 저장한다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from tagcloud.analysis.cloud import CloudResult, build_cloud
from tagcloud.analysis.selection import parse_selection_size
from tagcloud.config import CloudConfig, default_output_path
from tagcloud.constants import DEFAULT_SELECTION_SIZE, FONT_MAX, FONT_MIN
from tagcloud.corpus.reader import iter_lines
from tagcloud.parser import CliHelpFormatter, font_size, selection_size
from tagcloud.render.html import write_html

from .base import Command, SubparsersLike

logger = logging.getLogger(__name__)


def prompt_missing_args(console: Console, args: argparse.Namespace) -> argparse.Namespace:
    """비어 있는 입력 파일, 출력 파일, 단어 수를 콘솔에서 입력받는다.

    Raises:
        InvalidSelectionSize: 입력한 단어 수가 정수가 아니거나 음수인 경우
    """
    if not args.input:
        args.input = Prompt.ask("입력 텍스트 파일", console=console)
    if not args.output:
        suggested = default_output_path(Path(args.input))
        args.output = Prompt.ask("출력 HTML 파일", console=console, default=str(suggested))
    if args.size is None:
        answer = Prompt.ask("포함할 단어 수", console=console, default=str(DEFAULT_SELECTION_SIZE))
        args.size = parse_selection_size(answer)
    return args


class GenerateCommand(Command):
    """태그 클라우드 생성 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        config: 태그 클라우드 생성 설정
        show_progress: 입력 파일 읽기 진행바 표시 여부
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("generate", help="HTML 태그 클라우드 생성", formatter_class=CliHelpFormatter)
        parser.add_argument("input", nargs="?", default=None, help="입력 텍스트 파일")
        parser.add_argument("-o", "--output", default=None, help="출력 HTML 파일 (기본: artifacts/clouds/<입력 이름>.html)")
        parser.add_argument(
            "-n", "--size", type=selection_size, default=None, help=f"포함할 단어 수 (기본: {DEFAULT_SELECTION_SIZE})"
        )
        parser.add_argument("--font-min", type=font_size, default=FONT_MIN, help="최소 글꼴 크기")
        parser.add_argument("--font-max", type=font_size, default=FONT_MAX, help="최대 글꼴 크기")
        parser.add_argument("--title", default=None, help="문서 제목 (기본: 입력 파일 이름)")
        parser.add_argument("--encoding", default="utf-8", help="입력 파일 인코딩")
        parser.add_argument("--interactive", action="store_true", help="누락된 입력값을 콘솔에서 입력받음")
        parser.add_argument("--no-progress", action="store_true", help="진행바를 표시하지 않음")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> "GenerateCommand":
        """파싱된 인자로 커맨드를 생성한다.

        Raises:
            ValueError: 입력 파일이 지정되지 않았고 대화형 모드도 아닌 경우
        """
        if args.interactive:
            args = prompt_missing_args(console, args)
        if not args.input:
            raise ValueError("입력 파일을 지정해야 합니다. (또는 --interactive 사용)")
        if args.size is None:
            args.size = DEFAULT_SELECTION_SIZE
        return cls(console, CloudConfig.from_namespace(args), show_progress=not args.no_progress)

    def __init__(self, console: Console, config: CloudConfig, show_progress: bool = True):
        self.console = console
        self.config = config
        self.show_progress = show_progress

    def execute(self) -> dict[str, Any]:
        """태그 클라우드를 생성한다.

        Returns:
            생성 결과 딕셔너리 (output_path, words, unique_words, total_words, min_count, max_count)
        """
        config = self.config.validate()
        logger.info(
            "☁️ 상위 %d개 단어로 태그 클라우드를 생성합니다: %s",
            config.selection_size,
            config.input_path,
        )

        lines = iter_lines(config.input_path, config.encoding, show_progress=self.show_progress)
        result = build_cloud(lines, config.selection_size, config.font_min, config.font_max)

        with self.console.status("HTML 문서 작성 중..."):
            write_html(result, config.output_path, config.document_title)

        self.print_summary(result)

        return {
            "output_path": config.output_path,
            "words": len(result.entries),
            "unique_words": result.unique_words,
            "total_words": result.total_words,
            "min_count": result.min_count,
            "max_count": result.max_count,
        }

    def print_summary(self, result: CloudResult) -> None:
        """빈도가 높은 단어 일부를 글꼴 크기와 함께 출력한다."""
        if not result.entries:
            self.console.print("[yellow]선정된 단어가 없습니다. 빈 태그 클라우드를 저장했습니다.[/yellow]")
            return

        preview = sorted(result.entries, key=lambda entry: (-entry.count, entry.word))[:10]
        table = Table(title="🏆 상위 단어 미리보기", show_header=True, border_style="dim")
        table.add_column("단어", style="cyan")
        table.add_column("빈도", style="yellow", justify="right")
        table.add_column("글꼴", style="green", justify="right")
        for entry in preview:
            table.add_row(entry.word, f"{entry.count:,}회", str(entry.font_size))

        self.console.print()
        self.console.print(table)
        self.console.print()

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "generate"
        """
        return "generate"
