"""단어 빈도 분석 커맨드.

텍스트 파일을 토큰화하여 각 단어의 출현 빈도를 분석하고 빈도 통계를 생성한다.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from tagcloud.constants import WORD_FREQUENCY_FILE
from tagcloud.parser import CliHelpFormatter, positive_int

from .base import Command, SubparsersLike

logger = logging.getLogger(__name__)


class AnalyzeCommand(Command):
    """단어 빈도 분석 커맨드.

    Attributes:
        console: Rich 콘솔 인스턴스
        input_path: 입력 텍스트 파일
        output_frequency: 단어 빈도 parquet 출력 경로
        top: 화면에 표시할 상위 단어 수
        encoding: 입력 파일 인코딩
        show_progress: 진행바 표시 여부
    """

    @staticmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 파서를 설정한다.

        Args:
            subparsers: 서브파서 액션 객체
        """
        parser = subparsers.add_parser("analyze", help="단어 빈도 분석", formatter_class=CliHelpFormatter)
        parser.add_argument("input", type=Path, help="입력 텍스트 파일")
        parser.add_argument(
            "--output-frequency", type=Path, default=WORD_FREQUENCY_FILE, help="단어 빈도 parquet 출력 경로"
        )
        parser.add_argument("--top", type=positive_int, default=10, help="표시할 상위 단어 수")
        parser.add_argument("--encoding", default="utf-8", help="입력 파일 인코딩")
        parser.add_argument("--no-progress", action="store_true", help="진행바를 표시하지 않음")

    @classmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> "AnalyzeCommand":
        """파싱된 인자로 커맨드를 생성한다."""
        return cls(
            console, args.input, args.output_frequency, args.top, args.encoding, show_progress=not args.no_progress
        )

    def __init__(
        self,
        console: Console,
        input_path: Path,
        output_frequency: Path,
        top: int,
        encoding: str,
        show_progress: bool = True,
    ):
        self.console = console
        self.input_path = input_path
        self.output_frequency = output_frequency
        self.top = top
        self.encoding = encoding
        self.show_progress = show_progress

    def execute(self) -> dict[str, Any]:
        """단어 빈도 분석을 실행한다.

        Returns:
            분석 결과 딕셔너리 (frequency_path, total_words, unique_words)
        """

        from tagcloud.analysis.selection import select_top_words
        from tagcloud.analysis.tokenize import iter_tokens
        from tagcloud.analysis.word_frequency import count_words, write_frequency_parquet
        from tagcloud.corpus.reader import iter_lines

        lines = iter_lines(self.input_path, self.encoding, show_progress=self.show_progress)
        counter = count_words(iter_tokens(lines))

        # 결과물 저장 (빈도 parquet)
        write_frequency_parquet(counter, self.output_frequency)
        logger.info("📄 단어 빈도 저장: %s", self.output_frequency)

        total_words = sum(counter.values())
        unique_words = len(counter)
        avg_frequency = total_words / unique_words if unique_words > 0 else 0

        table = Table(title="✨ 단어 빈도 분석 결과", show_header=True, title_style="bold green")
        table.add_column("항목", style="bold cyan", width=20)
        table.add_column("값", style="yellow", justify="right")

        table.add_row("총 단어 수", f"{total_words:,}개")
        table.add_row("고유 단어 수", f"{unique_words:,}개")
        table.add_row("평균 빈도", f"{avg_frequency:.2f}회")
        table.add_row("", "")
        table.add_row("빈도 파일", str(self.output_frequency))

        self.console.print()
        self.console.print(table)

        top_entries = select_top_words(counter, self.top)
        if top_entries:
            top_table = Table(title=f"🏆 상위 {self.top}개 빈도 단어", show_header=True, border_style="dim")
            top_table.add_column("순위", style="dim", width=6, justify="center")
            top_table.add_column("단어", style="cyan")
            top_table.add_column("빈도", style="yellow", width=15, justify="right")

            for idx, entry in enumerate(top_entries, 1):
                rank_style = "bold green" if idx <= 3 else "dim"
                top_table.add_row(f"{idx}", entry.word, f"{entry.count:,}회", style=rank_style)

            self.console.print()
            self.console.print(top_table)

        self.console.print()

        return {
            "frequency_path": self.output_frequency,
            "total_words": total_words,
            "unique_words": unique_words,
        }

    def get_name(self) -> str:
        """커맨드 이름을 반환한다.

        Returns:
            커맨드 이름 "analyze"
        """
        return "analyze"
