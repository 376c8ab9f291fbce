"""CLI 인자 파서 설정 모듈.

단어 수와 글꼴 크기 인자는 분석 모듈의 파싱 함수를 그대로 사용하므로
CLI, 대화형 입력, 라이브러리 호출이 같은 규칙과 메시지로 검증된다.
"""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from functools import partial, wraps
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.panel import Panel

from tagcloud.analysis.font_scaling import parse_font_size
from tagcloud.analysis.selection import parse_selection_size
from tagcloud.errors import TagCloudError

if TYPE_CHECKING:
    from tagcloud.commands.base import Command


class CliHelpFormatter(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    """기본값 표시와 여러 줄 도움말을 함께 지원하는 포맷터."""


class CliArgumentParser(argparse.ArgumentParser):
    """인자 오류를 Rich 패널로 보여주고 종료 코드 2로 끝내는 파서.

    서브커맨드 파서도 같은 콘솔을 공유하도록 setup_parser()에서 parser_class를 고정한다.

    Attributes:
        console: 오류 패널을 출력할 Rich 콘솔
    """

    def __init__(self, console: Console | None = None, **kwargs: Any) -> None:
        self.console = console or Console()
        super().__init__(**kwargs)

    def error(self, message: str) -> None:
        self.console.print(
            Panel.fit(
                f"[bold red]인자 오류[/bold red]\n{message}\n\n[dim]도움말: {self.prog} --help[/dim]",
                title="CLI 입력 오류",
                border_style="red",
            )
        )
        raise SystemExit(2)


def argument_type(parse: Callable[[str], int]) -> Callable[[str], int]:
    """도메인 파싱 함수를 argparse type으로 감싼다.

    TagCloudError는 argparse.ArgumentTypeError로 바꿔 원래 메시지가 오류 패널에 그대로 표시되게 한다.
    """

    @wraps(parse)
    def convert(value: str) -> int:
        try:
            return parse(value)
        except TagCloudError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    return convert


selection_size = argument_type(parse_selection_size)
font_size = argument_type(parse_font_size)


def positive_int(value: str) -> int:
    """1 이상의 정수 (analyze --top)."""
    try:
        parsed = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"정수를 입력해야 합니다: {value!r}") from e
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"1 이상의 정수만 허용됩니다: {parsed}")
    return parsed


def setup_parser(console: Console, commands: Iterable[type[Command]]) -> argparse.ArgumentParser:
    """최상위 파서를 만들고 각 Command의 서브커맨드를 등록한다.

    Args:
        console: 오류 패널 출력용 Rich 콘솔 (서브커맨드 파서와 공유)
        commands: Command 서브클래스 이터러블

    Returns:
        설정된 ArgumentParser 객체
    """
    parser = CliArgumentParser(
        console,
        prog="tagcloud",
        description="텍스트 문서의 단어 빈도로 HTML 태그 클라우드를 생성하는 CLI",
        formatter_class=CliHelpFormatter,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="콘솔 로깅 레벨",
    )
    parser.add_argument("--no-log-file", action="store_true", help="로그 파일을 생성하지 않음")

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        metavar="command",
        parser_class=partial(CliArgumentParser, console),
    )
    for cmd_cls in commands:
        cmd_cls.configure_parser(subparsers)

    return parser
