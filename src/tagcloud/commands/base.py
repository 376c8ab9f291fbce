"""tagcloud 서브커맨드(generate, analyze)의 공통 계약.

커맨드 하나의 수명은 세 단계로 나뉜다.

1. configure_parser(): 서브파서에 인자를 등록한다. 단어 수/글꼴 크기처럼
   도메인 규칙이 있는 인자는 tagcloud.parser의 타입을 써서 파싱 단계에서 걸러낸다.
2. from_args(): 파싱된 Namespace를 설정 객체로 옮겨 커맨드를 만든다.
   generate는 여기서 --interactive 입력을 받고 기본 단어 수를 채운다.
3. execute(): 파일을 읽고 결과물(HTML 문서 또는 빈도 parquet)을 저장한 뒤
   결과 패널에 표시할 요약 딕셔너리를 반환한다.

실행 중 오류는 TagCloudError 계열로 올려 보내고, 분류와 종료 코드 결정은 cli.handle_error()가 맡는다.
"""

from __future__ import annotations

import argparse
from abc import ABC, abstractmethod
from typing import Any, Protocol

from rich.console import Console


class SubparsersLike(Protocol):
    """add_parser()만 필요로 하는 서브파서 액션 프로토콜."""

    def add_parser(self, name: str, **kwargs: Any) -> argparse.ArgumentParser:
        """서브커맨드 파서를 추가한다."""
        ...


class Command(ABC):
    """tagcloud 서브커맨드.

    cli.COMMANDS에 등록된 클래스마다 configure_parser()가 호출되고,
    선택된 서브커맨드만 from_args()로 생성되어 execute()된다.
    """

    @staticmethod
    @abstractmethod
    def configure_parser(subparsers: SubparsersLike) -> None:
        """서브커맨드 이름과 인자를 등록한다.

        Args:
            subparsers: setup_parser()가 만든 서브파서 액션
        """
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def from_args(cls, console: Console, args: argparse.Namespace) -> Command:
        """파싱된 인자로 커맨드를 생성한다.

        Args:
            console: 진행 상황과 요약 표를 출력할 Rich 콘솔
            args: setup_parser()로 파싱된 인자

        Raises:
            ValueError: 인자 조합이 실행에 필요한 값을 채우지 못하는 경우
        """
        raise NotImplementedError

    @abstractmethod
    def execute(self) -> dict[str, Any]:
        """입력 파일을 처리하고 결과물을 저장한다.

        Returns:
            결과 패널에 표시할 요약 (출력 경로, 단어 수, 빈도 통계 등)

        Raises:
            TagCloudError: 설정 검증 또는 입출력에 실패한 경우
        """
        raise NotImplementedError

    @abstractmethod
    def get_name(self) -> str:
        """로그와 결과 패널에 쓰일 서브커맨드 이름 ("generate" 또는 "analyze")."""
        raise NotImplementedError
