"""태그 클라우드 예외 정의.

설정 오류와 입출력 오류를 구분하여 호출자가 실패 종류별로 처리할 수 있게 한다.
"""

from __future__ import annotations


class TagCloudError(Exception):
    """태그 클라우드 생성 과정에서 발생하는 모든 예외의 기반 클래스."""


class InvalidSelectionSize(TagCloudError, ValueError):
    """선택할 단어 수가 음수이거나 정수로 해석할 수 없는 경우."""


class InvalidFontRange(TagCloudError, ValueError):
    """글꼴 크기 범위가 올바르지 않은 경우 (음수 또는 최소값 > 최대값)."""


class TagCloudIOError(TagCloudError, OSError):
    """입력 파일을 읽거나 출력 파일을 쓸 수 없는 경우."""
