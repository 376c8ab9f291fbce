"""태그 클라우드 HTML 렌더러.

알파벳순으로 정렬된 단어를 글꼴 크기 클래스(f11 ~ f48)가 지정된 span으로 출력한다.
"""

from __future__ import annotations

from html import escape
from pathlib import Path
from typing import Sequence

from tagcloud.analysis.cloud import CloudResult
from tagcloud.constants import DEFAULT_STYLESHEETS
from tagcloud.errors import TagCloudIOError
from tagcloud.utils.logging_config import get_logger

logger = get_logger(__name__)


def render_header(title: str, selection_size: int, stylesheets: Sequence[str]) -> list[str]:
    """HTML 문서의 여는 태그들을 생성한다."""
    safe_title = escape(title)
    lines = [
        "<html>",
        "<head>",
        f"<title>{safe_title}</title>",
    ]
    lines.extend(f'<link href="{escape(href)}" rel="stylesheet" type="text/css">' for href in stylesheets)
    lines.extend(
        [
            "</head>",
            "<body>",
            f"<h2>Top {selection_size} words in {safe_title}</h2>",
            "<hr>",
            '<div class="cdiv">',
            '<p class="cbox">',
        ]
    )
    return lines


def render_body(result: CloudResult) -> list[str]:
    """단어별 span 태그를 생성한다."""
    return [
        f'<span style="cursor:default" class="f{entry.font_size}" '
        f'title="count: {entry.count}">{escape(entry.word)}</span>'
        for entry in result.entries
    ]


def render_footer() -> list[str]:
    """HTML 문서의 닫는 태그들을 생성한다."""
    return ["</p>", "</div>", "</body>", "</html>"]


def render_html(
    result: CloudResult,
    title: str,
    stylesheets: Sequence[str] = DEFAULT_STYLESHEETS,
) -> str:
    """태그 클라우드 HTML 문서를 문자열로 생성한다.

    Args:
        result: 태그 클라우드 데이터
        title: 문서 제목 (보통 입력 파일 이름)
        stylesheets: 포함할 스타일시트 URL 목록

    Returns:
        완성된 HTML 문서 (빈 클라우드도 유효한 문서)
    """
    lines = render_header(title, result.selection_size, stylesheets)
    lines.extend(render_body(result))
    lines.extend(render_footer())
    return "\n".join(lines) + "\n"


def write_html(
    result: CloudResult,
    output_path: Path,
    title: str,
    stylesheets: Sequence[str] = DEFAULT_STYLESHEETS,
) -> Path:
    """태그 클라우드 HTML 문서를 파일로 저장한다.

    Raises:
        TagCloudIOError: 출력 파일을 쓸 수 없는 경우
    """
    document = render_html(result, title, stylesheets)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise TagCloudIOError(f"출력 파일을 쓸 수 없습니다: {output_path} ({e})") from e

    logger.info("📄 태그 클라우드 저장: %s", output_path)
    return output_path
