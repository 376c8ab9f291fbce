"""중앙화된 산출물 경로 및 기본 설정 상수 관리

이 모듈은 프로젝트 전체에서 사용되는 artifacts 경로와 태그 클라우드 기본값을 중앙에서 관리한다.
모든 하드코딩된 경로와 수치는 이 모듈의 상수를 참조해야 한다.
"""

from __future__ import annotations

from pathlib import Path

# ====================================================================
# 📁 루트 디렉토리
# ====================================================================

ARTIFACTS_ROOT = Path("artifacts")

# ====================================================================
# ☁️ 태그 클라우드 산출물 경로
# ====================================================================

CLOUDS_DIR = ARTIFACTS_ROOT / "clouds"

# ====================================================================
# 📈 분석 산출물 경로
# ====================================================================

ANALYSIS_ROOT = ARTIFACTS_ROOT / "analysis"
ANALYSIS_REPORTS_DIR = ANALYSIS_ROOT / "reports"

WORD_FREQUENCY_FILE = ANALYSIS_REPORTS_DIR / "word_frequency.parquet"

# ====================================================================
# 📝 로그 경로
# ====================================================================

LOGS_DIR = ARTIFACTS_ROOT / "logs"

# ====================================================================
# 🔤 토큰화 설정
# ====================================================================

# 공백, 탭, CR, LF 및 구두점
SEPARATORS = " \t\r\n!,-.?[]';:/()"

# ====================================================================
# 🔠 글꼴 크기 설정
# ====================================================================

FONT_MIN = 11
FONT_MAX = 48
LEGACY_FONT_MAX = 78

DEFAULT_SELECTION_SIZE = 100

# ====================================================================
# 🎨 HTML 스타일시트
# ====================================================================

DEFAULT_STYLESHEETS = (
    "http://web.cse.ohio-state.edu/software/2231/web-sw2/assignments/projects/"
    "tag-cloud-generator/data/tagcloud.css",
    "tagcloud.css",
)
