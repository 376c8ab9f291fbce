"""태그 클라우드 출력 렌더러."""
