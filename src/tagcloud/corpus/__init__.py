"""입력 코퍼스 읽기 헬퍼."""
