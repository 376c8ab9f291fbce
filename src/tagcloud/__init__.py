"""태그 클라우드 생성기 패키지.

텍스트 문서의 단어 빈도를 집계하여 상위 N개 단어를 선정하고,
빈도에 비례하는 글꼴 크기로 알파벳순 HTML 태그 클라우드를 생성한다.
"""
