"""unicon - 명령줄 단위 변환 도구"""

__version__ = "0.1"
