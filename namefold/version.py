"""
namefold 버전 정보 (Semantic Versioning)
"""

VERSION_INFO = (1, 4, 2)
__version__ = ".".join(str(part) for part in VERSION_INFO)
__author__ = "namefold Team"
__app_name__ = "namefold"


def get_full_version() -> str:
    """--version 출력 문자열 (예: 'namefold 1.4.2 by namefold Team')"""
    return f"{__app_name__} {__version__} by {__author__}"
