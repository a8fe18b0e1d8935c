"""원시 설정 값 파싱 유틸리티

환경변수나 설정 파일에서 읽은 문자열을 타입 안전하게 변환하는 헬퍼 함수들을 제공합니다.
모든 함수는 값이 없을 때(None) 기본 원시 문자열을 먼저 적용한 뒤 변환합니다.
"""

import re
from typing import List, Optional

_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")

# 64비트 정수 범위 (unsigned: u64, signed: i64)
UNSIGNED_INT_MAX = 2 ** 64 - 1
SIGNED_INT_MIN = -(2 ** 63)
SIGNED_INT_MAX = 2 ** 63 - 1


def parse_str(raw: Optional[str], default: str) -> str:
    """
    문자열 값 반환 (없으면 기본값)

    Examples:
        >>> parse_str(None, "backup_data")
        'backup_data'

        >>> parse_str("custom", "backup_data")
        'custom'
    """
    return default if raw is None else raw


def parse_flag(raw: Optional[str], default: str) -> bool:
    """
    플래그 값을 bool로 파싱

    정확히 "1"일 때만 True입니다. "true", "yes" 등은 False로 취급합니다.

    Args:
        raw: 원시 문자열 (None이면 default 사용)
        default: 기본 원시 문자열 ("1" 또는 "0")

    Examples:
        >>> parse_flag("1", "0")
        True

        >>> parse_flag("true", "1")
        False

        >>> parse_flag(None, "1")
        True
    """
    return parse_str(raw, default) == "1"


def parse_int(raw: Optional[str], default: str, signed: bool = True) -> int:
    """
    정수 값 파싱

    부호(선택)와 ASCII 숫자만 허용합니다. 공백, 밑줄, 소수점은 허용하지 않습니다.
    값은 64비트 범위 안에 있어야 합니다 (unsigned: 0..2**64-1, signed: -2**63..2**63-1).

    Args:
        raw: 원시 문자열 (None이면 default 사용)
        default: 기본 원시 문자열
        signed: False면 음수를 허용하지 않음

    Returns:
        파싱된 int 값

    Raises:
        ValueError: 정수 형식이 아니거나 64비트 범위를 벗어난 경우

    Examples:
        >>> parse_int("50", "5")
        50

        >>> parse_int(None, "300")
        300

        >>> parse_int("-1", "5", signed=False)
        Traceback (most recent call last):
        ValueError: invalid digit found in string: '-1'
    """
    value = parse_str(raw, default)
    pattern = _SIGNED_INT_RE if signed else _UNSIGNED_INT_RE

    if not value:
        raise ValueError("cannot parse integer from empty string")
    if not pattern.fullmatch(value):
        raise ValueError(f"invalid digit found in string: {value!r}")

    number = int(value)
    low, high = (SIGNED_INT_MIN, SIGNED_INT_MAX) if signed else (0, UNSIGNED_INT_MAX)
    if not low <= number <= high:
        raise ValueError("number too large to fit in target type")

    return number


def parse_list(raw: Optional[str], default: str = "", sep: str = ",") -> List[str]:
    """
    구분자로 나뉜 문자열을 리스트로 파싱

    빈 문자열은 빈 문자열 하나를 담은 리스트가 됩니다.

    Examples:
        >>> parse_list("a,b,c")
        ['a', 'b', 'c']

        >>> parse_list(None)
        ['']
    """
    return parse_str(raw, default).split(sep)
