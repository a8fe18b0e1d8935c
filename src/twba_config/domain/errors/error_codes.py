"""에러 코드 정의

설정 로딩 중 발생하는 모든 에러를 번호로 분류하여 관리합니다.
"""

from enum import Enum


class ErrorCode(Enum):
    """twba-config 에러 코드

    에러 코드는 4자리 숫자로 구성되며, 앞 두 자리는 카테고리를 나타냅니다.

    Categories:
        20xx: Config 관련 에러
        90xx: 기타 에러
    """

    # ==================== Config 관련 (2000-2999) ====================
    CONFIG_FILE_READ_FAILED = 2001
    """설정 파일 읽기 실패"""

    CONFIG_PARSE_FAILED = 2002
    """설정 파일 형식 오류 (JSON 파싱 실패)"""

    CONFIG_MISSING_REQUIRED_FIELD = 2003
    """필수 설정 항목 누락"""

    CONFIG_FIELD_NOT_A_NUMBER = 2004
    """숫자여야 하는 설정 항목이 숫자가 아님"""

    CONFIG_FILE_SUPPORT_DISABLED = 2005
    """파일 로딩이 비활성화된 상태에서 환경변수 로딩 실패"""

    # ==================== 기타 (9000-9999) ====================
    UNKNOWN_ERROR = 9001
    """알 수 없는 에러"""

    @property
    def category(self) -> str:
        """에러 카테고리 이름"""
        if 2000 <= self.value < 3000:
            return "Config"
        return "Other"

    def __str__(self) -> str:
        """에러 코드를 문자열로 반환 (예: 'CONFIG_PARSE_FAILED (2002)')"""
        return f"{self.name} ({self.value})"
