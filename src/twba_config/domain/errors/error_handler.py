"""에러 핸들러

설정 로딩 커스텀 예외 클래스 및 에러 처리 유틸리티를 제공합니다.
"""

from typing import Any, Dict, Optional

from .error_codes import ErrorCode
from .error_messages import format_error_message


class ConfigLoadError(Exception):
    """설정 로딩 기본 예외 클래스

    모든 twba-config 커스텀 예외는 이 클래스를 상속합니다.

    Attributes:
        error_code: 에러 코드
        message: 에러 메시지
        context: 추가 컨텍스트 정보
        original_error: 원본 예외 (있는 경우)

    Examples:
        >>> raise ConfigLoadError(
        ...     ErrorCode.CONFIG_MISSING_REQUIRED_FIELD,
        ...     field_name="twitch_client_id",
        ...     env_var="TWITCH_CLIENT_ID",
        ... )
    """

    def __init__(
        self,
        error_code: ErrorCode,
        original_error: Optional[Exception] = None,
        **context: Any
    ):
        """에러 초기화

        Args:
            error_code: 에러 코드
            original_error: 원본 예외 (선택)
            **context: 에러 메시지에 포함할 컨텍스트 정보
        """
        self.error_code = error_code
        self.context = context
        self.original_error = original_error

        # 원본 에러가 있으면 context에 추가
        if original_error is not None and "error" not in self.context:
            self.context["error"] = str(original_error)

        self.message = format_error_message(error_code, **self.context)

        super().__init__(self.message)

    @property
    def field_name(self) -> Optional[str]:
        """에러를 일으킨 설정 필드명 (필드와 무관한 에러면 None)"""
        return self.context.get("field_name")

    def to_dict(self) -> Dict[str, Any]:
        """에러를 딕셔너리로 변환 (로깅용)

        Returns:
            에러 정보를 담은 딕셔너리

        Examples:
            >>> error.to_dict()
            {
                "error_code": "CONFIG_FIELD_NOT_A_NUMBER",
                "error_number": 2004,
                "category": "Config",
                "message": "AUTH_FILE_READ_TIMEOUT는 숫자가 아닙니다...",
                "context": {"field_name": "auth_file_read_timeout", ...}
            }
        """
        return {
            "error_code": self.error_code.name,
            "error_number": self.error_code.value,
            "category": self.error_code.category,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        """에러를 문자열로 반환"""
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}("
            f"error_code={self.error_code.name}, "
            f"message='{self.message}', "
            f"context={self.context})"
        )


class ConfigFileReadError(ConfigLoadError):
    """설정 파일을 읽을 수 없음"""
    pass


class ConfigParseError(ConfigLoadError):
    """설정 파일 JSON 형식 오류"""
    pass


class RequiredFieldMissingError(ConfigLoadError):
    """필수 필드 누락 (TWITCH_CLIENT_ID, TWITCH_CLIENT_SECRET)"""
    pass


class FieldNotANumberError(ConfigLoadError):
    """숫자 필드 파싱 실패"""
    pass


class FileSupportDisabledError(ConfigLoadError):
    """파일 설정이 비활성화된 상태에서 환경변수 로딩 실패"""
    pass


# 에러 코드별 예외 클래스 매핑
ERROR_CLASS_MAPPING: Dict[ErrorCode, type] = {
    ErrorCode.CONFIG_FILE_READ_FAILED: ConfigFileReadError,
    ErrorCode.CONFIG_PARSE_FAILED: ConfigParseError,
    ErrorCode.CONFIG_MISSING_REQUIRED_FIELD: RequiredFieldMissingError,
    ErrorCode.CONFIG_FIELD_NOT_A_NUMBER: FieldNotANumberError,
    ErrorCode.CONFIG_FILE_SUPPORT_DISABLED: FileSupportDisabledError,
}


def handle_error(
    error_code: ErrorCode,
    original_error: Optional[Exception] = None,
    log: bool = True,
    **context: Any
) -> ConfigLoadError:
    """에러를 처리하고 적절한 예외를 반환

    Args:
        error_code: 에러 코드
        original_error: 원본 예외 (선택)
        log: 로깅 여부 (기본: True)
        **context: 에러 컨텍스트 정보

    Returns:
        적절한 ConfigLoadError 서브클래스 인스턴스

    Examples:
        >>> try:
        ...     timeout = parse_int(raw, "5", signed=False)
        ... except ValueError as e:
        ...     raise handle_error(
        ...         ErrorCode.CONFIG_FIELD_NOT_A_NUMBER,
        ...         original_error=e,
        ...         field_name="auth_file_read_timeout",
        ...         env_var="AUTH_FILE_READ_TIMEOUT",
        ...         value=raw,
        ...     ) from e
    """
    error_class = ERROR_CLASS_MAPPING.get(error_code, ConfigLoadError)

    exception = error_class(
        error_code=error_code,
        original_error=original_error,
        **context
    )

    if log:
        # 순환 import 방지를 위해 여기서 import
        from twba_config.infrastructure.logging import get_logger
        logger = get_logger(__name__)

        if error_code.value >= 9000:
            logger.critical(
                exception.message,
                error_code=error_code.name,
                **exception.context,
                exc_info=original_error
            )
        else:
            logger.warning(
                exception.message,
                error_code=error_code.name,
                **exception.context
            )

    return exception
