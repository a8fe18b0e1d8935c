"""에러 메시지 템플릿

각 에러 코드에 대한 사용자 친화적인 메시지를 제공합니다.
"""

from typing import Any, Dict

from .error_codes import ErrorCode


# 에러 코드별 메시지 템플릿
ERROR_MESSAGES: Dict[ErrorCode, str] = {
    ErrorCode.CONFIG_FILE_READ_FAILED: (
        "설정 파일 '{file_path}'를 읽는 데 실패했습니다: {error}"
    ),
    ErrorCode.CONFIG_PARSE_FAILED: (
        "설정 파일 '{file_path}'의 형식이 올바르지 않습니다: {error}"
    ),
    ErrorCode.CONFIG_MISSING_REQUIRED_FIELD: (
        "필수 설정 항목 '{field_name}'이 누락되었습니다. "
        "환경변수 {env_var} 또는 설정 파일에 값을 지정하세요."
    ),
    ErrorCode.CONFIG_FIELD_NOT_A_NUMBER: (
        "{env_var}는 숫자가 아닙니다: '{value}' ({error})"
    ),
    ErrorCode.CONFIG_FILE_SUPPORT_DISABLED: (
        "환경변수에서 설정을 로드하지 못했고 파일 설정이 비활성화되어 있습니다 "
        "(무시된 CONFIG_FILE_PATH: '{file_path}'): {error}"
    ),
    ErrorCode.UNKNOWN_ERROR: (
        "알 수 없는 에러가 발생했습니다: {error}"
    ),
}


def get_error_message(error_code: ErrorCode) -> str:
    """에러 코드에 해당하는 메시지 템플릿 반환

    Args:
        error_code: 에러 코드

    Returns:
        에러 메시지 템플릿

    Examples:
        >>> get_error_message(ErrorCode.CONFIG_MISSING_REQUIRED_FIELD)
        "필수 설정 항목 '{field_name}'이 누락되었습니다..."
    """
    return ERROR_MESSAGES.get(
        error_code,
        "알 수 없는 에러 코드입니다: {error_code}"
    )


def format_error_message(error_code: ErrorCode, **context: Any) -> str:
    """에러 메시지를 컨텍스트 정보로 포맷팅

    Args:
        error_code: 에러 코드
        **context: 메시지 템플릿에 삽입할 컨텍스트 정보

    Returns:
        포맷팅된 에러 메시지

    Examples:
        >>> format_error_message(
        ...     ErrorCode.CONFIG_MISSING_REQUIRED_FIELD,
        ...     field_name="twitch_client_id",
        ...     env_var="TWITCH_CLIENT_ID",
        ... )
        "필수 설정 항목 'twitch_client_id'이 누락되었습니다..."
    """
    template = get_error_message(error_code)

    # 템플릿에서 error_code도 사용할 수 있도록 추가 (호출자의 dict는 건드리지 않음)
    values = dict(context, error_code=error_code)

    try:
        return template.format(**values)
    except KeyError as e:
        # 템플릿에 필요한 변수가 context에 없는 경우
        return (
            f"{template} [포맷 오류: 필수 변수 '{e.args[0]}'가 누락되었습니다. "
            f"제공된 변수: {list(values.keys())}]"
        )
