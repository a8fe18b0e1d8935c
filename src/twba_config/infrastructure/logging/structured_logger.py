"""
구조화된 로깅 설정 모듈

structlog 라이브러리를 사용하여 JSON 또는 콘솔 형식으로 로그를 출력합니다.
로그 디렉토리를 지정하면 회전 파일 핸들러도 함께 설정합니다.
"""

import logging
import logging.handlers
from pathlib import Path
from typing import List, Optional, Union

import structlog
from structlog.processors import JSONRenderer
from structlog.stdlib import add_log_level

# JSON 직렬화 가능한 타입 정의
JSONSerializable = Union[str, int, float, bool, None, dict, list]

LOG_FILE_NAME = "twba-config.log"
ERROR_LOG_FILE_NAME = "twba-config-error.log"


def configure_structlog(
    log_dir: Optional[str] = None,
    log_level: str = "INFO",
    enable_json: bool = True,
) -> None:
    """
    structlog를 설정합니다.

    Args:
        log_dir: 로그 파일 디렉토리 (None이면 콘솔에만 출력)
        log_level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_json: JSON 형식 출력 활성화 여부 (False시 콘솔 형식)

    Raises:
        ValueError: 알 수 없는 로그 레벨인 경우

    Example:
        >>> configure_structlog(log_level="DEBUG", enable_json=False)
        >>> logger = get_logger(__name__, component="ConfigLoader")
        >>> logger.info("Loading config from environment variables")
    """
    level = getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        raise ValueError(f"알 수 없는 로그 레벨입니다: {log_level}")

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if enable_json:
        processors.append(JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # 메인 로그: 5MB, 에러 로그: 1MB (ERROR 이상만 기록)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                str(log_path / LOG_FILE_NAME),
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        )
        error_handler = logging.handlers.RotatingFileHandler(
            str(log_path / ERROR_LOG_FILE_NAME),
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        handlers.append(error_handler)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        handlers=handlers,
        force=True,  # 기존 설정 덮어쓰기
    )


def get_logger(name: str, **context: JSONSerializable) -> structlog.stdlib.BoundLogger:
    """
    구조화된 로거를 가져옵니다.

    Args:
        name: 로거 이름 (일반적으로 __name__ 사용)
        **context: 기본 컨텍스트 (JSON 직렬화 가능한 타입만 허용)

    Returns:
        BoundLogger 인스턴스

    Example:
        >>> logger = get_logger(__name__, component="ConfigLoader")
        >>> logger.info("Loading config from file", file_path="/etc/twba/config.json")

    Note:
        context는 첫 로그 출력 시점에 바인딩되므로 모듈 import 시점에 로거를 만들어도
        이후의 configure_structlog() 설정이 적용됩니다.
        context에는 시크릿(twitch_client_secret 등)을 넣지 마세요.
    """
    return structlog.get_logger(name, **context)
