"""
twba-config - Twitch → YouTube 백업 파이프라인 설정 로더

환경변수 또는 CONFIG_FILE_PATH가 가리키는 JSON 파일에서 설정을 읽어
기본값 적용과 검증을 거친 불변 Config를 반환합니다.

아키텍처:
- domain: 설정 모델 (Config, ConfigBuilder) 및 에러 정의
- infrastructure: 설정 소스, 로더, 로깅 구현

Example:
    >>> from twba_config import try_load_config
    >>> config = try_load_config()
    >>> config.twitch_downloader_thread_count
    50
"""

__version__ = "0.3.0"

from .domain.errors import (
    ConfigFileReadError,
    ConfigLoadError,
    ConfigParseError,
    ErrorCode,
    FieldNotANumberError,
    FileSupportDisabledError,
    RequiredFieldMissingError,
)
from .domain.models import Config, ConfigBuilder
from .infrastructure.config import (
    ConfigLoader,
    ConfigSource,
    EnvironmentSource,
    JsonFileSource,
    build_config,
    get_empty_config,
    load_config,
    try_load_config,
)

__all__ = [
    "Config",
    "ConfigBuilder",
    "ConfigLoader",
    "ConfigSource",
    "EnvironmentSource",
    "JsonFileSource",
    "build_config",
    "get_empty_config",
    "load_config",
    "try_load_config",
    "ErrorCode",
    "ConfigLoadError",
    "ConfigFileReadError",
    "ConfigParseError",
    "RequiredFieldMissingError",
    "FieldNotANumberError",
    "FileSupportDisabledError",
]
