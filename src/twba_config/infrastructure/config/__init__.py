"""
Configuration Infrastructure

환경변수 / JSON 파일 기반 설정 로더
"""

from .loader import ConfigLoader, build_config, get_empty_config, load_config, try_load_config
from .sources import ConfigSource, EnvironmentSource, JsonFileSource

__all__ = [
    "ConfigLoader",
    "build_config",
    "get_empty_config",
    "load_config",
    "try_load_config",
    "ConfigSource",
    "EnvironmentSource",
    "JsonFileSource",
]
