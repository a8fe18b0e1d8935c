"""
Domain Layer

설정 모델과 에러 정의
"""

from .models import CONFIG_FILE_PATH_ENV, FIELD_NAMES, Config, ConfigBuilder, env_var_name

__all__ = [
    "CONFIG_FILE_PATH_ENV",
    "FIELD_NAMES",
    "Config",
    "ConfigBuilder",
    "env_var_name",
]
