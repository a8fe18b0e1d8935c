"""
설정 소스 구현

ConfigSource: 원시 설정(ConfigBuilder)을 제공하는 전략 인터페이스
EnvironmentSource: 환경변수 매핑에서 읽기 (.env 파일 병합 지원)
JsonFileSource: JSON 파일에서 읽기
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import dotenv_values

from twba_config.domain.errors import ErrorCode, handle_error
from twba_config.domain.models import ConfigBuilder
from twba_config.infrastructure.logging import get_logger

logger = get_logger(__name__, component="ConfigSource")


class ConfigSource(ABC):
    """원시 설정 소스"""

    @abstractmethod
    def read(self) -> ConfigBuilder:
        """
        원시 설정 읽기

        Raises:
            ConfigLoadError: 소스를 읽을 수 없는 경우
        """

    @abstractmethod
    def describe(self) -> str:
        """로그용 소스 설명"""


class EnvironmentSource(ConfigSource):
    """
    환경변수 설정 소스

    필드명의 대문자 이름(예: TWITCH_CLIENT_ID)으로 값을 조회합니다.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            environ: 환경변수 매핑 (None이면 os.environ)
        """
        self.environ = os.environ if environ is None else environ

    @classmethod
    def with_dotenv(
        cls,
        dotenv_path: Union[str, Path],
        environ: Optional[Mapping[str, str]] = None,
    ) -> "EnvironmentSource":
        """
        .env 파일 값 위에 환경변수를 덮어쓴 소스 생성

        같은 키가 양쪽에 있으면 환경변수가 우선합니다.
        .env 파일이 없으면 환경변수만 사용합니다.

        Args:
            dotenv_path: .env 파일 경로
            environ: 환경변수 매핑 (None이면 os.environ)
        """
        merged = {
            key: value
            for key, value in dotenv_values(dotenv_path).items()
            if value is not None
        }
        merged.update(os.environ if environ is None else environ)
        logger.debug("Merged .env values into environment", dotenv_path=str(dotenv_path))
        return cls(merged)

    def read(self) -> ConfigBuilder:
        return ConfigBuilder.from_env(self.environ)

    def describe(self) -> str:
        return "environment variables"


class JsonFileSource(ConfigSource):
    """
    JSON 파일 설정 소스

    파일은 필드명을 키로, 문자열(또는 null)을 값으로 갖는 평탄한 JSON 객체여야 합니다.
    """

    def __init__(self, path: Union[str, Path], log: bool = True):
        """
        Args:
            path: 설정 파일 경로
            log: 에러 로깅 여부
        """
        self.path = Path(path)
        # Path("")는 "."이 되므로 에러 메시지에는 원래 문자열을 사용
        self.raw_path = str(path)
        self.log = log

    def read(self) -> ConfigBuilder:
        """
        설정 파일 읽기

        Raises:
            ConfigFileReadError: 파일을 읽을 수 없는 경우
            ConfigParseError: JSON 형식이 잘못되었거나 값이 문자열이 아닌 경우
        """
        file_path = self.raw_path

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise handle_error(
                ErrorCode.CONFIG_FILE_READ_FAILED,
                original_error=e,
                log=self.log,
                file_path=file_path,
            ) from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                original_error=e,
                log=self.log,
                file_path=file_path,
            ) from e

        if not isinstance(data, dict):
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                log=self.log,
                file_path=file_path,
                error=f"최상위 값은 JSON 객체여야 합니다 (받은 타입: {type(data).__name__})",
            )

        try:
            return ConfigBuilder.from_dict(data)
        except ValueError as e:
            raise handle_error(
                ErrorCode.CONFIG_PARSE_FAILED,
                original_error=e,
                log=self.log,
                file_path=file_path,
            ) from e

    def describe(self) -> str:
        return f"file {self.raw_path}"
