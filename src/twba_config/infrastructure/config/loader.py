"""
설정 로더 구현

ConfigLoader: 설정 소스 선택 (JSON 파일 또는 환경변수) 후 Config 생성
build_config: 원시 값에 기본값 적용, 타입 변환 및 검증
get_empty_config: 빈 원시 설정으로 Config 생성 (필수 필드 검증 확인용)
"""

import os
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from twba_config.domain.errors import ConfigLoadError, ErrorCode, handle_error
from twba_config.domain.models import CONFIG_FILE_PATH_ENV, Config, ConfigBuilder, env_var_name
from twba_config.infrastructure.logging import get_logger

from .env_utils import parse_flag, parse_int, parse_list, parse_str
from .sources import ConfigSource, EnvironmentSource, JsonFileSource

logger = get_logger(__name__, component="ConfigLoader")

# 필드별 기본 원시 값 (twitch_client_id, twitch_client_secret은 기본값 없음)
DEFAULTS = {
    "path_auth_code": "/tmp/twba/auth/code.txt",
    "path_authentications": "/tmp/twba/auth/{user}.json",
    "use_file_auth_response": "1",
    "use_local_auth_redirect": "0",
    "auth_file_read_timeout": "5",
    "twitch_downloader_id": "kimne78kx3ncx6brgo4mv6wki5h1ko",
    "twitch_downloader_thread_count": "50",
    "bigquery_project_id": "twitchbackup-v1",
    "bigquery_dataset_id": "backup_data",
    "bigquery_service_account_path": "auth/bigquery_service_account.json",
    "youtube_client_secret_path": "auth/youtube_client_secret.json",
    "youtube_tags": "",
    "youtube_description_template": 'test description for "$$video_title$$"',
    "youtube_video_length_minutes_soft_cap": "300",
    "youtube_video_length_minutes_hard_cap": "359",
    "download_folder_path": "/var/tmp/twba/videos/",
}

# 파싱 실패 시 에러 대신 사용하는 값
FALLBACKS = {
    "youtube_video_length_minutes_soft_cap": 30,
    "youtube_video_length_minutes_hard_cap": 60,
}


def _required(builder: ConfigBuilder, name: str, log: bool) -> str:
    value = getattr(builder, name)
    if not value:
        raise handle_error(
            ErrorCode.CONFIG_MISSING_REQUIRED_FIELD,
            log=log,
            field_name=name,
            env_var=env_var_name(name),
        )
    return value


def _strict_int(builder: ConfigBuilder, name: str, log: bool, signed: bool = False) -> int:
    raw = getattr(builder, name)
    try:
        return parse_int(raw, DEFAULTS[name], signed=signed)
    except ValueError as e:
        raise handle_error(
            ErrorCode.CONFIG_FIELD_NOT_A_NUMBER,
            original_error=e,
            log=log,
            field_name=name,
            env_var=env_var_name(name),
            value=raw,
        ) from e


def _fallback_int(builder: ConfigBuilder, name: str, log: bool) -> int:
    raw = getattr(builder, name)
    try:
        return parse_int(raw, DEFAULTS[name])
    except ValueError:
        fallback = FALLBACKS[name]
        if log:
            logger.warning(
                "Invalid integer, using fallback value",
                field_name=name,
                value=raw,
                fallback=fallback,
            )
        return fallback


def build_config(builder: ConfigBuilder, log: bool = True) -> Config:
    """
    원시 설정으로 Config 생성

    필드는 선언 순서대로 처리되므로 처음 실패한 필드가 보고됩니다.

    Args:
        builder: 원시 설정 값
        log: 로깅 여부

    Returns:
        검증된 Config

    Raises:
        RequiredFieldMissingError: twitch_client_id / twitch_client_secret이 없는 경우
        FieldNotANumberError: auth_file_read_timeout / twitch_downloader_thread_count가 숫자가 아닌 경우
    """
    def text(name: str) -> str:
        return parse_str(getattr(builder, name), DEFAULTS[name])

    def flag(name: str) -> bool:
        return parse_flag(getattr(builder, name), DEFAULTS[name])

    return Config(
        path_auth_code=text("path_auth_code"),
        path_authentications=text("path_authentications"),
        use_file_auth_response=flag("use_file_auth_response"),
        use_local_auth_redirect=flag("use_local_auth_redirect"),
        auth_file_read_timeout=_strict_int(builder, "auth_file_read_timeout", log),
        twitch_client_id=_required(builder, "twitch_client_id", log),
        twitch_client_secret=_required(builder, "twitch_client_secret", log),
        twitch_downloader_id=text("twitch_downloader_id"),
        twitch_downloader_thread_count=_strict_int(builder, "twitch_downloader_thread_count", log),
        bigquery_project_id=text("bigquery_project_id"),
        bigquery_dataset_id=text("bigquery_dataset_id"),
        bigquery_service_account_path=text("bigquery_service_account_path"),
        youtube_client_secret_path=text("youtube_client_secret_path"),
        youtube_tags=tuple(parse_list(builder.youtube_tags, DEFAULTS["youtube_tags"])),
        youtube_description_template=text("youtube_description_template"),
        youtube_video_length_minutes_soft_cap=_fallback_int(
            builder, "youtube_video_length_minutes_soft_cap", log
        ),
        youtube_video_length_minutes_hard_cap=_fallback_int(
            builder, "youtube_video_length_minutes_hard_cap", log
        ),
        download_folder_path=text("download_folder_path"),
    )


class ConfigLoader:
    """
    설정 로더

    CONFIG_FILE_PATH 환경변수가 있으면 해당 JSON 파일에서,
    없으면 환경변수에서 설정을 읽습니다.
    dotenv_path를 지정하면 .env 파일 값 위에 환경변수를 덮어써서 사용합니다.
    """

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        file_support: bool = True,
        log: bool = True,
        dotenv_path: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            environ: 환경변수 매핑 (None이면 os.environ)
            file_support: False면 CONFIG_FILE_PATH를 무시하고 항상 환경변수 사용
            log: 로깅 여부
            dotenv_path: .env 파일 경로 (None이면 .env를 읽지 않음)
        """
        self.environ = os.environ if environ is None else environ
        self.file_support = file_support
        self.log = log
        self.dotenv_path = dotenv_path

    def _log(self, level: str, event: str, **kw: Any) -> None:
        if self.log:
            getattr(logger, level)(event, **kw)

    def _environment(self) -> Mapping[str, str]:
        # .env는 로드할 때마다 다시 읽음 (CONFIG_FILE_PATH도 .env에서 지정 가능)
        if self.dotenv_path is None:
            return self.environ
        return EnvironmentSource.with_dotenv(self.dotenv_path, self.environ).environ

    def _select(self, environ: Mapping[str, str]) -> ConfigSource:
        if self.file_support:
            config_file_path = environ.get(CONFIG_FILE_PATH_ENV)
            if config_file_path is not None:
                self._log("debug", "Found config file path", file_path=config_file_path)
                return JsonFileSource(config_file_path, log=self.log)
            self._log(
                "warning",
                "CONFIG_FILE_PATH not set. Using environment variables instead.",
            )
        return EnvironmentSource(environ)

    def select_source(self) -> ConfigSource:
        """
        설정 소스 선택

        Returns:
            CONFIG_FILE_PATH가 설정되어 있고 파일 설정이 활성화되어 있으면 JsonFileSource,
            아니면 EnvironmentSource
        """
        return self._select(self._environment())

    def load(self) -> Config:
        """
        설정 로드

        Returns:
            검증된 Config

        Raises:
            ConfigLoadError: 파일 읽기/파싱 실패, 필수 필드 누락, 숫자 필드 파싱 실패
        """
        self._log("debug", "Loading config")

        environ = self._environment()
        source = self._select(environ)
        self._log("info", f"Loading config from {source.describe()}")
        builder = source.read()

        try:
            config = build_config(builder, log=self.log)
        except ConfigLoadError as e:
            ignored_path = environ.get(CONFIG_FILE_PATH_ENV)
            if self.file_support or ignored_path is None:
                raise
            raise handle_error(
                ErrorCode.CONFIG_FILE_SUPPORT_DISABLED,
                original_error=e,
                log=self.log,
                file_path=ignored_path,
            ) from e

        self._log("debug", "Config loaded", source=source.describe())
        return config


def get_empty_config(log: bool = True) -> Config:
    """
    값이 하나도 없는 원시 설정으로 Config 생성

    twitch_client_id에 기본값이 없으므로 항상 RequiredFieldMissingError가 발생합니다.
    필수 필드가 무엇인지 확인하는 용도로 사용합니다.

    Raises:
        RequiredFieldMissingError: 항상
    """
    return build_config(ConfigBuilder(), log=log)


def try_load_config(
    environ: Optional[Mapping[str, str]] = None,
    file_support: bool = True,
    log: bool = True,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> Config:
    """
    설정 로드 (간편 함수)

    Returns:
        Config: 검증된 설정

    Raises:
        ConfigLoadError: 로드 실패 시 (원인별 서브클래스)
    """
    return ConfigLoader(
        environ=environ,
        file_support=file_support,
        log=log,
        dotenv_path=dotenv_path,
    ).load()


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    file_support: bool = True,
    log: bool = True,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> Config:
    """
    설정 로드 (프로세스 진입점용)

    로드에 실패하면 SystemExit을 발생시켜 프로세스를 종료합니다.
    라이브러리 코드에서는 try_load_config()를 사용하세요.

    Raises:
        SystemExit: 로드 실패 시
    """
    try:
        return try_load_config(
            environ=environ,
            file_support=file_support,
            log=log,
            dotenv_path=dotenv_path,
        )
    except ConfigLoadError as e:
        raise SystemExit(f"Failed to load config: {e}") from e
