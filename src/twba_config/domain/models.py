"""
설정 도메인 모델

Config: 검증이 끝난 불변 설정 값
ConfigBuilder: 타입 변환 전의 원시 문자열 설정 (모든 필드 Optional)
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple

# CONFIG_FILE_PATH가 설정되어 있으면 해당 JSON 파일에서 설정을 읽는다
CONFIG_FILE_PATH_ENV = "CONFIG_FILE_PATH"

SECRET_MASK = "********"


@dataclass(frozen=True)
class Config:
    """
    Twitch → YouTube 백업 파이프라인 설정

    다운로더, 인증, BigQuery, YouTube 업로더가 공통으로 사용하는 읽기 전용 설정입니다.

    Attributes:
        path_auth_code: 인증 코드 파일 경로
        path_authentications: 사용자별 인증 파일 경로 템플릿 ('{user}' 포함)
        use_file_auth_response: 인증 응답을 파일에서 읽을지 여부
        use_local_auth_redirect: 로컬 리다이렉트 사용 여부
        auth_file_read_timeout: 인증 파일 읽기 타임아웃 (초)
        twitch_client_id: Twitch 클라이언트 ID (필수)
        twitch_client_secret: Twitch 클라이언트 시크릿 (필수, repr에서 제외)
        twitch_downloader_id: 다운로더용 Twitch 클라이언트 ID
        twitch_downloader_thread_count: 다운로드 스레드 수
        bigquery_project_id: BigQuery 프로젝트 ID
        bigquery_dataset_id: BigQuery 데이터셋 ID
        bigquery_service_account_path: BigQuery 서비스 계정 파일 경로
        youtube_client_secret_path: YouTube 클라이언트 시크릿 파일 경로
        youtube_tags: 업로드 시 붙일 태그 (순서 유지)
        youtube_description_template: 영상 설명 템플릿 ('$$video_title$$' 치환)
        youtube_video_length_minutes_soft_cap: 영상 길이 소프트 상한 (분)
        youtube_video_length_minutes_hard_cap: 영상 길이 하드 상한 (분)
        download_folder_path: 다운로드 폴더 경로
    """
    # Auth
    path_auth_code: str
    path_authentications: str
    use_file_auth_response: bool
    use_local_auth_redirect: bool
    auth_file_read_timeout: int

    # Twitch
    twitch_client_id: str
    twitch_client_secret: str = field(repr=False)
    twitch_downloader_id: str
    twitch_downloader_thread_count: int

    # BigQuery
    bigquery_project_id: str
    bigquery_dataset_id: str
    bigquery_service_account_path: str

    # YouTube
    youtube_client_secret_path: str
    youtube_tags: Tuple[str, ...]
    youtube_description_template: str
    youtube_video_length_minutes_soft_cap: int
    youtube_video_length_minutes_hard_cap: int

    # Storage
    download_folder_path: str

    def to_dict(self) -> Dict[str, Any]:
        """로깅용 딕셔너리 변환 (twitch_client_secret은 마스킹)"""
        data = asdict(self)
        data["youtube_tags"] = list(self.youtube_tags)
        data["twitch_client_secret"] = SECRET_MASK
        return data


@dataclass
class ConfigBuilder:
    """
    원시 설정 값

    환경변수 또는 JSON 파일에서 읽은 문자열을 그대로 보관합니다.
    기본값 적용과 타입 변환은 build 단계에서 수행됩니다.
    """
    path_auth_code: Optional[str] = None
    path_authentications: Optional[str] = None
    use_file_auth_response: Optional[str] = None
    use_local_auth_redirect: Optional[str] = None
    auth_file_read_timeout: Optional[str] = None

    twitch_client_id: Optional[str] = None
    twitch_client_secret: Optional[str] = None
    twitch_downloader_id: Optional[str] = None
    twitch_downloader_thread_count: Optional[str] = None

    bigquery_project_id: Optional[str] = None
    bigquery_dataset_id: Optional[str] = None
    bigquery_service_account_path: Optional[str] = None

    youtube_client_secret_path: Optional[str] = None
    youtube_tags: Optional[str] = None
    youtube_description_template: Optional[str] = None
    youtube_video_length_minutes_soft_cap: Optional[str] = None
    youtube_video_length_minutes_hard_cap: Optional[str] = None

    download_folder_path: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> "ConfigBuilder":
        """환경변수 매핑에서 ConfigBuilder 생성 (변수명은 필드명의 대문자)"""
        return cls(**{name: environ.get(env_var_name(name)) for name in FIELD_NAMES})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ConfigBuilder":
        """
        JSON 객체에서 ConfigBuilder 생성

        알 수 없는 키는 무시하고, null은 값이 없는 것으로 취급합니다.

        Raises:
            ValueError: 값이 문자열이 아닌 경우
        """
        values: Dict[str, Optional[str]] = {}
        for name in FIELD_NAMES:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"'{name}' 값은 문자열이어야 합니다 (받은 타입: {type(value).__name__})"
                )
            values[name] = value
        return cls(**values)

    def to_dict(self) -> Dict[str, Optional[str]]:
        """딕셔너리 변환 (JSON 파일 형식과 동일)"""
        return asdict(self)


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in fields(ConfigBuilder))


def env_var_name(field_name: str) -> str:
    """필드명에 대응하는 환경변수 이름 반환 (예: twitch_client_id -> TWITCH_CLIENT_ID)"""
    return field_name.upper()
