"""Pytest configuration and fixtures."""

import sys
import pytest
from pathlib import Path
from typing import Dict

# Add src directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")


@pytest.fixture
def project_root_path() -> Path:
    """Get project root path."""
    return project_root


@pytest.fixture
def base_env() -> Dict[str, str]:
    """필수 자격 증명만 설정된 환경변수 매핑"""
    return {
        "TWITCH_CLIENT_ID": "test-client-id",
        "TWITCH_CLIENT_SECRET": "test-client-secret",
    }


@pytest.fixture
def full_raw_values() -> Dict[str, str]:
    """모든 필드가 기본값과 다른 값으로 채워진 원시 설정 (필드명 키)"""
    return {
        "path_auth_code": "/srv/twba/auth/code.txt",
        "path_authentications": "/srv/twba/auth/{user}.json",
        "use_file_auth_response": "0",
        "use_local_auth_redirect": "1",
        "auth_file_read_timeout": "12",
        "twitch_client_id": "client-id",
        "twitch_client_secret": "client-secret",
        "twitch_downloader_id": "downloader-id",
        "twitch_downloader_thread_count": "8",
        "bigquery_project_id": "project",
        "bigquery_dataset_id": "dataset",
        "bigquery_service_account_path": "/srv/twba/bq.json",
        "youtube_client_secret_path": "/srv/twba/yt.json",
        "youtube_tags": "twitch,vod,backup",
        "youtube_description_template": "VOD: $$video_title$$",
        "youtube_video_length_minutes_soft_cap": "120",
        "youtube_video_length_minutes_hard_cap": "180",
        "download_folder_path": "/srv/twba/videos/",
    }
