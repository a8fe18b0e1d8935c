"""
Tests for config domain models

src/twba_config/domain/models.py 테스트
"""
import dataclasses
import pytest

from twba_config.domain.models import FIELD_NAMES, SECRET_MASK, Config, ConfigBuilder, env_var_name
from twba_config.infrastructure.config.loader import build_config


@pytest.fixture
def config(full_raw_values) -> Config:
    return build_config(ConfigBuilder(**full_raw_values), log=False)


@pytest.mark.unit
class TestConfig:
    """Config 데이터클래스 테스트"""

    def test_is_immutable(self, config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.twitch_client_id = "other"

    def test_repr_hides_secret(self, config):
        text = repr(config)

        assert "client-id" in text
        assert "client-secret" not in text

    def test_to_dict(self, config):
        data = config.to_dict()

        assert data["youtube_tags"] == ["twitch", "vod", "backup"]
        assert data["twitch_client_id"] == "client-id"
        assert data["auth_file_read_timeout"] == 12
        assert set(data) == set(FIELD_NAMES)

    def test_to_dict_masks_secret(self, config):
        data = config.to_dict()

        assert data["twitch_client_secret"] == SECRET_MASK
        assert "client-secret" not in str(data)
        assert config.twitch_client_secret == "client-secret"

    def test_equal_for_same_input(self, full_raw_values):
        first = build_config(ConfigBuilder(**full_raw_values), log=False)
        second = build_config(ConfigBuilder(**full_raw_values), log=False)

        assert first == second
        assert hash(first) == hash(second)


@pytest.mark.unit
class TestConfigBuilder:
    """ConfigBuilder 테스트"""

    def test_field_names(self):
        assert len(FIELD_NAMES) == 18
        assert FIELD_NAMES[0] == "path_auth_code"
        assert FIELD_NAMES[-1] == "download_folder_path"

    def test_defaults_are_unset(self):
        assert all(value is None for value in ConfigBuilder().to_dict().values())

    def test_from_env(self):
        builder = ConfigBuilder.from_env({
            "YOUTUBE_VIDEO_LENGTH_MINUTES_SOFT_CAP": "100",
            "UNRELATED": "x",
        })

        assert builder.youtube_video_length_minutes_soft_cap == "100"
        assert builder.twitch_client_id is None

    def test_from_dict_rejects_non_string(self):
        with pytest.raises(ValueError, match="twitch_downloader_thread_count"):
            ConfigBuilder.from_dict({"twitch_downloader_thread_count": 50})

    def test_round_trip_through_dict(self, full_raw_values):
        builder = ConfigBuilder.from_dict(full_raw_values)

        assert ConfigBuilder.from_dict(builder.to_dict()) == builder

    @pytest.mark.parametrize(
        "field_name,expected",
        [
            ("twitch_client_id", "TWITCH_CLIENT_ID"),
            ("youtube_video_length_minutes_hard_cap", "YOUTUBE_VIDEO_LENGTH_MINUTES_HARD_CAP"),
        ],
    )
    def test_env_var_name(self, field_name, expected):
        assert env_var_name(field_name) == expected
