"""
Tests for config sources

src/twba_config/infrastructure/config/sources.py 테스트
"""
import json
import pytest
from pathlib import Path

from twba_config.domain.errors import ConfigFileReadError, ConfigParseError, ErrorCode
from twba_config.infrastructure.config.sources import EnvironmentSource, JsonFileSource


@pytest.mark.unit
class TestJsonFileSource:
    """JsonFileSource 테스트"""

    def test_read_success(self, tmp_path: Path, full_raw_values):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(full_raw_values), encoding="utf-8")

        builder = JsonFileSource(path, log=False).read()

        assert builder.to_dict() == full_raw_values

    def test_absent_and_null_values_are_unset(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"twitch_client_id": "id", "youtube_tags": None}))

        builder = JsonFileSource(path, log=False).read()

        assert builder.twitch_client_id == "id"
        assert builder.youtube_tags is None
        assert builder.download_folder_path is None

    def test_unknown_keys_are_ignored(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"twitch_client_id": "id", "unused_key": "x"}))

        builder = JsonFileSource(path, log=False).read()

        assert builder.twitch_client_id == "id"
        assert not hasattr(builder, "unused_key")

    def test_file_not_found(self, tmp_path: Path):
        path = tmp_path / "missing.json"

        with pytest.raises(ConfigFileReadError) as exc_info:
            JsonFileSource(path, log=False).read()

        error = exc_info.value
        assert error.error_code == ErrorCode.CONFIG_FILE_READ_FAILED
        assert error.context["file_path"] == str(path)
        assert isinstance(error.original_error, FileNotFoundError)

    def test_directory_instead_of_file(self, tmp_path: Path):
        with pytest.raises(ConfigFileReadError):
            JsonFileSource(tmp_path, log=False).read()

    def test_invalid_json(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text("{ invalid json }")

        with pytest.raises(ConfigParseError) as exc_info:
            JsonFileSource(path, log=False).read()

        assert exc_info.value.error_code == ErrorCode.CONFIG_PARSE_FAILED
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_top_level_must_be_object(self, tmp_path: Path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(["twitch_client_id"]))

        with pytest.raises(ConfigParseError, match="list"):
            JsonFileSource(path, log=False).read()

    @pytest.mark.parametrize("value", [5, True, ["a", "b"], {"nested": "x"}])
    def test_non_string_value_is_rejected(self, tmp_path: Path, value):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"auth_file_read_timeout": value}))

        with pytest.raises(ConfigParseError, match="auth_file_read_timeout"):
            JsonFileSource(path, log=False).read()

    def test_empty_path_is_reported_as_given(self):
        source = JsonFileSource("", log=False)

        with pytest.raises(ConfigFileReadError) as exc_info:
            source.read()

        assert exc_info.value.context["file_path"] == ""
        assert source.describe() == "file "

    def test_describe(self, tmp_path: Path):
        path = tmp_path / "config.json"

        assert JsonFileSource(path).describe() == f"file {path}"


@pytest.mark.unit
class TestEnvironmentSource:
    """EnvironmentSource 테스트"""

    def test_read_uses_upper_case_names(self):
        source = EnvironmentSource({
            "TWITCH_CLIENT_ID": "id",
            "twitch_client_secret": "lower-case is not read",
        })

        builder = source.read()

        assert builder.twitch_client_id == "id"
        assert builder.twitch_client_secret is None

    def test_defaults_to_process_environment(self, monkeypatch):
        monkeypatch.setenv("BIGQUERY_PROJECT_ID", "from-process")

        assert EnvironmentSource().read().bigquery_project_id == "from-process"

    def test_with_dotenv_merges_values(self, tmp_path: Path):
        dotenv_path = tmp_path / ".env"
        dotenv_path.write_text(
            "TWITCH_CLIENT_ID=dotenv-id\n"
            "TWITCH_CLIENT_SECRET=dotenv-secret\n"
            "YOUTUBE_TAGS=a,b\n"
        )

        source = EnvironmentSource.with_dotenv(dotenv_path, environ={"TWITCH_CLIENT_ID": "env-id"})
        builder = source.read()

        assert builder.twitch_client_id == "env-id"
        assert builder.twitch_client_secret == "dotenv-secret"
        assert builder.youtube_tags == "a,b"

    def test_with_dotenv_missing_file(self, tmp_path: Path):
        source = EnvironmentSource.with_dotenv(tmp_path / ".env", environ={"TWITCH_CLIENT_ID": "id"})

        assert source.read().twitch_client_id == "id"

    def test_describe(self):
        assert EnvironmentSource({}).describe() == "environment variables"
