"""config 모듈 테스트"""
import json
import os
import pytest
from dataclasses import FrozenInstanceError
from unittest.mock import patch

from unicon.config import Config, load_config, get_config, reset_config, _load_config_file


class TestConfig:
    """Config 클래스 및 설정 로딩 테스트"""

    def test_config_defaults(self):
        cfg = Config()
        assert cfg.default_places == 2
        assert cfg.log_level == "WARNING"
        assert cfg.log_format == "text"
        assert cfg.log_file == ""
        assert cfg.log_max_bytes == 1_048_576
        assert cfg.log_backup_count == 3

    def test_config_is_frozen(self):
        cfg = Config()
        with pytest.raises(FrozenInstanceError):
            cfg.default_places = 5

    def test_load_config_defaults_only(self, tmp_path):
        cfg = load_config(str(tmp_path / "nonexistent.json"))
        assert cfg == Config()

    def test_env_var_override(self):
        with patch.dict(os.environ, {"UNICON_DEFAULT_PLACES": "4", "UNICON_LOG_LEVEL": "DEBUG"}):
            cfg = load_config("nonexistent.json")
        assert cfg.default_places == 4
        assert cfg.log_level == "DEBUG"

    def test_file_override(self, tmp_path):
        path = tmp_path / "unicon.json"
        path.write_text(json.dumps({"default_places": 5, "log_format": "json"}))
        cfg = load_config(str(path))
        assert cfg.default_places == 5
        assert cfg.log_format == "json"

    def test_env_beats_file(self, tmp_path):
        path = tmp_path / "unicon.json"
        path.write_text(json.dumps({"default_places": 5}))
        with patch.dict(os.environ, {"UNICON_DEFAULT_PLACES": "1"}):
            cfg = load_config(str(path))
        assert cfg.default_places == 1

    def test_invalid_env_value_ignored(self):
        with patch.dict(os.environ, {"UNICON_DEFAULT_PLACES": "many"}):
            cfg = load_config("nonexistent.json")
        assert cfg.default_places == 2

    def test_values_clamped(self):
        with patch.dict(os.environ, {"UNICON_DEFAULT_PLACES": "99", "UNICON_LOG_BACKUP_COUNT": "-3"}):
            cfg = load_config("nonexistent.json")
        assert cfg.default_places == 15
        assert cfg.log_backup_count == 0

    def test_corrupt_file_returns_empty(self, tmp_path):
        path = tmp_path / "unicon.json"
        path.write_text("{not json")
        assert _load_config_file(str(path)) == {}

    def test_non_dict_file_returns_empty(self, tmp_path):
        path = tmp_path / "unicon.json"
        path.write_text("[1, 2]")
        assert _load_config_file(str(path)) == {}

    def test_get_config_cached(self):
        first = get_config()
        assert get_config() is first
        reset_config()
        assert get_config() is not first

    def test_get_config_reads_working_directory_file(self, tmp_path):
        (tmp_path / "unicon.json").write_text(json.dumps({"default_places": 3}))
        assert get_config().default_places == 3
