import pytest
from pydantic import ValidationError

from challonge.core.config import Settings
from challonge.core.errors import DecodeError
from challonge.json_utils import parse_payload, read_json_file


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CHALLONGE_LOG_DECODE_FAILURES", raising=False)
        monkeypatch.delenv("CHALLONGE_DROPPED_RECORD_LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_DECODE_FAILURES is True
        assert s.DROPPED_RECORD_LOG_LEVEL == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CHALLONGE_LOG_DECODE_FAILURES", "false")
        monkeypatch.setenv("CHALLONGE_DROPPED_RECORD_LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.LOG_DECODE_FAILURES is False
        assert s.DROPPED_RECORD_LOG_LEVEL == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(DROPPED_RECORD_LOG_LEVEL="loud")


class TestJsonUtils:

    def test_parse_payload(self):
        assert parse_payload('[{"tournament": {"id": 1}}]') == [{"tournament": {"id": 1}}]

    def test_invalid_json(self):
        with pytest.raises(DecodeError) as exc_info:
            parse_payload("{not json")
        assert exc_info.value.reason == "Invalid JSON"

    def test_read_json_file(self, tmp_path):
        path = tmp_path / "index.json"
        path.write_text("[]")
        assert read_json_file(str(path)) == []


class TestSettingsEnvFile:

    def test_unrelated_prefixed_keys_are_ignored(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CHALLONGE_LOG_DECODE_FAILURES", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CHALLONGE_API_KEY=secret\nCHALLONGE_FOO=bar\nCHALLONGE_LOG_DECODE_FAILURES=false\n")
        s = Settings(_env_file=str(env_file))
        assert s.LOG_DECODE_FAILURES is False
        assert not hasattr(s, "API_KEY")
