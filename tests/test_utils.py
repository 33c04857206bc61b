from __future__ import annotations

import os

from informdirect.utils.env import load_env_file_if_present, resolve_env_file


class TestLoadEnvFileIfPresent:
    def test_load_existing_env_file(self, clean_env, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text(
            """
# This is a comment
INFORM_DIRECT_API_KEY=key_123
export INFORM_DIRECT_BASE_URL=https://custom.api.com
EMPTY_VALUE=

QUOTED_VALUE="quoted_string"
SINGLE_QUOTED='single_quoted'
NO_EQUALS_LINE
"""
        )
        for key in [
            "INFORM_DIRECT_API_KEY",
            "INFORM_DIRECT_BASE_URL",
            "EMPTY_VALUE",
            "QUOTED_VALUE",
            "SINGLE_QUOTED",
        ]:
            monkeypatch.delenv(key, raising=False)

        result = load_env_file_if_present(env_file)

        assert result == {
            "INFORM_DIRECT_API_KEY": "key_123",
            "INFORM_DIRECT_BASE_URL": "https://custom.api.com",
            "EMPTY_VALUE": "",
            "QUOTED_VALUE": "quoted_string",
            "SINGLE_QUOTED": "single_quoted",
        }
        assert os.environ["INFORM_DIRECT_BASE_URL"] == "https://custom.api.com"
        assert os.environ["QUOTED_VALUE"] == "quoted_string"

    def test_nonexistent_file_returns_empty_dict(self, tmp_path):
        assert load_env_file_if_present(tmp_path / "nonexistent.env") == {}

    def test_existing_variables_not_overridden(self, clean_env, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("INFORM_DIRECT_API_KEY=from_file")
        monkeypatch.setenv("INFORM_DIRECT_API_KEY", "from_env")

        load_env_file_if_present(env_file)

        assert os.environ["INFORM_DIRECT_API_KEY"] == "from_env"

    def test_override(self, clean_env, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("INFORM_DIRECT_API_KEY=from_file")
        monkeypatch.setenv("INFORM_DIRECT_API_KEY", "from_env")

        load_env_file_if_present(env_file, override=True)

        assert os.environ["INFORM_DIRECT_API_KEY"] == "from_file"


class TestResolveEnvFile:
    def test_explicit_path(self, tmp_path):
        assert resolve_env_file(tmp_path / "x.env") == tmp_path / "x.env"

    def test_env_var(self, monkeypatch, tmp_path):
        monkeypatch.setenv("INFORM_DIRECT_ENV_FILE", str(tmp_path / "custom.env"))
        assert resolve_env_file() == tmp_path / "custom.env"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("INFORM_DIRECT_ENV_FILE", raising=False)
        assert str(resolve_env_file()) == ".env"
