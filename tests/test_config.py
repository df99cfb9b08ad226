"""Tests for EnrichmentConfig."""

from __future__ import annotations

import pytest

from vcscout.core.config import DEFAULT_USER_AGENT, EnrichmentConfig


class TestDefaults:
    def test_defaults(self):
        config = EnrichmentConfig()
        assert config.openai_api_key is None
        assert config.has_openai_key is False
        assert config.model == "gpt-4o-mini"
        assert config.temperature == 0.7
        assert config.max_tokens == 1000
        assert config.fetch_timeout == 10.0
        assert config.llm_timeout == 30.0
        assert config.text_limit == 5000
        assert config.summary_chars == 200
        assert config.max_keywords == 10
        assert config.user_agent == DEFAULT_USER_AGENT

    def test_blank_key_counts_as_absent(self):
        assert EnrichmentConfig(openai_api_key="   ").has_openai_key is False

    def test_key_present(self):
        assert EnrichmentConfig(openai_api_key="sk-test").has_openai_key is True


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"temperature": 2.5}, "temperature"),
            ({"max_tokens": 0}, "max_tokens"),
            ({"fetch_timeout": 0}, "fetch_timeout"),
            ({"llm_timeout": -1}, "llm_timeout"),
            ({"text_limit": 0}, "text_limit"),
            ({"summary_chars": 0}, "summary_chars"),
            ({"max_keywords": 0}, "max_keywords"),
            ({"log_format": "xml"}, "log_format"),
        ],
    )
    def test_invalid_values(self, kwargs, match):
        with pytest.raises(ValueError, match=match):
            EnrichmentConfig(**kwargs)


class TestFromEnv:
    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_BASE_URL", "http://localhost:11434/v1")
        monkeypatch.setenv("VCSCOUT_MODEL", "gpt-4.1-mini")
        monkeypatch.setenv("VCSCOUT_FETCH_TIMEOUT", "5")
        monkeypatch.setenv("VCSCOUT_LLM_TIMEOUT", "15")
        monkeypatch.setenv("VCSCOUT_LOG_LEVEL", "DEBUG")

        config = EnrichmentConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.openai_api_key == "sk-env"
        assert config.openai_base_url == "http://localhost:11434/v1"
        assert config.model == "gpt-4.1-mini"
        assert config.fetch_timeout == 5.0
        assert config.llm_timeout == 15.0
        assert config.log_level == "DEBUG"

    def test_missing_key_disables_backend(self, monkeypatch, tmp_path):
        monkeypatch.setenv("OPENAI_API_KEY", "")
        config = EnrichmentConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))
        assert config.has_openai_key is False

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        # setenv + delenv so monkeypatch removes whatever load_dotenv sets
        monkeypatch.setenv("VCSCOUT_MODEL", "placeholder")
        monkeypatch.delenv("VCSCOUT_MODEL")
        env_file = tmp_path / ".env"
        env_file.write_text("VCSCOUT_MODEL=gpt-from-file\n")

        config = EnrichmentConfig.from_env(dotenv_path=str(env_file))
        assert config.model == "gpt-from-file"

    def test_overrides_win(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VCSCOUT_MODEL", "gpt-env")
        config = EnrichmentConfig.from_env(
            dotenv_path=str(tmp_path / "missing.env"), model="gpt-override"
        )
        assert config.model == "gpt-override"


class TestPresets:
    def test_development(self):
        config = EnrichmentConfig.for_development()
        assert config.log_level == "DEBUG"
        assert config.fetch_timeout > EnrichmentConfig().fetch_timeout

    def test_production(self):
        config = EnrichmentConfig.for_production(openai_api_key="sk-prod")
        assert config.log_format == "json"
        assert config.has_openai_key is True
