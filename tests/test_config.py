"""Tests for SrtToolsConfig."""

import argparse

import pytest

from srt_tools.config import DEFAULT_OUTPUT_PREFIX, SrtToolsConfig, env_flag


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("SRT_TOOLS_REMOVE_EXTRA_TEXT", raising=False)
    monkeypatch.delenv("SRT_TOOLS_OUTPUT_PREFIX", raising=False)


def make_args(**values):
    defaults = dict(offset_ms=None, renumber_start=None, strip_extra=False)
    defaults.update(values)
    return argparse.Namespace(**defaults)


class TestEnvFlag:

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy(self, monkeypatch, value):
        monkeypatch.setenv("SOME_FLAG", value)
        assert env_flag("SOME_FLAG")

    @pytest.mark.parametrize("value", ["0", "false", "", "nope"])
    def test_falsy(self, monkeypatch, value):
        monkeypatch.setenv("SOME_FLAG", value)
        assert not env_flag("SOME_FLAG")

    def test_missing_uses_default(self, monkeypatch):
        monkeypatch.delenv("SOME_FLAG", raising=False)
        assert env_flag("SOME_FLAG", default=True)


class TestSrtToolsConfig:

    def test_defaults(self):
        config = SrtToolsConfig()
        assert not config.apply_offset
        assert not config.apply_renumber
        assert config.strip_extraneous is False
        assert config.output_prefix == DEFAULT_OUTPUT_PREFIX

    def test_environment_defaults(self, monkeypatch):
        monkeypatch.setenv("SRT_TOOLS_REMOVE_EXTRA_TEXT", "true")
        monkeypatch.setenv("SRT_TOOLS_OUTPUT_PREFIX", "shifted_")
        config = SrtToolsConfig()
        assert config.strip_extraneous is True
        assert config.output_prefix == "shifted_"

    def test_explicit_value_wins_over_environment(self, monkeypatch):
        monkeypatch.setenv("SRT_TOOLS_REMOVE_EXTRA_TEXT", "1")
        assert SrtToolsConfig(strip_extraneous=False).strip_extraneous is False

    def test_from_args(self):
        config = SrtToolsConfig.from_args(make_args(offset_ms=-250, renumber_start=3))
        assert config.apply_offset
        assert config.offset_ms == -250
        assert config.apply_renumber
        assert config.renumber_start == 3
        assert config.strip_extraneous is False

    def test_from_args_strip(self):
        config = SrtToolsConfig.from_args(make_args(strip_extra=True))
        assert config.strip_extraneous is True
        assert not config.apply_offset

    def test_validate_ok(self):
        assert SrtToolsConfig(apply_offset=True, offset_ms=100).validate() is None

    def test_validate_nothing_to_do(self):
        assert "Nothing to do" in SrtToolsConfig().validate()

    def test_validate_renumber_start(self):
        error = SrtToolsConfig(apply_renumber=True, renumber_start=0).validate()
        assert "must be >= 1" in error
