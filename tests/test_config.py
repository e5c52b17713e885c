import pytest
from pydantic import ValidationError

from config import Settings
from suppression import build_call_site_resolver


def test_settings_defaults():
    settings = Settings(_env_file=None)

    assert settings.suppression_token == "~"
    assert settings.escape_char == "\\"
    assert ".py" in settings.source_suffixes
    assert settings.interactive_label == "interactive session"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CALLSIGHT_SUPPRESSION_TOKEN", "_")
    monkeypatch.setenv("CALLSIGHT_SOURCE_SUFFIXES", '[".py", ".pyx"]')

    settings = Settings(_env_file=None)

    assert settings.suppression_token == "_"
    assert settings.source_suffixes == [".py", ".pyx"]


def test_build_call_site_resolver_prefers_explicit_token(monkeypatch):
    monkeypatch.setenv("CALLSIGHT_SUPPRESSION_TOKEN", "~")

    resolver = build_call_site_resolver(Settings(_env_file=None), suppression_token="_")

    result = resolver._extractor.extract("[a, _] = f()", "f")
    assert result.is_tilde == [False, True]


def test_settings_reject_multi_character_escape(monkeypatch):
    monkeypatch.setenv("CALLSIGHT_ESCAPE_CHAR", "\\#")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
