"""
config.py — Konfiguracja callsight przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks CALLSIGHT_.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Parser listy wyjść
    suppression_token: str = "~"
    escape_char: str = Field(default="\\", max_length=1)

    # Źródła wywołań
    source_suffixes: list[str] = [".py", ".pyw"]
    # Prefiksy nazw "plików" ramek REPL (nie są raportowane jako ramki)
    interactive_sources: list[str] = [
        "<stdin>", "<python-input-", "<ipython-input-", "<pyshell#",
    ]
    interactive_label: str = "interactive session"
    unknown_label: str = "unknown source"

    model_config = SettingsConfigDict(env_prefix="CALLSIGHT_", env_file=".env", extra="ignore")
