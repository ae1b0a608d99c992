"""Unit tests for application settings configuration."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from learnplay.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("OLLAMA_URL", "http://gpu-box:11434")
    monkeypatch.setenv("OLLAMA_MODEL", "llama3.2:1b")
    monkeypatch.setenv("CHUNK_SIZE", "400")

    settings = Settings()

    assert settings.ollama_url == "http://gpu-box:11434"
    assert settings.ollama_model == "llama3.2:1b"
    assert settings.chunk_size == 400


def test_settings_defaults(monkeypatch):
    for name in ("OLLAMA_URL", "OLLAMA_MODEL", "EMBEDDING_MODEL", "PORT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.ollama_url == "http://127.0.0.1:11434"
    assert settings.ollama_model == "qwen2.5:3b"
    assert settings.embedding_model == "nomic-embed-text"
    assert settings.port == 5179


@pytest.mark.parametrize(
    ("chunk_size", "chunk_overlap"),
    [(0, 0), (-5, 0), (100, 100), (100, 250), (100, -1)],
)
def test_settings_reject_chunk_windows_that_cannot_advance(chunk_size, chunk_overlap):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, chunk_size=chunk_size, chunk_overlap=chunk_overlap)


def test_settings_accept_overlap_just_below_chunk_size():
    settings = Settings(_env_file=None, chunk_size=100, chunk_overlap=99)
    assert settings.chunk_overlap == 99
