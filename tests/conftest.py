from pathlib import Path

import pytest

from httpbridge._config import Config
from httpbridge._services import HttpService


@pytest.fixture
def base_url() -> str:
    return "http://example.test"


@pytest.fixture
def settings(tmp_path: Path) -> Config:
    """Config whose well-known directories live under the test's tmp_path."""
    documents = tmp_path / "Documents"
    documents.mkdir()
    return Config(
        timeout=5.0,
        documents_dir=documents,
        data_dir=tmp_path / "data",
        cache_dir=tmp_path / "cache",
        external_dir=tmp_path / "external",
    )


@pytest.fixture
def service(settings: Config) -> HttpService:
    return HttpService(config=settings)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "HTTPBRIDGE_TIMEOUT",
        "HTTPBRIDGE_DOCUMENTS_DIR",
        "HTTPBRIDGE_DATA_DIR",
        "HTTPBRIDGE_CACHE_DIR",
        "HTTPBRIDGE_EXTERNAL_DIR",
        "HTTPBRIDGE_DISABLE_SSL_VERIFY",
    ):
        monkeypatch.delenv(name, raising=False)
