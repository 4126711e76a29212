from pathlib import Path

from mdblog.settings import DEFAULT_IMAGE_PALETTE, Settings, choose_env_file


def test_defaults():
    s = Settings(_env_file=None)

    assert s.CONTENT_DIR == "content"
    assert s.IMAGE_FALLBACK_MODE == "local"
    assert s.IMAGE_PALETTE == DEFAULT_IMAGE_PALETTE
    assert s.READ_TIMEOUT_SECONDS is None
    assert s.STRICT_VALIDATION is False


def test_paths_follow_configured_dirs():
    s = Settings(CONTENT_DIR="posts", IMAGES_DIR="static/img")

    assert s.content_path == Path("posts")
    assert s.images_path == Path("static/img")


def test_reads_values_from_environment(monkeypatch):
    monkeypatch.setenv("CONTENT_DIR", "/srv/content")
    monkeypatch.setenv("READ_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("STRICT_VALIDATION", "true")
    monkeypatch.setenv("IMAGE_PALETTE", '["https://a", "https://b"]')

    s = Settings()

    assert s.CONTENT_DIR == "/srv/content"
    assert s.READ_TIMEOUT_SECONDS == 2.5
    assert s.STRICT_VALIDATION is True
    assert s.IMAGE_PALETTE == ["https://a", "https://b"]


def test_choose_env_file_prefers_env_local(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: str(self) == ".env.local")
    assert choose_env_file() == ".env.local"


def test_choose_env_file_falls_back(monkeypatch):
    monkeypatch.setattr(Path, "exists", lambda self: False)
    assert choose_env_file() == ".env"
