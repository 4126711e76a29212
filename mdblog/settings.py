from pathlib import Path
from typing import List, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


DEFAULT_IMAGE_PALETTE = [
    "https://images.unsplash.com/photo-1461749280684-dccba630e2f6?w=800&h=400&fit=crop",
    "https://images.unsplash.com/photo-1507238691740-187a5b1d37b8?w=800&h=400&fit=crop",
    "https://images.unsplash.com/photo-1516116216624-53e697fedbea?w=800&h=400&fit=crop",
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content"
    IMAGES_DIR: str = "public/images"

    # Cover images
    IMAGE_FALLBACK_MODE: Literal["local", "palette"] = "local"
    IMAGE_PALETTE: List[str] = DEFAULT_IMAGE_PALETTE

    # Reads
    READ_TIMEOUT_SECONDS: Optional[float] = None
    STRICT_VALIDATION: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def images_path(self) -> Path:
        return Path(self.IMAGES_DIR)


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
