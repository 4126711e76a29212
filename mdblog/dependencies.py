from typing import Dict, Hashable

from fastapi import Depends

from mdblog.repos.posts_repo import FilePostsRepo
from mdblog.services.posts_service import PostsService
from mdblog.settings import Settings, settings

# One service per content source so its cache outlives individual requests
_posts_services: Dict[Hashable, PostsService] = {}


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilePostsRepo(current_settings.content_path)


def make_posts_service(repo, current_settings: Settings) -> PostsService:
    return PostsService(
        repo=repo,
        image_mode=current_settings.IMAGE_FALLBACK_MODE,
        image_palette=current_settings.IMAGE_PALETTE,
        read_timeout=current_settings.READ_TIMEOUT_SECONDS,
        strict=current_settings.STRICT_VALIDATION,
    )


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
) -> PostsService:
    key = (
        getattr(repo, "content_dir", id(repo)),
        current_settings.IMAGE_FALLBACK_MODE,
        tuple(current_settings.IMAGE_PALETTE),
        current_settings.READ_TIMEOUT_SECONDS,
        current_settings.STRICT_VALIDATION,
    )
    service = _posts_services.get(key)
    if service is None:
        service = _posts_services[key] = make_posts_service(repo, current_settings)
    return service


def default_posts_service() -> PostsService:
    current_settings = get_settings()
    return get_posts_service(get_posts_repo(current_settings), current_settings)
