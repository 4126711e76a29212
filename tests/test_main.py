from fastapi.testclient import TestClient

import mdblog.main as main_module
from mdblog import dependencies as deps
from mdblog.main import app
from mdblog.schemas.blog import PaginatedPosts, Post
from tests.conftest import FakePostsService


class TrackingService(FakePostsService):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.listed = 0
        self.invalidated = 0

    async def list_all(self):
        self.listed += 1
        return await super().list_all()

    def invalidate(self):
        self.invalidated += 1


def test_root_endpoint_runs_lifespan(monkeypatch):
    service = TrackingService()
    monkeypatch.setattr(main_module, "default_posts_service", lambda: service)

    with TestClient(app) as client:
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "mdblog API is running"}

    assert service.listed == 1
    assert service.invalidated == 1


def test_posts_routes_are_mounted(monkeypatch):
    post = Post(
        slug="hello",
        title="Hello World",
        date="2024-01-01",
        excerpt="hi",
        content="# Hello",
        imageUrl="/images/hello.jpg",
    )
    service = TrackingService(
        paginate_return=PaginatedPosts(posts=[post], totalPages=1, currentPage=1)
    )
    monkeypatch.setattr(main_module, "default_posts_service", lambda: service)

    original_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[deps.get_posts_service] = lambda: service
    try:
        with TestClient(app) as client:
            res = client.get("/api/posts")
            assert res.status_code == 200
            assert res.json() == {
                "posts": [post.model_dump()],
                "totalPages": 1,
                "currentPage": 1,
            }

            res = client.get("/api/posts/hello")
            assert res.status_code == 404
    finally:
        app.dependency_overrides = original_overrides
