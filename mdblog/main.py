import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mdblog.dependencies import default_posts_service
from mdblog.routers import images, posts
from mdblog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="mdblog API", description="Markdown blog content service")


@asynccontextmanager
async def lifespan(app: FastAPI):
    service = default_posts_service()
    warmed = await service.list_all()
    logger.info(f"Post cache warmed with {len(warmed)} posts from {settings.CONTENT_DIR}")

    try:
        yield
    finally:
        service.invalidate()
        logger.info("mdblog API shut down")


app.router.lifespan_context = lifespan

app.include_router(images.router)
app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "mdblog API is running"}
