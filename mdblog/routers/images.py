import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from mdblog import dependencies as deps
from mdblog.services.image_service import get_image_from_dir
from mdblog.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/images/{image_path:path}")
async def get_image(
    image_path: str, current_settings: Settings = Depends(deps.get_settings)
):
    """
    Serve cover images from the images directory
    """
    image_data, content_type = get_image_from_dir(
        current_settings.images_path, image_path
    )

    if not image_data or not content_type:
        raise HTTPException(status_code=404, detail="Image not found")

    headers = {
        "Content-Length": str(len(image_data)),
        "Accept-Ranges": "bytes",
    }

    return Response(content=image_data, media_type=content_type, headers=headers)
