import logging
import os
from pathlib import Path
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

LOCAL_IMAGE_PREFIX = "/images/"


def resolve_fallback_image(
    slug: str, mode: str = "local", palette: Optional[Sequence[str]] = None
) -> str:
    """
    Pick a cover image for a post that doesn't name one.

    "local" maps the slug to /images/<slug>.jpg; "palette" picks a stock URL by
    character checksum. Never touches the filesystem or network.
    """
    if mode == "palette" and palette:
        checksum = sum(ord(ch) for ch in slug)
        return palette[checksum % len(palette)]
    return local_image_path(slug)


def local_image_path(slug: str) -> str:
    return f"{LOCAL_IMAGE_PREFIX}{slug.lower().replace(' ', '-')}.jpg"


def get_image_from_dir(
    images_dir: Path, image_path: str
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Read a cover image from the images directory
    """
    root = os.path.realpath(images_dir)
    full_path = os.path.realpath(os.path.join(root, image_path))
    if not full_path.startswith(root + os.sep):
        logger.warning(f"Rejected image path outside {images_dir}: {image_path}")
        return None, None

    try:
        with open(full_path, "rb") as f:
            image_data = f.read()
    except FileNotFoundError:
        logger.warning(f"Image not found: {image_path}")
        return None, None
    except OSError as e:
        logger.error(f"Error retrieving image {image_path}: {e}")
        return None, None

    if not image_data:
        logger.warning(f"No image data found for: {image_path}")
        return None, None

    return image_data, get_content_type_from_filename(image_path)


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    else:
        return "application/octet-stream"
