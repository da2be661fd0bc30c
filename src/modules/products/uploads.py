"""Turning an uploaded file into a ``ProductImage``.

The service only needs three things from an upload: its declared name,
its declared content type and a way to read its bytes.  Django's
``UploadedFile`` satisfies ``Upload`` as-is; tests pass simple fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol

import structlog

from modules.products.exceptions import InvalidFileException
from modules.products.models import FILE_NAME_MAX_LENGTH, ProductImage

logger = structlog.get_logger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class Upload(Protocol):
    name: Optional[str]
    content_type: Optional[str]

    def read(self) -> bytes: ...


def _is_unsafe_name(name: Optional[str]) -> bool:
    if not name or len(name) > FILE_NAME_MAX_LENGTH:
        return True
    if ".." in name:
        return True
    return "/" in name or "\\" in name or "\x00" in name


def read_image(upload: Optional[Upload]) -> Optional[ProductImage]:
    """Validate ``upload`` and read it into a ``ProductImage``.

    Returns ``None`` when no upload was supplied.

    Raises:
        InvalidFileException: the declared name is unsafe (empty, too long,
            contains ``..`` or a path separator) or reading the bytes failed.
    """
    if upload is None:
        return None

    file_name = upload.name
    if _is_unsafe_name(file_name):
        logger.warning("product.upload_rejected", reason="unsafe_name", file_name=file_name)
        raise InvalidFileException(f"File name '{file_name}' is not allowed.")

    try:
        data = upload.read()
    except OSError as exc:
        logger.warning("product.upload_rejected", reason="read_failed", file_name=file_name)
        raise InvalidFileException(f"Could not read file '{file_name}'.") from exc

    return ProductImage(
        file_name=file_name,
        content_type=upload.content_type or DEFAULT_CONTENT_TYPE,
        data=bytes(data),
    )
