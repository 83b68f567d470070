"""
Upload Size Limits

Rejects oversized multipart uploads with 413 before anything is written to
the request workspace.
"""

import logging
from typing import Dict, Mapping

from fastapi import HTTPException, UploadFile, status

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


async def _measure(upload: UploadFile, limit: int) -> int:
    """Size of an upload in bytes, counting at most one chunk past ``limit``."""
    if upload.size is not None:
        return upload.size

    total = 0
    while total <= limit:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        total += len(chunk)
    await upload.seek(0)
    return total


async def enforce_upload_limits(uploads: Mapping[str, UploadFile], max_size: int) -> Dict[str, int]:
    """
    Check every upload of a request against ``max_size``.

    Starlette records the size of spooled multipart files; uploads without a
    recorded size are streamed and rewound.

    Args:
        uploads: Form field name to upload
        max_size: Largest accepted size per upload, in bytes

    Returns:
        Dict[str, int]: Size in bytes of each upload, by field name

    Raises:
        HTTPException: 413 naming the limit in MB when any upload is larger
    """
    sizes = {}
    for field, upload in uploads.items():
        size = await _measure(upload, max_size)
        if size > max_size:
            logger.warning(
                f"Rejected '{field}' upload ({upload.filename}): "
                f"more than {max_size} bytes"
            )
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File size exceeds {max_size // (1024 * 1024)}MB limit",
            )
        sizes[field] = size

    logger.debug(f"Upload sizes within limit: {sizes}")
    return sizes
