"""
Certificate generation endpoint.

Provides POST /generate-certificates: template image + participants list in,
ZIP of personalised PNG certificates out.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from starlette.background import BackgroundTask

from app.config import settings
from app.middleware.upload_size_validator import enforce_upload_limits
from app.models import CertificateOptions, ErrorResponse
from app.services.workspace import ARCHIVE_NAME, CertificateWorkspace
from certificate_engine import (
    CertificateGenerator,
    InvalidParticipantError,
    InvalidStyleError,
    build_archive,
    decode_participants,
    load_font_registry,
    load_template,
)

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_FILES_MESSAGE = "Please upload both the template and participants files."
MISSING_TEMPLATE_MESSAGE = "Template file does not exist."
MISSING_PARTICIPANTS_MESSAGE = "Participants file does not exist."
EMPTY_PARTICIPANTS_MESSAGE = "The participants list is empty."
GENERATION_FAILED_MESSAGE = "An error occurred while generating certificates."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


def _default_options() -> CertificateOptions:
    return CertificateOptions(
        font_family=settings.DEFAULT_FONT_FAMILY,
        font_size=settings.DEFAULT_FONT_SIZE,
        font_color=settings.DEFAULT_FONT_COLOR,
    )


@router.post(
    "/generate-certificates",
    summary="Generate Certificates",
    description="""
Render every participant name onto the template and download the results.

**Form fields:**
- `template`: certificate template image (PNG, JPEG, ...)
- `participants`: plain text file, one name per line (blank lines ignored)
- `fontFamily`, `fontSize`, `fontColor`: optional text style
- `xPosition`, `yPosition`: optional left/baseline position in pixels;
  `xPosition=center` centers the name horizontally

**Response:** `certificates.zip` with one `<Name>.png` per distinct name.
Names are trimmed and each word capitalised; names that end up identical
share a single file.
""",
    response_class=FileResponse,
    responses={
        200: {"description": "ZIP archive of certificates", "content": {"application/zip": {}}},
        400: {"description": "Missing files, empty list or invalid style", "model": ErrorResponse},
        413: {"description": "Upload too large"},
        500: {"description": "Generation failed", "content": {"text/plain": {}}},
    },
)
async def generate_certificates(
    template: Optional[UploadFile] = File(None),
    participants: Optional[UploadFile] = File(None),
    fontFamily: Optional[str] = Form(None),
    fontSize: Optional[str] = Form(None),
    fontColor: Optional[str] = Form(None),
    xPosition: Optional[str] = Form(None),
    yPosition: Optional[str] = Form(None),
):
    """
    Generate one certificate per participant and return them as a ZIP.

    Every file the request creates lives in its own workspace, which is
    removed once the response has been sent or as soon as the request fails.
    """
    if template is None or participants is None:
        logger.warning("Certificate request rejected: missing template or participants upload")
        return _error(400, MISSING_FILES_MESSAGE)

    await enforce_upload_limits(
        {"template": template, "participants": participants}, settings.MAX_UPLOAD_SIZE
    )

    options = CertificateOptions.from_form(
        _default_options(),
        font_family=fontFamily,
        font_size=fontSize,
        font_color=fontColor,
        x_position=xPosition,
        y_position=yPosition,
    )

    try:
        workspace = CertificateWorkspace.create(settings.STORAGE_PATH)
    except OSError as e:
        logger.error(f"Failed to create workspace under {settings.STORAGE_PATH}: {e}")
        return PlainTextResponse(GENERATION_FAILED_MESSAGE, status_code=500)

    delivered = False
    try:
        template_path = await workspace.save_upload(template, "template")
        participants_path = await workspace.save_upload(participants, "participants.txt")

        if not template_path.exists():
            return _error(400, MISSING_TEMPLATE_MESSAGE)
        if not participants_path.exists():
            return _error(400, MISSING_PARTICIPANTS_MESSAGE)

        names = decode_participants(participants_path.read_bytes())
        if not names:
            logger.warning(f"Request {workspace.request_id}: participants list is empty")
            return _error(400, EMPTY_PARTICIPANTS_MESSAGE)

        fonts = load_font_registry(settings.FONTS_DIR)
        template_image = load_template(template_path)
        generator = CertificateGenerator(template_image, options.to_text_style(), fonts)

        logger.info(
            f"Request {workspace.request_id}: generating {len(names)} certificate(s) "
            f"with {options.font_size}px '{options.font_family}' in {options.font_color}"
        )

        # Drawing is CPU-bound; keep the event loop free while it runs
        loop = asyncio.get_event_loop()
        await loop.run_in_executor(None, generator.generate, names, workspace.certificates_dir)
        await loop.run_in_executor(
            None, build_archive, workspace.certificates_dir, workspace.archive_path
        )

        response = FileResponse(
            path=str(workspace.archive_path),
            media_type="application/zip",
            filename=ARCHIVE_NAME,
            background=BackgroundTask(workspace.cleanup),
        )
        delivered = True
        return response

    except (InvalidStyleError, InvalidParticipantError) as e:
        logger.warning(f"Request {workspace.request_id} rejected: {e}")
        return _error(400, str(e))

    except Exception:
        logger.exception(f"Error generating certificates for request {workspace.request_id}")
        return PlainTextResponse(GENERATION_FAILED_MESSAGE, status_code=500)

    finally:
        if not delivered:
            workspace.cleanup()
