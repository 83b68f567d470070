"""
Request Workspace Service

Gives each certificate request its own scratch directory for uploads,
generated certificates and the archive, and removes it afterwards.
"""

import logging
import shutil
import uuid
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)

ARCHIVE_NAME = "certificates.zip"


class CertificateWorkspace:
    """
    Per-request storage area.

    Layout: {base_path}/{request_id}/
        uploads/           uploaded template and participants files
        certificates/      generated PNG files
        certificates.zip   archive sent to the client
    """

    def __init__(self, base_path: str, request_id: str):
        """
        Initialize workspace paths (nothing is created on disk).

        Args:
            base_path: Root directory shared by all workspaces
            request_id: Unique request identifier (UUID v4)
        """
        self.request_id = request_id
        self.root = Path(base_path) / request_id
        self.uploads_dir = self.root / "uploads"
        self.certificates_dir = self.root / "certificates"
        self.archive_path = self.root / ARCHIVE_NAME

    @classmethod
    def create(cls, base_path: str) -> "CertificateWorkspace":
        """
        Create a fresh workspace with a new request ID.

        Raises:
            OSError: If the directories cannot be created
        """
        workspace = cls(base_path, str(uuid.uuid4()))
        workspace.uploads_dir.mkdir(parents=True, exist_ok=True)
        workspace.certificates_dir.mkdir(parents=True, exist_ok=True)
        logger.info(f"Created workspace {workspace.root}")
        return workspace

    async def save_upload(self, file: UploadFile, name: str) -> Path:
        """
        Save an uploaded file into the uploads directory.

        Sets file permissions to 644 (read for all, write for owner).

        Args:
            file: FastAPI UploadFile object
            name: File name to store it under

        Returns:
            Path: Full path to saved file

        Raises:
            OSError: If the file cannot be written
        """
        file_path = self.uploads_dir / name

        try:
            content = await file.read()

            with open(file_path, "wb") as f:
                f.write(content)

            file_path.chmod(0o644)

            logger.info(f"Saved upload '{file.filename}' for request {self.request_id} to {file_path}")
            return file_path

        except Exception as e:
            logger.error(f"Failed to save upload for request {self.request_id}: {str(e)}")
            raise OSError(f"Failed to save uploaded file: {str(e)}")

    def cleanup(self) -> bool:
        """
        Remove the whole workspace. Never raises.

        Returns:
            bool: True if nothing is left on disk
        """
        if not self.root.exists():
            return True

        try:
            shutil.rmtree(self.root)
            logger.info(f"Removed workspace {self.root}")
            return True
        except OSError as e:
            logger.error(f"Error during cleanup of workspace {self.root}: {e}")
            return False
