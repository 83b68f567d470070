"""Packs generated certificates into a single ZIP archive."""

import logging
import zipfile
from pathlib import Path

from .exceptions import ArchiveError

logger = logging.getLogger(__name__)


def build_archive(source_dir: str | Path, archive_path: str | Path) -> list[str]:
    """
    Zip every file in ``source_dir`` as a top-level entry.

    Subdirectories are skipped. An existing archive at ``archive_path`` is
    replaced.

    Args:
        source_dir: Directory holding the generated certificates
        archive_path: Where to write the archive

    Returns:
        list[str]: Archive entry names, sorted

    Raises:
        ArchiveError: If the directory cannot be read or the archive written
    """
    source = Path(source_dir)
    target = Path(archive_path)

    try:
        files = sorted(p for p in source.iterdir() if p.is_file())

        with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for file_path in files:
                archive.write(file_path, arcname=file_path.name)

    except OSError as e:
        logger.error(f"Failed to build archive {target} from {source}: {e}")
        raise ArchiveError(f"Failed to build archive: {e}") from e

    logger.info(f"Built archive {target} with {len(files)} entries")
    return [file_path.name for file_path in files]
