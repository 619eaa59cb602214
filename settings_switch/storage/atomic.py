"""Atomic file replacement.

The payload is written to a temporary file in the target's directory, flushed
to disk, then renamed over the target. Readers see either the previous content
or the new content, never a partial file.
"""

import contextlib
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..errors import FilesystemError


class AtomicFileWriter:
    """Durable whole-file writer used by every mutating operation."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def write(self, file_path: Path, content: bytes) -> None:
        """Replace ``file_path`` with ``content``.

        Args:
            file_path: Target file path
            content: Complete new file content

        Raises:
            FilesystemError: If the directory, temporary file or rename fails
        """
        file_path = Path(file_path)
        temp_path: Optional[Path] = None

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)

            # Same directory as the target so the rename never crosses volumes
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=file_path.parent,
                prefix=f".{file_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                temp_path = Path(temp_file.name)
                temp_file.write(content)
                temp_file.flush()
                os.fsync(temp_file.fileno())

            os.replace(temp_path, file_path)
            self.logger.debug(f"Atomic write completed: {file_path}")

        except OSError as e:
            if temp_path is not None and temp_path.exists():
                with contextlib.suppress(OSError):
                    temp_path.unlink()

            raise FilesystemError(f"Atomic write failed for {file_path}: {e}") from e
