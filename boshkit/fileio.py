"""
Filesystem helpers used by commands.

Kept behind a small class so commands can be handed a fake in tests.
"""

from __future__ import annotations

import logging
import os
import tempfile
from typing import Union

logger = logging.getLogger(__name__)


class FileIO:
    """Temp-dir creation and atomic file writes."""

    def temp_dir(self, prefix: str = "boshkit-") -> str:
        """
        Create a fresh temporary directory.

        The directory is not removed; callers export paths inside it
        that must outlive this process.
        """
        path = tempfile.mkdtemp(prefix=prefix)
        logger.debug(f"Created temp dir {path}")
        return path

    def write_file(
        self,
        filename: Union[str, os.PathLike],
        contents: bytes,
        mode: int = 0o600,
    ) -> None:
        """
        Write ``contents`` to ``filename`` atomically.

        Bytes are written to a sibling temporary file which is then
        renamed over ``filename``, so a failure never leaves a partial
        file at the destination.

        Raises:
            OSError: If the file cannot be written
        """
        directory = os.path.dirname(os.path.abspath(filename))
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(contents)
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, filename)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

        logger.debug(f"Wrote {len(contents)} bytes to {filename}")
