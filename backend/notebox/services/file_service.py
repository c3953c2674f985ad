"""
Notebox - Static File Service
=============================

What:  Reads the static HTML upload form from disk.
Why:   Keeps file system access (and its error translation) out of the
       route handler.
How:   Async read with aiofiles; OS errors become FileStorageError (→ 500).
Who:   Called by GET /UploadForm.html.

The form is read on every request, not cached, so edits to the file show
up without a restart.
"""

import logging
from pathlib import Path
from typing import Union

import aiofiles

from notebox.exceptions import FileStorageError

logger = logging.getLogger(__name__)


class FileService:
    """Serves the upload form file configured in Settings.upload_form."""

    def __init__(self, upload_form: Union[str, Path]):
        self.upload_form = Path(upload_form)

    async def read_upload_form(self) -> bytes:
        """
        Return the form file's bytes verbatim.

        Raises:
            FileStorageError if the file is missing or unreadable
        """
        try:
            async with aiofiles.open(self.upload_form, "rb") as f:
                return await f.read()
        except OSError as e:
            logger.error("Failed to read upload form %s: %s", self.upload_form, str(e))
            raise FileStorageError(
                message="The upload form could not be loaded",
                context={"path": str(self.upload_form), "os_error": str(e)},
            )
