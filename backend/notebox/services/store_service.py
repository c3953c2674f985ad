"""
Notebox - JSON File Store
=========================

What:  Reads and writes the single JSON file that holds every note.
Why:   Centralizes all file system operations on the store so the service
       layer only ever sees a validated List[Note].
How:   Async file I/O (aiofiles) for reads and writes, pydantic validation
       on every read, temp file + atomic rename on every write, and one
       asyncio.Lock that callers hold across a read-modify-write.
Who:   Owned by NoteService; bootstrapped by the application lifespan.

Write discipline:
    1. Serialize the full note list to bytes
    2. Write the bytes to a temp file in the store's directory
    3. os.replace() the temp file over the store

    os.replace is atomic on POSIX and Windows when source and destination
    share a filesystem, which is why the temp file lives next to the store.
    Readers therefore see either the old array or the new one, never a
    truncated file, and a crash mid-write leaves the old content in place.

Locking:
    The lock only serializes writers inside this process. Readers do not
    take it. Several processes sharing one store file are not coordinated.
"""

import asyncio
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, List, Union

import aiofiles
import aiofiles.os
from pydantic import ValidationError

from notebox.exceptions import StoreCorruptedError, StoreError
from notebox.schemas.note import Note, NoteList

logger = logging.getLogger(__name__)

EMPTY_STORE = b"[]"


class NoteStore:
    """
    Whole-file JSON persistence for notes.

    Every read returns the full, ordered list; every write replaces it.
    There is no in-memory cache: the file is the only source of truth.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    async def ensure_exists(self) -> bool:
        """
        Create the store as an empty array if the file is absent.

        What:    Startup bootstrap; awaited before the server accepts requests.
        Returns: True if the file was created, False if it already existed.
        Raises:  StoreError if the file or its parent directory cannot be created.

        An existing file is never validated or rewritten here; a malformed
        store is reported per request instead.
        """
        if await aiofiles.os.path.exists(self.path):
            logger.info("Using existing note store at %s", self.path)
            return False

        try:
            await aiofiles.os.makedirs(self.path.parent, exist_ok=True)
            async with aiofiles.open(self.path, "wb") as f:
                await f.write(EMPTY_STORE)
        except OSError as e:
            logger.error("Failed to initialize note store at %s: %s", self.path, str(e))
            raise StoreError(
                message="The note store could not be initialized",
                context={"path": str(self.path), "os_error": str(e)},
            )

        logger.info("Initialized empty note store at %s", self.path)
        return True

    @asynccontextmanager
    async def locked(self) -> AsyncIterator[None]:
        """Hold the store lock for the duration of a read-modify-write."""
        async with self._lock:
            yield

    async def read(self) -> List[Note]:
        """
        Read and validate the whole store.

        Raises:
            StoreError: the file cannot be opened or read
            StoreCorruptedError: the content is not a JSON array of notes
        """
        try:
            async with aiofiles.open(self.path, "rb") as f:
                raw = await f.read()
        except OSError as e:
            logger.error("Failed to read note store %s: %s", self.path, str(e))
            raise StoreError(context={"path": str(self.path), "os_error": str(e)})

        try:
            return NoteList.validate_json(raw)
        except ValidationError as e:
            logger.error(
                "Note store %s is malformed: %d validation error(s)",
                self.path,
                e.error_count(),
            )
            raise StoreCorruptedError(
                context={"path": str(self.path), "errors": e.errors(include_url=False)},
            )

    async def write(self, notes: List[Note]) -> None:
        """
        Atomically replace the store with `notes`.

        Raises:
            StoreError: the temp file could not be written or renamed.
                        The previous store content is left untouched.
        """
        payload = NoteList.dump_json(notes)
        directory = self.path.parent
        tmp_path = None

        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            os.close(fd)

            async with aiofiles.open(tmp_path, "wb") as f:
                await f.write(payload)
                await f.flush()

            await aiofiles.os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            logger.error("Failed to write note store %s: %s", self.path, str(e))
            raise StoreError(context={"path": str(self.path), "os_error": str(e)})
        finally:
            if tmp_path is not None:
                await self._discard(tmp_path)

        logger.debug("Wrote %d note(s) to %s", len(notes), self.path)

    async def _discard(self, tmp_path: str) -> None:
        # Leftover temp files are harmless; failing to remove one is only logged
        try:
            await aiofiles.os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("Failed to remove temp file %s: %s", tmp_path, str(e))
