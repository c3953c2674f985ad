"""
Notebox - Note Service (Business Logic)
=======================================

What:  The five note operations: list, get, update, create, delete.
Why:   Keeps lookup, uniqueness and ordering rules out of the route handlers,
       so they can be tested without HTTP.
How:   Each call reads the full store; mutations compute a new ordered list
       and write it back while holding the store lock.
Who:   Called by the notes and form route handlers.

Ordering:
    Notes keep insertion order. Updates change text in place and deletions
    drop entries without reordering the survivors.

Error Handling Strategy:
    Store failures propagate as StoreError/StoreCorruptedError (→ 500).
    Name lookups that match nothing raise NoteNotFoundError (→ 404) before
    any write is attempted, so a miss never touches the file.
"""

import logging
from typing import List, Optional

from notebox.exceptions import NoteAlreadyExistsError, NoteNotFoundError
from notebox.schemas.note import Note
from notebox.services.store_service import NoteStore

logger = logging.getLogger(__name__)


def _find(notes: List[Note], name: str) -> Optional[Note]:
    """First note whose name equals `name` exactly, or None."""
    for note in notes:
        if note.name == name:
            return note
    return None


class NoteService:
    """
    Note operations on top of a NoteStore.

    Responsibilities:
        - list_notes():   Full store in insertion order
        - get_note():     Single note by exact name
        - update_note():  Replace a note's text
        - create_note():  Append a note with a new name
        - delete_note():  Remove every note with the given name
    """

    def __init__(self, store: NoteStore):
        self.store = store

    async def list_notes(self) -> List[Note]:
        return await self.store.read()

    async def get_note(self, name: str) -> Note:
        """
        Raises:
            NoteNotFoundError: no note has this name (→ 404)
        """
        note = _find(await self.store.read(), name)
        if note is None:
            raise NoteNotFoundError(name)
        return note

    async def update_note(self, name: str, text: str) -> Note:
        """
        Replace the text of the note called `name`.

        The store is rewritten only when the note exists; the caller gets
        exactly one outcome, either the updated note or NoteNotFoundError.
        """
        async with self.store.locked():
            notes = await self.store.read()
            note = _find(notes, name)
            if note is None:
                raise NoteNotFoundError(name)

            note.text = text
            await self.store.write(notes)

        logger.info("Updated note %r (%d chars)", name, len(text))
        return note

    async def create_note(self, name: str, text: str) -> Note:
        """
        Append a new note.

        The existence check and the append run under one lock acquisition,
        so two concurrent creates with the same name cannot both succeed.

        Raises:
            NoteAlreadyExistsError: a note with this name exists (→ 400)
        """
        async with self.store.locked():
            notes = await self.store.read()
            if _find(notes, name) is not None:
                raise NoteAlreadyExistsError(name)

            note = Note(name=name, text=text)
            notes.append(note)
            await self.store.write(notes)

        logger.info("Created note %r (%d notes stored)", name, len(notes))
        return note

    async def delete_note(self, name: str) -> None:
        """
        Remove every note called `name`.

        If nothing matched, NoteNotFoundError is raised and no write happens,
        leaving the store file byte-for-byte unchanged.
        """
        async with self.store.locked():
            notes = await self.store.read()
            remaining = [note for note in notes if note.name != name]
            if len(remaining) == len(notes):
                raise NoteNotFoundError(name)

            await self.store.write(remaining)

        logger.info("Deleted note %r (%d notes remain)", name, len(remaining))
