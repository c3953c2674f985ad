"""
Notebox - Note Service Unit Tests
=================================

What:  Tests for NoteService business logic against a real temp store.

What we test:
    ✅ Create/get round trip, duplicate names rejected without a write
    ✅ Update and delete only touch the named note and keep order
    ✅ Misses raise NoteNotFoundError and leave the file byte-for-byte unchanged
    ✅ Concurrent mutations are serialized (no lost updates, no duplicates)
"""

import asyncio
import json

import pytest

from notebox.exceptions import NoteAlreadyExistsError, NoteNotFoundError, StoreCorruptedError
from notebox.schemas.note import Note


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_then_get_returns_text(self, note_service):
        await note_service.create_note("groceries", "milk, eggs")

        note = await note_service.get_note("groceries")

        assert note.text == "milk, eggs"

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self, note_service, store_path):
        await note_service.create_note("a", "first")
        before = store_path.read_bytes()

        with pytest.raises(NoteAlreadyExistsError):
            await note_service.create_note("a", "second")

        assert store_path.read_bytes() == before
        assert len(await note_service.list_notes()) == 1

    @pytest.mark.asyncio
    async def test_names_are_case_and_space_sensitive(self, note_service):
        await note_service.create_note("Todo", "1")
        await note_service.create_note("todo", "2")
        await note_service.create_note(" todo", "3")

        assert [n.name for n in await note_service.list_notes()] == ["Todo", "todo", " todo"]

    @pytest.mark.asyncio
    async def test_concurrent_creates_with_same_name(self, note_service):
        results = await asyncio.gather(
            *(note_service.create_note("race", f"attempt {i}") for i in range(5)),
            return_exceptions=True,
        )

        created = [r for r in results if isinstance(r, Note)]
        rejected = [r for r in results if isinstance(r, NoteAlreadyExistsError)]
        assert len(created) == 1
        assert len(rejected) == 4
        assert len(await note_service.list_notes()) == 1

    @pytest.mark.asyncio
    async def test_concurrent_creates_with_distinct_names_all_persist(self, note_service):
        names = [f"note-{i}" for i in range(10)]

        await asyncio.gather(*(note_service.create_note(n, n.upper()) for n in names))

        stored = await note_service.list_notes()
        assert sorted(n.name for n in stored) == names


class TestGet:

    @pytest.mark.asyncio
    async def test_missing_name_raises(self, note_service):
        with pytest.raises(NoteNotFoundError) as exc_info:
            await note_service.get_note("nope")

        assert exc_info.value.name == "nope"

    @pytest.mark.asyncio
    async def test_first_match_wins_on_legacy_duplicates(self, note_service, store_path):
        # Files written by older versions may hold duplicate names
        store_path.write_text(json.dumps([
            {"name": "dup", "text": "first"},
            {"name": "dup", "text": "second"},
        ]))

        assert (await note_service.get_note("dup")).text == "first"


class TestUpdate:

    @pytest.mark.asyncio
    async def test_update_replaces_text_in_place(self, note_service):
        for name in ("a", "b", "c"):
            await note_service.create_note(name, name)

        await note_service.update_note("b", "changed")

        notes = await note_service.list_notes()
        assert [(n.name, n.text) for n in notes] == [("a", "a"), ("b", "changed"), ("c", "c")]

    @pytest.mark.asyncio
    async def test_update_missing_leaves_store_unchanged(self, note_service, store_path):
        await note_service.create_note("a", "x")
        before = store_path.read_bytes()

        with pytest.raises(NoteNotFoundError):
            await note_service.update_note("b", "y")

        assert store_path.read_bytes() == before

    @pytest.mark.asyncio
    async def test_concurrent_updates_to_different_notes_are_not_lost(self, note_service):
        await note_service.create_note("left", "0")
        await note_service.create_note("right", "0")

        await asyncio.gather(
            note_service.update_note("left", "L"),
            note_service.update_note("right", "R"),
        )

        assert (await note_service.get_note("left")).text == "L"
        assert (await note_service.get_note("right")).text == "R"


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_exactly_one(self, note_service):
        for name in ("a", "b", "c"):
            await note_service.create_note(name, name)

        await note_service.delete_note("b")

        notes = await note_service.list_notes()
        assert [n.name for n in notes] == ["a", "c"]
        with pytest.raises(NoteNotFoundError):
            await note_service.get_note("b")

    @pytest.mark.asyncio
    async def test_delete_missing_leaves_file_byte_identical(self, note_service, store_path):
        await note_service.create_note("a", "x")
        before = store_path.read_bytes()

        with pytest.raises(NoteNotFoundError):
            await note_service.delete_note("zzz")

        assert store_path.read_bytes() == before


class TestCorruptedStore:

    @pytest.mark.asyncio
    async def test_every_operation_surfaces_corruption(self, note_service, store_path):
        store_path.write_text("{broken")

        with pytest.raises(StoreCorruptedError):
            await note_service.list_notes()
        with pytest.raises(StoreCorruptedError):
            await note_service.get_note("a")
        with pytest.raises(StoreCorruptedError):
            await note_service.create_note("a", "b")
        with pytest.raises(StoreCorruptedError):
            await note_service.update_note("a", "b")
        with pytest.raises(StoreCorruptedError):
            await note_service.delete_note("a")

        assert store_path.read_text() == "{broken"
