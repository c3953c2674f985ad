"""
Notebox - Notes Route Handlers
==============================

What:  GET /notes, GET /notes/{name}, PUT /notes/{name}, DELETE /notes/{name}.
How:   Extract the name (and body), delegate to NoteService, return a bare
       status or the requested content.
Who:   REST clients and the generated /docs page.

Response bodies:
    GET /notes         → JSON array of {name, text}
    GET /notes/{name}  → the note's text as text/plain
    PUT, DELETE        → empty body, status only

Names may contain "/" (sent raw or as %2F); the :path converter keeps
them in one path parameter.

Not-found and store errors are raised by the service and turned into
404/500 by the global exception handlers in main.py.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse

from notebox.dependencies import get_note_service
from notebox.schemas.note import ErrorResponse, Note
from notebox.services.note_service import NoteService

router = APIRouter(prefix="/notes", tags=["Notes"])

_NAME_NOT_FOUND = {"description": "No note with this name"}
_STORE_ERROR = {"description": "Store unreadable, malformed or unwritable", "model": ErrorResponse}


@router.get(
    "",
    response_model=List[Note],
    responses={500: _STORE_ERROR},
    summary="List all notes",
    description="Returns every stored note, in insertion order.",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> List[Note]:
    return await service.list_notes()


@router.get(
    "/{name:path}",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "The note's text", "content": {"text/plain": {}}},
        404: _NAME_NOT_FOUND,
        500: _STORE_ERROR,
    },
    summary="Get a note's text",
    description="Returns the text of the note whose name matches exactly.",
)
async def get_note(
    name: str,
    service: NoteService = Depends(get_note_service),
) -> PlainTextResponse:
    note = await service.get_note(name)
    return PlainTextResponse(note.text)


@router.put(
    "/{name:path}",
    status_code=201,
    response_class=Response,
    responses={
        201: {"description": "Note text replaced"},
        404: _NAME_NOT_FOUND,
        500: _STORE_ERROR,
    },
    summary="Replace a note's text",
    description=(
        "Replaces the text of an existing note with the raw request body. "
        "The body is taken as plain text and is never JSON-decoded."
    ),
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"text/plain": {"schema": {"type": "string"}}},
        }
    },
)
async def update_note(
    name: str,
    request: Request,
    service: NoteService = Depends(get_note_service),
) -> Response:
    """
    Update a note from a plain-text body.

    Why read request.body() directly: a `str` body parameter would make
    FastAPI expect JSON, while clients send the note verbatim.
    Undecodable bytes are replaced rather than rejected.
    """
    body = await request.body()
    await service.update_note(name, body.decode("utf-8", errors="replace"))
    return Response(status_code=201)


@router.delete(
    "/{name:path}",
    status_code=200,
    response_class=Response,
    responses={
        200: {"description": "Note removed"},
        404: _NAME_NOT_FOUND,
        500: _STORE_ERROR,
    },
    summary="Delete a note",
)
async def delete_note(
    name: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete_note(name)
    return Response(status_code=200)
