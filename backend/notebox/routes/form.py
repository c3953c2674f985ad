"""
Notebox - Form Route Handlers
=============================

What:  POST /write (create a note from form fields) and GET /UploadForm.html
       (the static page that submits to it).
Who:   Browsers using the upload form, and scripted clients posting forms.

Request Flow (POST /write):
    1. Client sends multipart/form-data or application/x-www-form-urlencoded
       with fields note_name and note
    2. FastAPI parses the form (python-multipart)
    3. NoteService.create_note() checks the name and appends
    4. 201 Created, empty body; 400 if the name is taken

An empty or missing note_name is rejected with 422 by form validation, so
every stored name is non-empty.
"""

from fastapi import APIRouter, Depends, Form, Response
from fastapi.responses import HTMLResponse

from notebox.dependencies import get_file_service, get_note_service
from notebox.schemas.note import ErrorResponse
from notebox.services.file_service import FileService
from notebox.services.note_service import NoteService

router = APIRouter(tags=["Form"])


@router.post(
    "/write",
    status_code=201,
    response_class=Response,
    responses={
        201: {"description": "Note created"},
        400: {"description": "A note with this name already exists"},
        500: {"description": "Store unreadable, malformed or unwritable", "model": ErrorResponse},
    },
    summary="Create a note from form fields",
    description=(
        "Creates a note named `note_name` with text `note`. Accepts multipart "
        "or URL-encoded forms, as submitted by /UploadForm.html."
    ),
)
async def write_note(
    note_name: str = Form(..., description="Name of the new note"),
    note: str = Form("", description="Text of the new note"),
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.create_note(note_name, note)
    return Response(status_code=201)


@router.get(
    "/UploadForm.html",
    response_class=HTMLResponse,
    responses={
        200: {"description": "The upload form", "content": {"text/html": {}}},
        500: {"description": "Form file unreadable", "model": ErrorResponse},
    },
    summary="HTML form for creating notes",
)
async def upload_form(files: FileService = Depends(get_file_service)) -> HTMLResponse:
    return HTMLResponse(await files.read_upload_form())
