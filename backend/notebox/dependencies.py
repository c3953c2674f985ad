"""
Notebox - Request Dependencies
==============================

What:  FastAPI dependency providers for the per-application services.
Why:   Services are built by create_app() from that app's Settings, so they
       live on app.state rather than as module-level singletons. Routes
       receive them through Depends(), and tests can build several apps
       with different store files side by side.
"""

from fastapi import Request

from notebox.services.file_service import FileService
from notebox.services.note_service import NoteService


def get_note_service(request: Request) -> NoteService:
    return request.app.state.note_service


def get_file_service(request: Request) -> FileService:
    return request.app.state.file_service
