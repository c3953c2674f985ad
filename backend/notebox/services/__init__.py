# Services package init
"""
Notebox - Services Layer
========================

What:  Business logic between routes (HTTP) and the store file (persistence).

Service Inventory:
    - NoteStore:   Whole-file JSON persistence with atomic writes
    - NoteService: list / get / update / create / delete over a NoteStore
    - FileService: Reads the static upload form

Instances are created per application by create_app() and reached from
routes through the dependencies in notebox.dependencies.
"""
