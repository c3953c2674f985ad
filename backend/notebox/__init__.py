"""
Notebox - Application Package Initializer
=========================================

What: Marks the `notebox` directory as a Python package.
Who:  Used by the console script, uvicorn, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← lookup, uniqueness, ordering
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← pydantic Note model
    ├─────────────────────────────────────┤
    │        Store (Persistence)          │  ← one JSON file on disk
    └─────────────────────────────────────┘

    Routes never touch the file; services never build HTTP responses.
"""

__version__ = "1.0.0"
