"""
Recordings API: Application Package
====================================

What: HTTP service for the `album` table of the recordings database.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← parse input, return JSON
    ├─────────────────────────────────────┤
    │      AlbumStore (Data Access)       │  ← one SQL statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async engine and sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
