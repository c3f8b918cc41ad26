"""
Mini Study Notes Backend — Application Package
===============================================

Personal study-notes service: users own named subjects, subjects own study
notes. Layered the usual way:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (Precondition chains)  │  ← Rules, mutation, locking
    ├─────────────────────────────────────┤
    │   Repositories (UserRepository)     │  ← SQL or in-memory store
    ├─────────────────────────────────────┤
    │  Schemas (aggregate) & Models (ORM) │  ← Pydantic + SQLAlchemy
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
