# Services package init
"""
Mini Study Notes Backend — Services Layer
==========================================

What:  Business logic between routes (HTTP) and repositories (persistence).

Service Inventory:
    - StudyNotesService: precondition chains and aggregate mutations for
      users, subjects and study notes
    - UsernameLocks: in-process per-username serialization used by the
      service around every read-modify-write
"""
