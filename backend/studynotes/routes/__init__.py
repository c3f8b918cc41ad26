# Routes package init
"""
Mini Study Notes Backend — API Routes Package
==============================================

Route Inventory:
    - users.py:   /api/v1/users/...   (users, subjects, study notes)
    - health.py:  GET /health         (service health check)

Routes stay thin: they pull path parameters and bodies out of the request,
call StudyNotesService, and shape the success response. Precondition
failures are exceptions handled globally in main.py.
"""
