# Routes package init
"""
Noteboard Backend: API Routes Package
======================================

Route Inventory:
    - notes.py:   POST   /notes            (create)
                  GET    /notes            (list)
                  GET    /notes/{id}       (get one)
                  PATCH  /notes/{id}       (partial update)
                  DELETE /notes/{id}       (delete)
    - health.py:  GET    /health           (service health check)

Routes are thin: they extract the body and path, call NoteService, and
pick the status code. Business rules live in the service.
"""
