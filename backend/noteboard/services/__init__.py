# Services package init
"""
Noteboard Backend: Services Layer
==================================

What:  Business logic between routes (HTTP) and repositories (storage).

Service Inventory:
    - NoteService: create / list / get / update / delete with the
      required-field rule and NotFoundError mapping
"""
