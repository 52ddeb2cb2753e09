"""
Feature modules for the Boothdesk backend.

A module usually carries:
- interfaces.py: Protocol the rest of the app depends on
- models.py: Pydantic models
- repository.py: Supabase queries for the module's tables
- service.py: Business logic
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

The API layer wires concrete services in api/dependencies.py; modules
only see each other's interfaces.
"""
