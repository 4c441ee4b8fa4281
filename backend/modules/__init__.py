"""
Feature modules for the TaskBridge backend.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models (or payload types) for data transfer
- service.py: Business logic implementation
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions

Resource proxies (tasks, spaces, lists, workspaces) share one
upstream client and never talk to each other.
"""
