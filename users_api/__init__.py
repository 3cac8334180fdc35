"""Users API Package: CRUD HTTP service for the User resource.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
