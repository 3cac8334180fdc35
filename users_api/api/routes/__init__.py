"""Route Modules: one file per router binding or concern.

Invariants:
    - users.py (FastAPI) and users_compact.py (Starlette) are interchangeable
      bindings over the same UserService
    - Routes never contain business logic
"""
