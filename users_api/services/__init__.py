"""Services Layer: orchestration between HTTP adapters and persistence.

Invariants:
    - Services never import FastAPI or Starlette
    - Persistence reached only through core.repository_protocols
"""
