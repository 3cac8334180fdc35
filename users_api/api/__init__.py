"""API Layer: HTTP adapters and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes only translate HTTP to UserService calls and back

Design Decisions:
    - Thin routes delegate to services/user_service.py
"""
