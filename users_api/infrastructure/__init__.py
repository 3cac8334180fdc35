"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/ route modules
    - All database calls wrapped with error mapping to DatabaseError
"""
