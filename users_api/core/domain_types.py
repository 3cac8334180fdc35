"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int, always within the unsigned 32-bit range
    - UINT32_MAX bounds both ids and ages accepted from clients
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Value Bounds ────────────────────────────────────────────────

UINT32_MAX = 2**32 - 1
