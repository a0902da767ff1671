"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter
    - Routes never contain business logic (delegate to schemas/store)

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
