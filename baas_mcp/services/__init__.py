"""Services Layer: tool catalogue, handlers, and tool dispatch.

Invariants:
    - define_*_tools.py hold declarative rows; handle_*.py hold backend calls
    - Tool dispatch uses an explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per resource for locality (ADR: no god objects)
"""
