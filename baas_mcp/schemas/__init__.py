"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (HTTP bodies, JSON-RPC envelopes)

Design Decisions:
    - Separate from core: schemas are transport contracts, core types are domain
      (ADR: boundary separation)
"""
