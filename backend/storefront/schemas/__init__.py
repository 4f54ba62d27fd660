"""Pydantic Schemas — request models validated at the API boundary.

Invariants:
    - Every field that crosses the API boundary is validated by Pydantic
"""
