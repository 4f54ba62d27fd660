"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic
    - Reducers return new lists and never mutate their inputs

Design Decisions:
    - Functional core separated from imperative shell: stores in services/
      compose these reducers with a DurableStorage implementation
"""
