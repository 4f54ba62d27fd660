"""Services Layer — imperative shell around the pure core.

Invariants:
    - Services sequence IO (storage, catalog) around core reducers and helpers
    - No FastAPI imports: routes adapt HTTP to these calls
"""
