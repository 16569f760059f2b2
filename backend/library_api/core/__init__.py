"""Core Layer — pure domain rules, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Rule checks return an error (or None) instead of raising; the shell raises

Design Decisions:
    - Functional core separated from imperative shell: rules are testable without a database
"""
