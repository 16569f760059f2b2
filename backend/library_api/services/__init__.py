"""Services Layer — one service per entity, plus wiring and seed loading.

Invariants:
    - Services raise LibraryError subclasses; they never build HTTP responses
    - Services reach persistence only through the store passed to __init__

Design Decisions:
    - One service file per entity for locality
"""
