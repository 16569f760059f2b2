"""Infrastructure Layer — database session management, stores and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Every SQLAlchemy failure leaves this layer as a LibraryError subclass

Design Decisions:
    - Stores live here, their contracts in core/repository_protocols.py
"""
