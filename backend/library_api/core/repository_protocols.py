"""Boundary Protocols — contracts between the domain services and persistence.

Invariants:
    - Services NEVER import SQLAlchemy sessions — they depend on these Protocols only
    - One store per entity; stores hold no business rules
    - save() is a single atomic write: insert when the entity has no id, full update otherwise
    - Lookups return None on a miss; turning a miss into NOT_FOUND is the service's job

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - list() takes SQLAlchemy column expressions: the filtered queries stay in the services
      next to the rules that define them
"""

from typing import Any, Protocol, TypeVar

from library_api.core.domain_types import ReaderId

EntityT = TypeVar("EntityT")


class Store(Protocol[EntityT]):
    """Shape shared by every entity store."""
    async def get(self, entity_id: int) -> EntityT | None: ...
    async def find_one(self, *criteria: Any) -> EntityT | None: ...
    async def list(self, *criteria: Any) -> list[EntityT]: ...
    async def save(self, entity: EntityT) -> EntityT: ...
    async def delete(self, entity: EntityT) -> None: ...


class PersonStore(Store[EntityT], Protocol[EntityT]):
    """Stores for person-shaped records add the tax-id lookup."""
    async def find_by_tax_id(self, tax_id: str) -> EntityT | None: ...
    async def find_by_registration_number(
        self, registration_number: str,
    ) -> EntityT | None: ...
    async def find_by_email(self, email: str) -> EntityT | None: ...


class LoanStore(Store[EntityT], Protocol[EntityT]):
    """Loan store adds the reader linkage lookup."""
    async def list_by_reader(self, reader_id: ReaderId) -> list[EntityT]: ...
