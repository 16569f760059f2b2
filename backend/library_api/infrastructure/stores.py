"""SQLAlchemy Stores — one persistence adapter per entity, no business rules.

Invariants:
    - Every method opens and closes its own session from DatabaseSessionManager
    - save() commits exactly once: one atomic write per call
    - list() orders by primary key; callers must not rely on it
    - Integrity violations surface as DataConflictError (raised by the session manager)

Design Decisions:
    - merge() for save: inserts transient entities and full-updates detached ones with
      the same code path
    - Stores are stateless apart from the manager reference; one instance per process
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import select

from library_api.core.domain_types import ReaderId
from library_api.db.base import Base
from library_api.infrastructure.database import DatabaseSessionManager
from library_api.models.librarian import Librarian
from library_api.models.loan import Loan
from library_api.models.reader import Reader

ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyStore(Generic[ModelT]):
    """Generic CRUD over one mapped class."""

    model: type[ModelT]

    def __init__(self, db_manager: DatabaseSessionManager):
        self._db = db_manager

    async def get(self, entity_id: int) -> ModelT | None:
        async with self._db.session() as db:
            return await db.get(self.model, entity_id)

    async def find_one(self, *criteria: Any) -> ModelT | None:
        async with self._db.session() as db:
            result = await db.execute(
                select(self.model).where(*criteria).limit(1),
            )
            return result.scalar_one_or_none()

    async def list(self, *criteria: Any) -> list[ModelT]:
        query = select(self.model).order_by(self.model.id)
        if criteria:
            query = query.where(*criteria)
        async with self._db.session() as db:
            result = await db.execute(query)
            return list(result.scalars().all())

    async def save(self, entity: ModelT) -> ModelT:
        async with self._db.session() as db:
            persisted = await db.merge(entity)
            await db.commit()
            return persisted

    async def delete(self, entity: ModelT) -> None:
        async with self._db.session() as db:
            persistent = await db.get(self.model, entity.id)
            if persistent is None:
                return
            await db.delete(persistent)
            await db.commit()


class LibrarianStore(SqlAlchemyStore[Librarian]):
    model = Librarian

    async def find_by_tax_id(self, tax_id: str) -> Librarian | None:
        return await self.find_one(Librarian.tax_id == tax_id)

    async def find_by_registration_number(
        self, registration_number: str,
    ) -> Librarian | None:
        return await self.find_one(
            Librarian.registration_number == registration_number,
        )


    async def find_by_email(self, email: str) -> Librarian | None:
        return await self.find_one(Librarian.email == email)

class ReaderStore(SqlAlchemyStore[Reader]):
    model = Reader

    async def find_by_tax_id(self, tax_id: str) -> Reader | None:
        return await self.find_one(Reader.tax_id == tax_id)

    async def find_by_registration_number(
        self, registration_number: str,
    ) -> Reader | None:
        return await self.find_one(
            Reader.registration_number == registration_number,
        )


    async def find_by_email(self, email: str) -> Reader | None:
        return await self.find_one(Reader.email == email)

class LoanStore(SqlAlchemyStore[Loan]):
    model = Loan

    async def list_by_reader(self, reader_id: ReaderId) -> list[Loan]:
        return await self.list(Loan.reader_id == reader_id)
