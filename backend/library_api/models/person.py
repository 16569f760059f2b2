"""Person Columns — field set shared by librarians and readers.

Invariants:
    - Every person table owns its own id, name, tax_id, email, phone and address columns
    - tax_id and email are unique per table, not across librarians and readers
    - address is exposed as an Address value object over seven flat nullable columns

Design Decisions:
    - Column mixin, not a mapped superclass with polymorphism: each table is a closed
      shape and nothing queries "all persons"
    - Address kept as flat columns plus a property: the payload nests it, the table does not
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from library_api.core.domain_types import Address


class PersonColumns:
    """Mixin: identity, contact and address columns for person-shaped tables."""

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    tax_id: Mapped[str] = mapped_column(
        String(11), nullable=False, unique=True,
    )
    email: Mapped[str | None] = mapped_column(
        String(320), nullable=True, unique=True,
    )
    phone: Mapped[str | None] = mapped_column(String(11), nullable=True)

    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    street: Mapped[str | None] = mapped_column(String(200), nullable=True)
    complement: Mapped[str | None] = mapped_column(String(200), nullable=True)
    number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    city: Mapped[str | None] = mapped_column(String(100), nullable=True)
    state: Mapped[str | None] = mapped_column(String(50), nullable=True)

    @property
    def address(self) -> Address:
        return Address(**{
            name: getattr(self, name) for name in Address.field_names()
        })

    @address.setter
    def address(self, value: Address | dict | None) -> None:
        if not isinstance(value, Address):
            value = Address.from_dict(value)
        for name in Address.field_names():
            setattr(self, name, getattr(value, name))

    def apply_fields(self, data: dict, field_names: tuple[str, ...]) -> None:
        """Full replace of the given columns from a payload dict; absent keys become None."""
        for name in field_names:
            setattr(self, name, data.get(name))
        self.address = data.get("address")


PERSON_FIELDS: tuple[str, ...] = ("name", "tax_id", "email", "phone")
