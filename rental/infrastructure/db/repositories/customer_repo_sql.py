from typing import Any, Iterable, Mapping

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rental.application.interfaces.customer_repo import CustomerRepo
from rental.domain.entities.customer import Customer
from rental.infrastructure.db.tables import customers


def _to_entity(row: Mapping[str, Any]) -> Customer:
    return Customer(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        date_of_birth=row["date_of_birth"],
        is_active=bool(row["is_active"]),
    )


class CustomerRepoSQL(CustomerRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, customer_id: str) -> Customer | None:
        stmt = select(customers).where(customers.c.id == customer_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        return _to_entity(row) if row else None

    async def get_many(self, customer_ids: Iterable[str]) -> dict[str, Customer]:
        ids = set(customer_ids)
        if not ids:
            return {}
        result = await self._session.execute(select(customers).where(customers.c.id.in_(ids)))
        return {row["id"]: _to_entity(row) for row in result.mappings().all()}
