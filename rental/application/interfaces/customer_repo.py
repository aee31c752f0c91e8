from typing import Iterable

from rental.domain.entities.customer import Customer


class CustomerRepo:
    async def get_by_id(self, customer_id: str) -> Customer | None:
        raise NotImplementedError

    async def get_many(self, customer_ids: Iterable[str]) -> dict[str, Customer]:
        raise NotImplementedError
