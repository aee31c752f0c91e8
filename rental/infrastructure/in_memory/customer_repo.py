import copy
from typing import Iterable

from rental.application.interfaces.customer_repo import CustomerRepo
from rental.domain.entities.customer import Customer


class InMemoryCustomerRepo(CustomerRepo):
    def __init__(self) -> None:
        self.customers: dict[str, Customer] = {}

    def add(self, customer: Customer) -> None:
        """Seed a customer (the customer module owns their lifecycle)."""
        self.customers[customer.id] = copy.deepcopy(customer)

    async def get_by_id(self, customer_id: str) -> Customer | None:
        stored = self.customers.get(customer_id)
        return copy.deepcopy(stored) if stored is not None else None

    async def get_many(self, customer_ids: Iterable[str]) -> dict[str, Customer]:
        return {
            cid: copy.deepcopy(self.customers[cid])
            for cid in set(customer_ids)
            if cid in self.customers
        }
