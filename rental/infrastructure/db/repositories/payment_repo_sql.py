from typing import Sequence

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from rental.application.interfaces.payment_repo import PaymentRepo
from rental.domain.entities.payment import Payment, PaymentMethod, PaymentStatus
from rental.infrastructure.db.tables import payments


class PaymentRepoSQL(PaymentRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, payment: Payment) -> None:
        await self._session.execute(
            insert(payments).values(
                id=payment.id,
                reservation_id=payment.reservation_id,
                amount=payment.amount,
                method=payment.method.value,
                status=payment.status.value,
                payment_date=payment.payment_date,
                transaction_reference=payment.transaction_reference,
                notes=payment.notes,
                created_at=payment.created_at,
            )
        )

    async def list_by_reservation(self, reservation_id: str) -> Sequence[Payment]:
        stmt = (
            select(payments)
            .where(payments.c.reservation_id == reservation_id)
            .order_by(payments.c.created_at, payments.c.id)
        )
        result = await self._session.execute(stmt)
        return [
            Payment(
                id=row["id"],
                reservation_id=row["reservation_id"],
                amount=row["amount"],
                method=PaymentMethod(row["method"]),
                status=PaymentStatus(row["status"]),
                payment_date=row["payment_date"],
                transaction_reference=row["transaction_reference"],
                notes=row["notes"],
                created_at=row["created_at"],
            )
            for row in result.mappings().all()
        ]
