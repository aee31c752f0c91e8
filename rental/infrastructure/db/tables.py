from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
)

metadata = MetaData()

customers = Table(
    "customers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("first_name", String(150), nullable=False),
    Column("last_name", String(150), nullable=False),
    Column("email", String(255), nullable=False),
    Column("date_of_birth", Date),
    Column("is_active", Boolean, nullable=False, default=True),
)

vehicles = Table(
    "vehicles",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("brand", String(100), nullable=False),
    Column("model", String(100), nullable=False),
    Column("license_plate", String(20), nullable=False, unique=True),
    Column("base_daily_rate", Numeric(12, 2), nullable=False),
    Column("daily_rate", Numeric(12, 2)),
    Column("mileage", Integer, nullable=False, default=0),
)

reservations = Table(
    "reservations",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("customer_id", String(36), ForeignKey("customers.id"), nullable=False),
    Column("vehicle_id", String(36), ForeignKey("vehicles.id"), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("daily_rate", Numeric(12, 2), nullable=False),
    Column("total_amount", Numeric(12, 2), nullable=False),
    Column("status", String(32), nullable=False),
    Column("qr_code", Text),
    Column("notes", String(1000)),
    Column("final_mileage", Integer),
    Column("lock_version", Integer, nullable=False, default=0),
    Column("created_at", DateTime(timezone=True)),
    Column("updated_at", DateTime(timezone=True)),
    Index("ix_reservations_vehicle_status", "vehicle_id", "status"),
    Index("ix_reservations_customer", "customer_id"),
)

payments = Table(
    "payments",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("reservation_id", String(36), ForeignKey("reservations.id"), nullable=False),
    Column("amount", Numeric(12, 2), nullable=False),
    Column("method", String(32), nullable=False),
    Column("status", String(32), nullable=False),
    Column("payment_date", DateTime(timezone=True)),
    Column("transaction_reference", String(100)),
    Column("notes", String(500)),
    Column("created_at", DateTime(timezone=True)),
    Index("ix_payments_reservation", "reservation_id"),
)
