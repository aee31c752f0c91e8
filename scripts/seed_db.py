import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from sqlalchemy import insert  # noqa: E402

from rental.api.deps import get_engine  # noqa: E402
from rental.infrastructure.db.engine import create_tables  # noqa: E402
from rental.infrastructure.db.tables import customers, vehicles  # noqa: E402
from rental.infrastructure.demo_data import DEMO_CUSTOMERS, DEMO_VEHICLES  # noqa: E402


async def seed():
    engine = get_engine()
    await create_tables(engine)
    print("Created tables.")

    async with engine.begin() as conn:
        await conn.execute(insert(customers), DEMO_CUSTOMERS)
        await conn.execute(insert(vehicles), DEMO_VEHICLES)

    print(f"Seeded {len(DEMO_CUSTOMERS)} customers and {len(DEMO_VEHICLES)} vehicles.")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
