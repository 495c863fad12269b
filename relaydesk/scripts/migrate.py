from __future__ import annotations

import os
import time
import logging
import subprocess
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.exc import OperationalError

from relaydesk.core.config import settings

logger = logging.getLogger("relaydesk.migrate")


def wait_for_db(engine, timeout_s: int = 60) -> None:
    """Wait until the database is accepting connections."""
    start = time.time()
    delay = 1.0

    while True:
        try:
            with engine.begin() as conn:
                conn.execute(text("SELECT 1"))
            return
        except OperationalError:
            if time.time() - start > timeout_s:
                raise
            logger.info("Database not ready, retrying in %.1fs", delay)
            time.sleep(delay)
            delay = min(delay * 1.5, 5.0)


def run(cmd: list[str]) -> int:
    p = subprocess.run(cmd, check=False)
    return p.returncode


def main() -> int:
    logging.basicConfig(level=logging.INFO)
    dsn = os.getenv("MYSQL_DSN") or settings.MYSQL_DSN
    engine = create_engine(dsn, future=True, pool_pre_ping=True)

    # Wait for DB readiness (important in docker-compose)
    wait_for_db(engine, timeout_s=int(os.getenv("DB_WAIT_TIMEOUT", "90")))

    tables = set(inspect(engine).get_table_names())

    if "alembic_version" not in tables and "orgs" in tables:
        # Existing schema without alembic tracking: stamp head
        rc = run(["alembic", "stamp", "head"])
    else:
        rc = run(["alembic", "upgrade", "head"])
    if rc != 0:
        # Fail fast so schema doesn't drift from alembic_version.
        return rc

    # Seed default pricing once (idempotent)
    if settings.AUTO_SEED_PRICING:
        from relaydesk.db.session import SessionLocal
        from relaydesk.services.pricing import init_pricing_table

        db = SessionLocal()
        try:
            init_pricing_table(db)
        finally:
            db.close()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
