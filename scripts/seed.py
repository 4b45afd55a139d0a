#!/usr/bin/env python3
"""Seed the authorization database with the reference dataset.

This script:
- Loads config from env/api.env (WARDEN_DB_* variables)
- Creates the authorization tables if they do not exist
- Wipes existing authorization data (unless --no-reset)
- Creates roles, permissions, subjects, patient records and relationship edges
- Prints the ids it created

Usage:
    ./scripts/seed.py
    ./scripts/seed.py --no-reset
    ./scripts/seed.py --database-url sqlite+aiosqlite:///./warden.db
"""

import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

console = Console()

# Load environment from env/api.env
env_file = Path(__file__).parent.parent / "env" / "api.env"
load_dotenv(env_file)

from authorization.application.services import (  # noqa: E402
    AdministrationService,
    SeedResult,
)
from authorization.application.services.administration_service import (  # noqa: E402
    SEED_RECORD_DATA,
)
from authorization.infrastructure.administration_repository import (  # noqa: E402
    AdministrationRepository,
)
from authorization.ports.exceptions import (  # noqa: E402
    DuplicatePermissionError,
    DuplicateRoleError,
)
from infrastructure.database.engines import build_async_url  # noqa: E402
from infrastructure.database.models import Base  # noqa: E402
from infrastructure.logging import configure_logging  # noqa: E402
from infrastructure.settings import get_database_settings  # noqa: E402

# Registers the authorization tables on Base.metadata
import authorization.infrastructure.models  # noqa: E402,F401


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Seed the authorization database with reference data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s --no-reset
  %(prog)s --database-url sqlite+aiosqlite:///./warden.db
        """,
    )

    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy async URL (default: built from WARDEN_DB_* settings)",
    )
    parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Keep existing data; fails if seed names already exist",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Emit debug-level logs",
    )

    return parser.parse_args()


async def seed(database_url: str, reset: bool) -> SeedResult:
    """Create tables and run the seed use case against ``database_url``."""
    engine = create_async_engine(database_url)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        sessionmaker = async_sessionmaker(
            engine, expire_on_commit=False, class_=AsyncSession
        )
        async with sessionmaker() as session:
            service = AdministrationService(
                repository=AdministrationRepository(session=session),
                session=session,
            )
            return await service.seed(reset=reset)
    finally:
        await engine.dispose()


def print_result(result: SeedResult) -> None:
    """Print the seeded ids as a table."""
    table = Table(title="Seeded authorization data")
    table.add_column("Entity", style="cyan")
    table.add_column("ID", justify="right", style="green")
    table.add_column("Notes")

    table.add_row("Dr Alice", str(result.doctor_id), "doctor; assigned_to Patient Paul")
    table.add_row("Nora Nurse", str(result.nurse_id), "nurse")
    table.add_row("Patient Paul", str(result.patient_id), "no roles")
    for record_id, data in zip(result.record_ids, SEED_RECORD_DATA):
        table.add_row("patient_record", str(record_id), f"{data}; owned by Patient Paul")

    console.print(table)


def main():
    args = parse_args()
    configure_logging(debug=args.debug)

    database_url = args.database_url or build_async_url(get_database_settings())

    try:
        with console.status("Seeding authorization data..."):
            result = asyncio.run(seed(database_url, reset=not args.no_reset))
    except (SQLAlchemyError, DuplicatePermissionError, DuplicateRoleError) as e:
        console.print(f"[red]✗ Seeding failed:[/red] {e}")
        sys.exit(1)

    console.print("[green]✓ Seed complete[/green]")
    print_result(result)


if __name__ == "__main__":
    main()
