#!/usr/bin/env python3
"""
One-off script to seed the plant library and its zone schedules.

Usage (inside the API container):
    python scripts/run_seeder.py

Safe to re-run: existing plants and schedules are left alone.
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from app.tasks.seed_library import seed_library


async def main() -> None:
    print("Seeding plant library...\n")
    inserted = await seed_library(ctx={})
    print(f"\nSeeder finished: {inserted} rows inserted.")


if __name__ == "__main__":
    asyncio.run(main())
