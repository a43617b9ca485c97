#!/usr/bin/env python3
"""
Run the planting schedule label audit on demand instead of waiting for cron.

Usage (inside the API container):
    python scripts/run_audit.py
"""
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s: %(message)s",
    stream=sys.stdout,
)

from app.tasks.audit_schedules import audit_schedule_labels


async def main() -> None:
    bad = await audit_schedule_labels(ctx={})
    if bad:
        print(f"\n{bad} unparseable label(s) found. See the log above.")
    else:
        print("\nAll schedule labels parse.")


if __name__ == "__main__":
    asyncio.run(main())
