"""
Chaos Simulation Script

Simulates high-concurrency add/remove traffic to verify that every table
ends up with exactly the items that were added and not removed.

Run from project root:
    python scripts/simulate.py                 # against a running API server
    python scripts/simulate.py --local         # in-process, no server needed

Author: Khalil_Bannouri
Version: 1.0.0
"""

import asyncio
import sys
import os
import random
import argparse
from datetime import datetime

import httpx
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.client.simulation import (
    fetch_layout,
    plan_simulation,
    print_report,
    run_http_simulation,
    run_local_simulation,
)
from app.core.config import get_settings, setup_logging
from app.services import get_order_store


def banner(target: str, num_tables: int, items_per_table: int) -> None:
    print("=" * 70)
    print("CHAOS SIMULATION - HIGH CONCURRENCY TEST")
    print("=" * 70)
    print(f"Tables: {num_tables}")
    print(f"Items per table: {items_per_table}")
    print(f"Target: {target}")
    print(f"Started: {datetime.now().strftime('%H:%M:%S')}")
    print("=" * 70)


def simulate_local(num_tables: int, items_per_table: int, rng: random.Random, workers: int):
    """Run the simulation directly against a fresh in-process store."""
    store = get_order_store()
    plan = plan_simulation(
        [table.id for table in store.list_tables()],
        [item.id for item in store.list_menu()],
        num_tables,
        items_per_table,
        rng,
    )
    return run_local_simulation(store, plan, max_workers=workers)


async def simulate_http(base_url: str, num_tables: int, items_per_table: int, rng: random.Random):
    """Run the simulation against a running API server."""
    async with httpx.AsyncClient(base_url=base_url) as client:
        table_ids, menu_ids = await fetch_layout(client)
        plan = plan_simulation(table_ids, menu_ids, num_tables, items_per_table, rng)
        return await run_http_simulation(client, plan)


if __name__ == "__main__":
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Chaos Simulation Script")
    parser.add_argument("--tables", type=int, default=settings.simulation_tables, help="Number of tables (max 100)")
    parser.add_argument("--items", type=int, default=settings.simulation_items_per_table, help="Items per table")
    parser.add_argument("--url", default=settings.base_url, help="API base URL")
    parser.add_argument("--local", action="store_true", help="Run in-process against the store")
    parser.add_argument("--workers", type=int, default=32, help="Thread pool size for --local")
    parser.add_argument("--seed", type=int, default=None, help="Seed for table/item selection")
    args = parser.parse_args()

    setup_logging()
    rng = random.Random(args.seed)

    try:
        if args.local:
            banner("in-process store", args.tables, args.items)
            report = simulate_local(args.tables, args.items, rng, args.workers)
        else:
            banner(args.url, args.tables, args.items)
            report = asyncio.run(simulate_http(args.url, args.tables, args.items, rng))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Could not reach the API at {args.url}: {e}")
        sys.exit(1)

    print_report(report)

    if not report.success or report.mismatched_tables():
        sys.exit(1)
