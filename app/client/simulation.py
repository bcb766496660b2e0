"""
Order Load Simulation

Fires many concurrent add/remove operations at the order store to check
that it keeps every table consistent under contention.

The simulation runs in three phases:
    1. Add: a few random menu items are ordered for each selected table,
       all in parallel.
    2. Remove: a random subset of what was added is removed again, all in
       parallel. Only items that were added are removed, and at least one
       item stays on every table.
    3. Status: the final order of each table is read back in parallel.

The driver never locks anything itself. It relies on the store to
serialize operations per table, so a correct store finishes with zero
failures and exactly ``added - removed`` items on every table.

Two transports are supported:
    - run_local_simulation(): in-process, on a thread pool
    - run_http_simulation(): over the REST API with httpx

Author: Khalil_Bannouri
Version: 1.0.0
"""

import asyncio
import logging
import random
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Optional, Sequence

import httpx

from app.core.config import MAX_TABLES
from app.exceptions import RestaurantError
from app.models import MenuItem
from app.services.order_store import TableOrderStore

logger = logging.getLogger(__name__)


# =============================================================================
# PLAN & REPORT
# =============================================================================

@dataclass
class SimulationPlan:
    """
    What the simulation will do, decided up front.

    Attributes:
        additions: table id -> menu item ids to add
        removals: table id -> menu item ids to remove afterwards
    """
    additions: dict[int, list[int]]
    removals: dict[int, list[int]]

    @property
    def tables(self) -> list[int]:
        return list(self.additions)

    def expected_count(self, table_id: int) -> int:
        """Items the table should hold once both phases succeed."""
        return len(self.additions[table_id]) - len(self.removals[table_id])


@dataclass
class PhaseResult:
    """Outcome of one simulation phase."""
    succeeded: int = 0
    failed: int = 0
    errors: list[str] = field(default_factory=list)

    def record(self, error: Optional[str] = None) -> None:
        if error is None:
            self.succeeded += 1
        else:
            self.failed += 1
            self.errors.append(error)


@dataclass
class SimulationReport:
    """Standardized result from both simulation transports."""
    plan: SimulationPlan
    adds: PhaseResult
    removes: PhaseResult
    final_items: dict[int, list[MenuItem]]
    elapsed: float = 0.0

    @property
    def success(self) -> bool:
        return self.adds.failed == 0 and self.removes.failed == 0

    def mismatched_tables(self) -> list[int]:
        """Tables whose final item count differs from the plan."""
        return [
            table_id
            for table_id in self.plan.tables
            if len(self.final_items.get(table_id, [])) != self.plan.expected_count(table_id)
        ]


def plan_simulation(
    table_ids: Sequence[int],
    menu_ids: Sequence[int],
    num_tables: int = 10,
    items_per_table: int = 3,
    rng: Optional[random.Random] = None,
) -> SimulationPlan:
    """
    Pick the tables, the items to add and the items to remove.

    Args:
        table_ids: Registered tables
        menu_ids: Menu item ids
        num_tables: Tables to simulate (at most 100)
        items_per_table: Distinct menu items ordered per table
        rng: Random source, for reproducible plans

    Returns:
        SimulationPlan: The generated plan

    Raises:
        ValueError: num_tables is above 100 or below 1
    """
    if num_tables > MAX_TABLES:
        raise ValueError(
            f"The maximum number of tables allowed for simulation is {MAX_TABLES}."
        )
    if num_tables < 1:
        raise ValueError("The simulation needs at least one table.")

    rng = rng or random.Random()

    selected = rng.sample(list(table_ids), min(num_tables, len(table_ids)))

    additions = {}
    removals = {}
    for table_id in selected:
        to_add = rng.sample(list(menu_ids), min(items_per_table, len(menu_ids)))
        # strictly fewer than added, so something is left on the table
        to_remove = rng.sample(to_add, rng.randrange(len(to_add))) if to_add else []

        additions[table_id] = to_add
        removals[table_id] = to_remove

    return SimulationPlan(additions=additions, removals=removals)


def _operations(orders: dict[int, list[int]]) -> list[tuple[int, int]]:
    return [
        (table_id, item_id)
        for table_id, item_ids in orders.items()
        for item_id in item_ids
    ]


# =============================================================================
# IN-PROCESS SIMULATION
# =============================================================================

def run_local_simulation(
    store: TableOrderStore,
    plan: SimulationPlan,
    max_workers: int = 32,
) -> SimulationReport:
    """
    Run the plan directly against a store on a thread pool.

    Args:
        store: Order store under test
        plan: Simulation plan
        max_workers: Thread pool size

    Returns:
        SimulationReport: Phase results and final table contents
    """
    start_time = time.time()

    def add(operation: tuple[int, int]) -> Optional[str]:
        table_id, item_id = operation
        try:
            store.add_item(table_id, item_id)
        except RestaurantError as e:
            return e.message
        return None

    def remove(operation: tuple[int, int]) -> Optional[str]:
        table_id, item_id = operation
        try:
            store.remove_item(table_id, item_id)
        except RestaurantError as e:
            return e.message
        return None

    adds = PhaseResult()
    removes = PhaseResult()

    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="simulation") as pool:
        logger.info(f"Adding items for {len(plan.tables)} tables")
        for error in pool.map(add, _operations(plan.additions)):
            adds.record(error)

        logger.info("Removing items")
        for error in pool.map(remove, _operations(plan.removals)):
            removes.record(error)

        snapshots = pool.map(store.list_items, plan.tables)
        final_items = dict(zip(plan.tables, snapshots))

    elapsed = round(time.time() - start_time, 3)
    logger.info(
        f"Local simulation finished in {elapsed}s: "
        f"adds {adds.succeeded}/{adds.succeeded + adds.failed}, "
        f"removes {removes.succeeded}/{removes.succeeded + removes.failed}"
    )

    return SimulationReport(
        plan=plan,
        adds=adds,
        removes=removes,
        final_items=final_items,
        elapsed=elapsed,
    )


# =============================================================================
# HTTP SIMULATION
# =============================================================================

async def fetch_layout(client: httpx.AsyncClient) -> tuple[list[int], list[int]]:
    """Get the registered table ids and menu item ids from the API."""
    tables_response = await client.get("/api/v1/tables")
    tables_response.raise_for_status()

    menus_response = await client.get("/api/v1/menus")
    menus_response.raise_for_status()

    table_ids = tables_response.json()["data"]
    menu_ids = [item["id"] for item in menus_response.json()["data"]]

    return table_ids, menu_ids


async def _send(client: httpx.AsyncClient, method: str, url: str) -> Optional[str]:
    """Send one request; return None on success or an error description."""
    try:
        response = await client.request(method, url, timeout=30.0)
    except httpx.HTTPError as e:
        return f"{method} {url}: {e}"

    if response.status_code == 200:
        return None

    try:
        message = response.json().get("message", response.text)
    except ValueError:
        message = response.text[:100]

    return f"{method} {url}: {response.status_code} {message}"


async def _table_status(client: httpx.AsyncClient, table_id: int) -> list[MenuItem]:
    response = await client.get(f"/api/v1/get_items/{table_id}")
    response.raise_for_status()

    return [MenuItem(**item) for item in response.json()["data"]]


async def run_http_simulation(
    client: httpx.AsyncClient,
    plan: SimulationPlan,
) -> SimulationReport:
    """
    Run the plan against the REST API.

    Args:
        client: Async client whose base_url points at the API server
        plan: Simulation plan

    Returns:
        SimulationReport: Phase results and final table contents
    """
    start_time = time.time()

    adds = PhaseResult()
    removes = PhaseResult()

    logger.info(f"Adding items for {len(plan.tables)} tables over HTTP")
    results = await asyncio.gather(*[
        _send(client, "POST", f"/api/v1/add_item/{table_id}/{item_id}")
        for table_id, item_id in _operations(plan.additions)
    ])
    for error in results:
        adds.record(error)

    logger.info("Removing items over HTTP")
    results = await asyncio.gather(*[
        _send(client, "DELETE", f"/api/v1/remove_item/{table_id}/{item_id}")
        for table_id, item_id in _operations(plan.removals)
    ])
    for error in results:
        removes.record(error)

    snapshots = await asyncio.gather(*[
        _table_status(client, table_id) for table_id in plan.tables
    ])
    final_items = dict(zip(plan.tables, snapshots))

    elapsed = round(time.time() - start_time, 3)
    logger.info(f"HTTP simulation finished in {elapsed}s")

    return SimulationReport(
        plan=plan,
        adds=adds,
        removes=removes,
        final_items=final_items,
        elapsed=elapsed,
    )


# =============================================================================
# REPORTING
# =============================================================================

def print_report(report: SimulationReport) -> None:
    """Print the final table status and a summary."""
    total_adds = report.adds.succeeded + report.adds.failed
    total_removes = report.removes.succeeded + report.removes.failed

    print("\n========== Final Table Status ==========")
    for table_id in sorted(report.final_items):
        for item in report.final_items[table_id]:
            print(
                f"For Table: {table_id}  Menu Item ID: {item.id}, "
                f"Name: {item.name}, Cooking Time: {item.cooking_time} minutes"
            )
    print("=========================================\n")

    print(f"Added:   {report.adds.succeeded}/{total_adds}")
    print(f"Removed: {report.removes.succeeded}/{total_removes}")
    print(f"Time:    {report.elapsed}s")

    errors = report.adds.errors + report.removes.errors
    if errors:
        print("\nFailed operations (showing first 5):")
        for error in errors[:5]:
            print(f"   {error}")

    mismatched = report.mismatched_tables()
    if mismatched:
        print(f"\nTables with unexpected item counts: {mismatched}")

    print("\nSimulation complete.")
