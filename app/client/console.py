"""
Restaurant Management Console Client

Menu-driven terminal client for the REST API. On start it launches the
API server in a background thread, waits until it answers, and then lets
the user browse menus and tables, add and remove items, and run the
concurrent load simulation.

Run from project root: python -m app.client --port 8081

Author: Khalil_Bannouri
Version: 1.0.0
"""

import argparse
import asyncio
import logging
import sys
import threading
import time
from typing import Callable, Optional

import httpx
import uvicorn

from app.client.simulation import (
    fetch_layout,
    plan_simulation,
    print_report,
    run_http_simulation,
)
from app.core.config import MAX_TABLES, get_settings

logger = logging.getLogger(__name__)

MENU_OPTIONS = """
Please select an operation:
1. Retrieve Available Menus
2. Get Active Tables
3. Add a Menu Item to a Table
4. Remove a Menu Item from a Table
5. Get All Orders for a Table
6. Get Specific Menu Item Ordered for a Table
7. Run Simulation (Parallel add/remove menu items for upto 100 tables)
8. Exit"""


# =============================================================================
# SERVER BOOTSTRAP
# =============================================================================

def start_server_in_thread(host: str, port: int) -> threading.Thread:
    """Run the API server on a daemon thread."""
    config = uvicorn.Config("app.main:app", host=host, port=port, log_level="warning")
    server = uvicorn.Server(config)

    thread = threading.Thread(target=server.run, name="api-server", daemon=True)
    thread.start()

    return thread


def wait_for_server_start(base_url: str, retries: int = 10, delay: float = 1.0) -> bool:
    """Poll the health endpoint until the server answers."""
    for attempt in range(1, retries + 1):
        try:
            response = httpx.get(f"{base_url}/health", timeout=2.0)
            if response.status_code == 200:
                return True
        except httpx.HTTPError:
            logger.debug(f"Server not ready (attempt {attempt}/{retries})")
        time.sleep(delay)

    return False


def display_intro(base_url: str) -> None:
    print("\n==================== Restaurant Management Client ====================\n")
    print("Welcome to the Restaurant Management Client.")
    print("This application allows you to interact with a virtual restaurant system,")
    print("facilitating the management of tables, menus, and orders through a RESTful API.")
    print("\nYou can perform the following operations:")
    print("- Retrieve and view available menus")
    print("- Get details of all active tables")
    print("- Add or remove menu items to/from a table")
    print("- Simulate complex operations with parallel requests\n")
    print("For API documentation, including the OpenAPI specification and Swagger UI, please visit:")
    print(f"Swagger UI: {base_url}/swagger-ui\nOpenAPI JSON: {base_url}/api-doc/openapi.json\n")
    print("=======================================================================\n")


# =============================================================================
# CONSOLE CLIENT
# =============================================================================

class ConsoleClient:
    """
    Interactive client over a synchronous httpx client.

    Attributes:
        client: httpx client with base_url set to the API server
        input_func: Source of user input (``input`` by default)
    """

    def __init__(
        self,
        client: httpx.Client,
        input_func: Callable[[str], str] = input,
        simulation_tables: int = 10,
        items_per_table: int = 3,
    ):
        self.client = client
        self.input_func = input_func
        self.simulation_tables = simulation_tables
        self.items_per_table = items_per_table

        self.actions = {
            "1": self.get_menus,
            "2": self.get_tables,
            "3": self.add_menu_item,
            "4": self.remove_menu_item,
            "5": self.get_table_orders,
            "6": self.get_specific_menu_item,
            "7": self.run_simulation,
        }

    def read_id(self, prompt: str) -> int:
        """Prompt until the user enters a non-negative integer."""
        while True:
            raw = self.input_func(prompt).strip()
            if raw.isdigit():
                return int(raw)
            print("Please enter a positive integer.")

    def read_table_and_item(self) -> tuple[int, int]:
        table_id = self.read_id("Enter table number(positive integer): ")
        item_id = self.read_id("Enter menu item number(positive integer): ")
        return table_id, item_id

    def show(self, label: str, response: httpx.Response) -> dict:
        """Print the API answer and return its JSON body."""
        body = response.json()

        if body.get("status") == "ok":
            print(f"{label}: {body.get('data', body.get('message'))}")
        else:
            print(f"{label} failed ({response.status_code}): {body.get('message')}")

        return body

    def get_menus(self) -> None:
        response = self.client.get("/api/v1/menus")
        body = response.json()
        print("Menus:")
        for item in body.get("data", []):
            print(f"  {item['id']:>3}. {item['name']:<15} {item['cooking_time']} minutes")

    def get_tables(self) -> None:
        self.show("Tables", self.client.get("/api/v1/tables"))

    def add_menu_item(self) -> None:
        table_id, item_id = self.read_table_and_item()
        self.show("Add menu item", self.client.post(f"/api/v1/add_item/{table_id}/{item_id}"))

    def remove_menu_item(self) -> None:
        table_id, item_id = self.read_table_and_item()
        self.show(
            "Remove menu item",
            self.client.delete(f"/api/v1/remove_item/{table_id}/{item_id}"),
        )

    def get_table_orders(self) -> None:
        table_id = self.read_id("Enter table number(positive integer): ")
        self.show(f"Orders for table {table_id}", self.client.get(f"/api/v1/get_items/{table_id}"))

    def get_specific_menu_item(self) -> None:
        table_id, item_id = self.read_table_and_item()
        self.show(
            f"Details of menu item {item_id} for table {table_id}",
            self.client.get(f"/api/v1/get_item/{table_id}/{item_id}"),
        )

    def run_simulation(self) -> None:
        raw = self.input_func(
            f"Enter the number of tables for the simulation "
            f"(max {MAX_TABLES}, default {self.simulation_tables}): "
        ).strip()
        num_tables = int(raw) if raw.isdigit() else self.simulation_tables

        if num_tables < 1:
            print("Error: The simulation needs at least one table.")
            return

        if num_tables > MAX_TABLES:
            print(f"Error: The maximum number of tables allowed for simulation is {MAX_TABLES}.")
            return

        print("\n========== Starting Simulation ==========")
        print(f"1. Select Tables for Simulation: A random selection of {num_tables} tables is performed.")
        print("2. Simultaneous Add and Remove Operations: Menu items are added and removed in parallel, ensuring that only items that were added are removed.")
        print("3. Retain Some Items After Simulation: Some items are randomly selected to remain on the table.")
        print("4. Final Status Printing: The final status of each table is printed in parallel.")
        print("==========================================\n")

        report = asyncio.run(self._simulate(num_tables))
        print_report(report)

    async def _simulate(self, num_tables: int):
        async with httpx.AsyncClient(base_url=str(self.client.base_url)) as client:
            table_ids, menu_ids = await fetch_layout(client)
            plan = plan_simulation(table_ids, menu_ids, num_tables, self.items_per_table)
            return await run_http_simulation(client, plan)

    def run(self) -> None:
        """Main interactive loop."""
        while True:
            print(MENU_OPTIONS)
            choice = self.input_func("> ").strip()

            if choice == "8":
                print("Exiting the application. Goodbye!")
                break

            action = self.actions.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue

            try:
                action()
            except httpx.HTTPError as e:
                print(f"Request failed: {e}")


# =============================================================================
# ENTRY POINT
# =============================================================================

def parse_cli_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Restaurant management console client")
    parser.add_argument("-p", "--port", type=int, default=settings.api_port, help="API server port")
    parser.add_argument("--host", default=settings.api_host, help="API server host")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    settings = get_settings()
    args = parse_cli_args(argv)
    base_url = f"http://{args.host}:{args.port}"

    start_server_in_thread(args.host, args.port)

    if not wait_for_server_start(base_url, retries=settings.server_start_retries):
        print(f"Server failed to start on {base_url}", file=sys.stderr)
        sys.exit(1)

    display_intro(base_url)

    with httpx.Client(base_url=base_url, timeout=30.0) as client:
        ConsoleClient(
            client,
            simulation_tables=settings.simulation_tables,
            items_per_table=settings.simulation_items_per_table,
        ).run()


if __name__ == "__main__":
    main()
