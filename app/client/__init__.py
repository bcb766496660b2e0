"""
Client Module

Terminal client and load simulation for the restaurant API.

Components:
    - console: Menu-driven interactive client
    - simulation: Concurrent add/remove workload (in-process or HTTP)
"""

from app.client.simulation import (
    SimulationPlan,
    SimulationReport,
    plan_simulation,
    run_http_simulation,
    run_local_simulation,
)

__all__ = [
    "SimulationPlan",
    "SimulationReport",
    "plan_simulation",
    "run_http_simulation",
    "run_local_simulation",
]
