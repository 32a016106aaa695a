"""Scheduler package - Critical Path Method scheduling.

Main entry points:
- SchedulingService: runs ordering, both passes and extraction
- topological_order / forward_pass: individual steps
- create_backward_pass: backward pass for a BackwardStrategy
- critical_path / critical_edges / critical_chains / slack: extraction helpers
"""

from .backward import RelaxationBackwardPass, ReverseTopologicalBackwardPass, create_backward_pass
from .config import BackwardStrategy, SchedulingConfig
from .core import BackwardPassResult, ScheduledTask, ScheduleResult, latest_window
from .critical_path import (
    MAX_CRITICAL_CHAINS,
    count_chains,
    critical_chains,
    critical_edges,
    critical_path,
    enumerate_chains,
    slack,
)
from .forward_pass import forward_pass
from .protocols import BackwardPass
from .service import SchedulingService
from .topology import topological_ids, topological_order

__all__ = [
    # Core dataclasses
    "ScheduledTask",
    "ScheduleResult",
    "BackwardPassResult",
    "latest_window",
    # Configuration
    "SchedulingConfig",
    "BackwardStrategy",
    # Protocols
    "BackwardPass",
    # Steps
    "topological_order",
    "topological_ids",
    "forward_pass",
    "create_backward_pass",
    "RelaxationBackwardPass",
    "ReverseTopologicalBackwardPass",
    "critical_path",
    "critical_chains",
    "critical_edges",
    "enumerate_chains",
    "count_chains",
    "MAX_CRITICAL_CHAINS",
    "slack",
    # High-level service
    "SchedulingService",
]
