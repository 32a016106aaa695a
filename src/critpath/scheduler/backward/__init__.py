"""Backward pass factory and exports."""

from ..config import BackwardStrategy
from ..protocols import BackwardPass
from .relaxation import RelaxationBackwardPass
from .reverse_topological import ReverseTopologicalBackwardPass


def create_backward_pass(strategy: BackwardStrategy) -> BackwardPass:
    """Create a backward pass instance for ``strategy``.

    Args:
        strategy: Which propagation strategy to use

    Returns:
        Backward pass instance
    """
    if strategy == BackwardStrategy.REVERSE_TOPOLOGICAL:
        return ReverseTopologicalBackwardPass()

    if strategy == BackwardStrategy.RELAXATION:
        return RelaxationBackwardPass()

    msg = f"Unknown backward strategy: {strategy}"
    raise ValueError(msg)


__all__ = [
    "RelaxationBackwardPass",
    "ReverseTopologicalBackwardPass",
    "create_backward_pass",
]
