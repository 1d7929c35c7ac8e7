"""Request dispatch and batch evaluation."""

from .batch import BatchStrategy, concurrent, evaluate_batch, get_strategy, sequential
from .dispatcher import Dispatcher

__all__ = [
    "Dispatcher",
    # Batch evaluation
    "BatchStrategy",
    "sequential",
    "concurrent",
    "get_strategy",
    "evaluate_batch",
]
