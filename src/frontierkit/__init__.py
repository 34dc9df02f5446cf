"""frontierkit

Generic containers and sampling utilities backing search and decision
algorithms.

The package provides:
- ordered insertion search and a stable priority queue (plus Stack and FIFOQueue)
- memoized scoring functions
- weighted random sampling with an injectable random source
- argmin/argmax helpers and a Markov decision process example consumer
"""

from .config import ToolkitConfig, load_config
from .errors import DegenerateDistributionError, EmptyContainerError, FrontierKitError, InvalidWeightError
from .helpers import argmax, argmax_random_tie, argmin, argmin_random_tie
from .logger import ExperimentLogger
from .memo import MemoizedFunction, memoize
from .ordering import Entry, Ordering, locate, search_first, search_last
from .queues import FIFOQueue, PriorityQueue, Queue, Stack
from .randomization import RandomizationEngine, resolve_rng
from .sampling import (
    WeightedSampler,
    audit_sampler_frequencies,
    weighted_choice,
    weighted_sample_with_replacement,
    weighted_sampler,
)

__version__ = "0.1.0"

__all__ = [
    "Ordering",
    "Entry",
    "search_first",
    "search_last",
    "locate",
    "MemoizedFunction",
    "memoize",
    "Queue",
    "Stack",
    "FIFOQueue",
    "PriorityQueue",
    "WeightedSampler",
    "weighted_sampler",
    "weighted_sample_with_replacement",
    "weighted_choice",
    "audit_sampler_frequencies",
    "argmin",
    "argmax",
    "argmin_random_tie",
    "argmax_random_tie",
    "ToolkitConfig",
    "load_config",
    "ExperimentLogger",
    "RandomizationEngine",
    "resolve_rng",
    "FrontierKitError",
    "EmptyContainerError",
    "InvalidWeightError",
    "DegenerateDistributionError",
]
