"""Shortest-path algorithms over WeightedDiGraph."""

from shortpath.lib.algorithms.path_utils import resolve_to_paths
from shortpath.lib.algorithms.spf import spf

__all__ = ["resolve_to_paths", "spf"]
