"""Decision evaluation engine."""

from .matcher import BranchDelegate, Matcher
from .patterns import guard_matches, matches_pattern, same_value
from .resolution import ResolutionCell, map_resolution
from .stack import ContextStack

__all__ = [
    "BranchDelegate",
    "ContextStack",
    "Matcher",
    "ResolutionCell",
    "guard_matches",
    "map_resolution",
    "matches_pattern",
    "same_value",
]
