from __future__ import annotations
from typing import Any, Dict, Optional


class PuzzleError(Exception):
    """Base class for weighted-tiles errors."""


class MalformedBoard(PuzzleError, ValueError):
    """Start board is not a 3x3 grid of ints or has no blank cell."""


class NoSolutionFound(PuzzleError, RuntimeError):
    """Frontier emptied before the goal board was popped."""
    def __init__(self, result: Optional[Dict[str, Any]] = None):
        self.result = result or {}
        expanded = self.result.get("expanded", "?")
        super().__init__(f"search exhausted after {expanded} expansions without reaching the goal")
