"""
Convergence Monitor - decides what happens after each submit.

Only consecutive repeats of the same location count as stalling. A wizard
that renders several steps under one route keeps going as long as the
location moves at least once every ``max_loops`` submissions.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import urlparse

logger = logging.getLogger(__name__)


class Outcome(Enum):
    CONTINUE = "continue"
    DONE = "done"
    STUCK = "stuck"


def normalize_location(url: str) -> str:
    """Path part of a URL or path; host, query and fragment are dropped."""
    path = urlparse(url or "").path
    return path or "/"


@dataclass
class RunState:
    """Progress of one run. Created per run and never shared."""
    max_loops: int
    last_location: Optional[str] = None
    stuck_count: int = 0
    steps: int = 0


class ConvergenceMonitor:
    """Tracks submitted locations against the target."""

    def __init__(self, target: str, max_loops: int):
        self.target = normalize_location(target)
        self.state = RunState(max_loops=max_loops)

    def observe(self, url: str) -> Outcome:
        """Record the location reached by a submission and decide the next move."""
        location = normalize_location(url)
        state = self.state
        state.steps += 1
        logger.debug(f"New page is: {location}")

        if location == self.target:
            logger.info(f"Arrived at {self.target} after {state.steps} step(s). Done.")
            return Outcome.DONE

        logger.debug(f"Checking current path {location} against last path {state.last_location}")
        if location == state.last_location:
            state.stuck_count += 1
            logger.warning(f"Stuck on path {location} for {state.stuck_count} iterations")
            if state.stuck_count == state.max_loops:
                return Outcome.STUCK
        else:
            state.stuck_count = 0

        state.last_location = location
        return Outcome.CONTINUE
