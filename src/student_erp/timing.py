"""
Module: timing

Purpose:
    Phase timing for a session (load, sort views, index build) so slow
    steps are visible from the command line.

Key Classes:
    - TimingLog: Collects phase durations

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - controller: Session assembly
    - __main__: --timings output
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Phase durations in seconds, in the order phases were recorded.

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("load", 0.012)
        >>> print(log.summary())
    """
    phases: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Record a phase duration (overwrites an earlier value)."""
        self.phases[phase] = duration

    @property
    def total(self) -> float:
        return sum(self.phases.values())

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Session Timing Summary ==="]
        for phase, duration in self.phases.items():
            lines.append(f"  {phase:20s} {duration * 1000:.1f} ms")
        lines.append(f"  {'total':20s} {self.total * 1000:.1f} ms")
        lines.append("")
        return "\n".join(lines)


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "index_build"):
        ...     index.build(students)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.log_phase(phase, elapsed)
        logger.debug(f"{phase} took {elapsed * 1000:.1f} ms")
