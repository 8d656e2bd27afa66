"""
Execution timing utilities.

Backends time their phases (reduction, determinant evaluations,
residuals) so callers can compare the cost of Gauss-Jordan against
Cramer's Rule on the same system.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating timer with named sections.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('reduction'):
            reduced = gauss_jordan_reduce(A, b, tol)

        with timer.section('residuals'):
            r = A @ reduced.solution - b

        timer.stop()
        result = timer.result()
        # {'total_seconds': 0.0002, 'reduction': 0.00015, 'residuals': 0.00001}
    """

    def __init__(self):
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        """Start the overall timer."""
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named section.

        Args:
            name: Section identifier (used as key in result dict)

        Note:
            Sections called more than once accumulate. Sections can
            overlap with each other and with the total time.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Context manager for simple timing.

    Usage:
        with timed() as timer:
            x = gauss_jordan(A, b)
        print(f"Took {timer.result()['total_seconds']:.6f}s")
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
