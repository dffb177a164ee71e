#!/usr/bin/env python3

"""Progress tracking for batch declaration expansion."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter

import psutil


class ProgressTracker:
    """
    Track and report expansion progress across a batch of declarations.

    Provides contextual timing, declaration counting and parameter counting
    for performance analysis and debugging.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.declaration_count = 0
        self.parameter_count = 0
        self.failure_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = perf_counter()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = perf_counter() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = perf_counter() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    @contextmanager
    def track_declaration(self, declaration: str) -> Iterator[None]:
        """
        Track expansion of a single declaration.

        Args:
            declaration: Declaration text being expanded

        Yields:
            None
        """
        self.declaration_count += 1
        started = perf_counter()
        initial_parameter_count = self.parameter_count

        self.logger.debug(f"Expanding declaration #{self.declaration_count}: {declaration!r}")

        try:
            yield
            elapsed = perf_counter() - started
            parameters = self.parameter_count - initial_parameter_count
            self.logger.debug(
                f"Declaration #{self.declaration_count} completed in {elapsed * 1000:.2f}ms "
                f"({parameters} parameters)"
            )
        except Exception as e:
            self.failure_count += 1
            elapsed = perf_counter() - started
            self.logger.error(
                f"Declaration #{self.declaration_count} failed after {elapsed * 1000:.2f}ms: {e}"
            )
            raise

    def count_parameters(self, count: int) -> None:
        """Add classified parameters to the running total."""
        self.parameter_count += count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = perf_counter() - self.start_time
        rate = self.declaration_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Expansion complete: {self.declaration_count} declarations, "
            f"{self.parameter_count} parameters, {self.failure_count} failed "
            f"in {total_time:.3f}s ({rate:.1f} declarations/s)"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " -> ".join(op[0] for op in self.operation_stack)

    def log_memory_usage(self) -> None:
        """Log current resident memory of this process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

