#!/usr/bin/env python3

"""Progress tracking for dump loading and indexing."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter

import psutil


class ProgressTracker:
    """
    Track and report timing of high-level operations.

    Provides nested operation timing, a final summary line and
    process memory reporting.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.operation_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track an operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = perf_counter()
        self.operation_stack.append((operation_name, start_time))
        self.operation_count += 1

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

    def report_summary(self, class_count: int, enum_count: int) -> None:
        """Report final indexing statistics."""
        total_time = perf_counter() - self.start_time
        self.logger.info(
            f"Indexed {class_count} classes and {enum_count} enums "
            f"in {total_time:.2f}s ({self.operation_count} operations)"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        operations = [op[0] for op in self.operation_stack]
        return " -> ".join(operations)

    def log_memory_usage(self) -> float:
        """Log and return current resident memory usage in MB."""
        process = psutil.Process()
        memory_mb: float = process.memory_info().rss / 1024 / 1024
        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")
        return memory_mb

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = perf_counter()
        self.operation_count = 0
        self.operation_stack.clear()
