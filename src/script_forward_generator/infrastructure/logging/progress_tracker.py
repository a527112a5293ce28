#!/usr/bin/env python3

"""Progress tracking for header parsing runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from time import perf_counter


class ProgressTracker:
    """
    Track and report header parsing progress.

    Counts visited headers, reconstructed statements and registered or
    shadowed methods so a run can be summarized in one log line.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.header_count = 0
        self.statement_count = 0
        self.registered_count = 0
        self.shadowed_count = 0
        self.header_stack: list[str] = []

    @contextmanager
    def track_header(self, path: Path) -> Iterator[None]:
        """
        Track parsing of one header file.

        Args:
            path: Header being parsed

        Yields:
            None
        """
        self.header_count += 1
        self.header_stack.append(path.name)
        started = perf_counter()
        statements_before = self.statement_count

        self.logger.debug(f"Parsing header #{self.header_count}: {path}")

        try:
            yield
            elapsed = perf_counter() - started
            self.logger.debug(
                f"Header {path.name} done in {elapsed * 1000:.1f}ms "
                f"({self.statement_count - statements_before} statements)"
            )
        except Exception as e:
            self.logger.debug(f"Header {path.name} failed: {e}")
            raise
        finally:
            self.header_stack.pop()

    def count_statement(self) -> None:
        """Increment the reconstructed statement counter."""
        self.statement_count += 1

    def count_registered(self) -> None:
        """Increment the registered method counter."""
        self.registered_count += 1

    def count_shadowed(self) -> None:
        """Increment the counter of methods dropped because a descendant declared them."""
        self.shadowed_count += 1

    def get_current_context(self) -> str:
        """
        Get the header currently being parsed.

        Returns:
            Name of the innermost header, or "idle"
        """
        if not self.header_stack:
            return "idle"
        return self.header_stack[-1]

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = perf_counter()
        self.header_count = 0
        self.statement_count = 0
        self.registered_count = 0
        self.shadowed_count = 0
        self.header_stack.clear()

    def report_summary(self) -> None:
        """Report final parsing statistics."""
        total_time = perf_counter() - self.start_time
        self.logger.info(
            f"Parsed {self.header_count} header(s), {self.statement_count} statements: "
            f"{self.registered_count} methods registered, "
            f"{self.shadowed_count} shadowed ({total_time * 1000:.1f}ms)"
        )
