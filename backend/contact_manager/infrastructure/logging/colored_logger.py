"""Colored pipeline logger — ANSI-colored console logging for the CSV import pipeline.

Provides a PipelineLogger with color-coded output per pipeline stage,
making it easy to visually trace an import in the terminal.

Color scheme:
    🟢 Green   — Upload / Complete
    🟡 Yellow  — Parsing
    🔵 Blue    — Validation
    🟣 Magenta — Persistence
    🔴 Red     — Errors
    ⚪ Gray    — Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    WHITE = "\033[97m"
    GRAY = "\033[90m"


# ── Pipeline Stage Definitions ───────────────────────────────────────

class PipelineStage:
    """Predefined import stages with colors and icons."""

    UPLOAD = ("UPLOAD", _Colors.GREEN, "📁")
    PARSE = ("PARSE", _Colors.YELLOW, "📄")
    VALIDATE = ("VALIDATE", _Colors.BLUE, "🔎")
    PERSIST = ("PERSIST", _Colors.MAGENTA, "💾")
    PIPELINE = ("PIPELINE", _Colors.WHITE, "⚙️")
    ERROR = ("ERROR", _Colors.RED, "❌")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


# ── PipelineLogger ───────────────────────────────────────────────────

class PipelineLogger:
    """Color-coded logger for the CSV import pipeline.

    Usage:
        log = PipelineLogger("CsvImportService")
        log.step_start(PipelineStage.UPLOAD, "Received contacts.csv")
        log.detail("Parsed 12 data rows")
        log.step_complete(PipelineStage.COMPLETE, "Imported 12 contacts")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)
        self._component = component_name

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the start of a pipeline step with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the successful completion of a pipeline step."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a pipeline step error in red."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        if kwargs:
            formatted += f" {_Colors.DIM}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def separator(self, title: str = "") -> None:
        """Log a visual separator line."""
        if title:
            self._logger.info(
                f"{_Colors.GRAY}{'─' * 10} {title} {'─' * max(0, 50 - len(title))}{_Colors.RESET}"
            )
        else:
            self._logger.info(f"{_Colors.GRAY}{'─' * 60}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(PipelineStage.PARSE, "Parsing contacts.csv"):
                records = reader.read(content)
        """
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())
