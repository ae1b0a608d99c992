"""Colored pipeline logger — ANSI-colored console logging for document ingestion.

Gives each stage of the upload → chunk → embed → retrieve flow its own color
so a single upload can be followed through the terminal output.

Color scheme:
    🟢 Green   — Upload / Complete
    🟡 Yellow  — Text Extraction
    🔵 Blue    — Chunking
    🟣 Magenta — Embedding
    🟠 Cyan    — Retrieval
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


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
    CYAN = "\033[96m"
    GRAY = "\033[90m"


Stage = tuple[str, str, str]


class PipelineStage:
    """Ingestion and retrieval stages with colors and icons."""

    UPLOAD: Stage = ("UPLOAD", _Colors.GREEN, "📁")
    TEXT_EXTRACTION: Stage = ("TEXT_EXTRACT", _Colors.YELLOW, "📄")
    CHUNKING: Stage = ("CHUNK", _Colors.BLUE, "✂️")
    EMBEDDING: Stage = ("EMBED", _Colors.MAGENTA, "🧮")
    RETRIEVAL: Stage = ("RETRIEVE", _Colors.CYAN, "🔎")
    ERROR: Stage = ("ERROR", _Colors.RED, "❌")
    COMPLETE: Stage = ("COMPLETE", _Colors.GREEN, "✅")


def _format_fields(fields: dict[str, Any], color: str = _Colors.GRAY) -> str:
    if not fields:
        return ""
    details = " | ".join(f"{k}={v}" for k, v in fields.items())
    return f" {color}({details}){_Colors.RESET}"


class PipelineLogger:
    """Color-coded logger for the ingestion pipeline.

    Usage:
        plog = PipelineLogger("DocumentIngestionService")
        plog.step_start(PipelineStage.UPLOAD, "Received notes.pdf", size_bytes=2048)
        plog.step_complete(PipelineStage.CHUNKING, "Split text", chunks=12)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}{_format_fields(fields)}"
        )

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        label, color, icon = stage
        self._logger.info(
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}{_format_fields(fields)}"
        )

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error is not None:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **fields: Any) -> None:
        self._logger.info(
            f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
            f"{_format_fields(fields, _Colors.DIM)}"
        )

    def separator(self, title: str = "") -> None:
        if title:
            line = f"{'─' * 10} {title} {'─' * max(0, 50 - len(title))}"
        else:
            line = "─" * 60
        self._logger.info(f"{_Colors.GRAY}{line}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any):
        """Log start and end of a block with its elapsed time.

        Usage:
            with plog.timed_step(PipelineStage.EMBEDDING, "Embedding chunks"):
                vectors = await service.embed_texts(chunks)
        """
        self.step_start(stage, message, **fields)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s")
