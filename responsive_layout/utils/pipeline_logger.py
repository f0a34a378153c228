"""
Debug logger for layout inference runs.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis
"""

import json
import os
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for pipeline debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class PipelineLogger:
    """Centralized logger for pipeline runs with configurable levels."""

    _instance: Optional["PipelineLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()

        level_str = os.getenv("LAYOUT_DEBUG_LEVEL", "NONE").upper()
        try:
            self.level = LogLevel[level_str]
        except KeyError:
            self.level = LogLevel.NONE

        self.log_to_file = os.getenv("LAYOUT_LOG_TO_FILE", "false").lower() == "true"
        self.log_dir = Path(os.getenv("LAYOUT_LOG_DIR", "outputs"))

        self._initialized = True

    def configure(
        self,
        level: Optional[Union[LogLevel, str]] = None,
        log_to_file: Optional[bool] = None,
        log_dir: Optional[Union[str, Path]] = None,
    ):
        """Override the environment configuration."""
        if level is not None:
            self.level = level if isinstance(level, LogLevel) else LogLevel[str(level).upper()]
        if log_to_file is not None:
            self.log_to_file = log_to_file
        if log_dir is not None:
            self.log_dir = Path(log_dir)

    def _should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _truncate_content(self, content: str, max_len: int = 200) -> str:
        """Truncate content for preview."""
        if len(content) <= max_len:
            return content
        return content[:max_len] + "... [truncated]"

    def _write_to_file(self, design_id: Optional[str], log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file or not design_id:
            return

        log_file = self.log_dir / design_id / "logs" / "pipeline.jsonl"
        log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")

    def log_run_start(
        self,
        design_id: str,
        element_count: int,
        threshold: float,
    ) -> str:
        """
        Log the start of a pipeline run.

        Returns:
            Run ID (UUID string) for tracking this run, empty when disabled
        """
        if not self._should_log(LogLevel.INFO):
            return ""

        run_id = str(uuid.uuid4())
        timestamp = self._format_timestamp()
        print(
            f"[{timestamp}] 🔵 Layout run: {design_id} | "
            f"{element_count} elements | threshold {threshold:g}"
        )

        self._write_to_file(design_id, {
            "event": "run_start",
            "run_id": run_id,
            "timestamp": timestamp,
            "design_id": design_id,
            "element_count": element_count,
            "threshold": threshold,
        })
        return run_id

    def log_stage(
        self,
        run_id: str,
        design_id: str,
        stage: str,
        summary: Dict[str, Any],
        detail: Any = None,
    ):
        """Log the result of one pipeline stage."""
        if not run_id or not self._should_log(LogLevel.DEBUG):
            return

        timestamp = self._format_timestamp()
        parts = [f"{key}={value}" for key, value in summary.items()]
        print(f"[{timestamp}]   ↳ [{stage}] " + ", ".join(parts))

        log_entry = {
            "event": "stage",
            "run_id": run_id,
            "timestamp": timestamp,
            "design_id": design_id,
            "stage": stage,
            "summary": summary,
        }

        # Full artifacts only at TRACE
        if detail is not None and self.level == LogLevel.TRACE:
            text = detail if isinstance(detail, str) else json.dumps(detail, indent=2, default=str)
            for line in text.split("\n"):
                print(f"      {line}")
            log_entry["detail"] = detail

        self._write_to_file(design_id, log_entry)

    def log_run_end(
        self,
        run_id: str,
        design_id: str,
        layout_kind: str,
        start_time: float,
        end_time: float,
    ):
        """Log the completion of a pipeline run."""
        if not run_id:
            return

        latency_ms = (end_time - start_time) * 1000
        timestamp = self._format_timestamp()
        print(f"[{timestamp}] ✅ Layout run done: {design_id} | {layout_kind} | {latency_ms:.1f}ms")

        self._write_to_file(design_id, {
            "event": "run_end",
            "run_id": run_id,
            "timestamp": timestamp,
            "design_id": design_id,
            "layout_kind": layout_kind,
            "timing": {
                "latency_ms": latency_ms,
                "start_time": datetime.fromtimestamp(start_time).isoformat(),
                "end_time": datetime.fromtimestamp(end_time).isoformat(),
            },
        })

    def log_error(self, design_id: str, error: Exception):
        """Log a failed run."""
        if not self._should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(
            f"[{timestamp}] ❌ Layout error: [{design_id}] "
            f"{type(error).__name__}: {self._truncate_content(str(error))}"
        )
        self._write_to_file(design_id, {
            "event": "error",
            "timestamp": timestamp,
            "design_id": design_id,
            "error_type": type(error).__name__,
            "message": str(error),
        })


def get_logger() -> PipelineLogger:
    """Get the singleton logger instance."""
    return PipelineLogger()
