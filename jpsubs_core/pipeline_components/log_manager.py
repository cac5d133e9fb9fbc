# jpsubs_core/pipeline_components/log_manager.py
"""
Log management component.

One log file per normalized subtitle file. The file holds a header naming the
input, every progress line the normalizer emits, and a closing per-pass table
built from the run's OperationRecords.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from ..subtitles.data import OperationResult


class LogManager:
    """Manages logging setup and cleanup for normalization jobs."""

    @staticmethod
    def setup_job_log(
        input_path: Path, log_dir: Path, console_callback: Callable[[str], None]
    ) -> tuple[logging.Logger, logging.FileHandler, Callable[[str], None]]:
        """
        Sets up logging for one subtitle file.

        Args:
            input_path: Subtitle file being normalized (its stem names the log)
            log_dir: Directory where the log file will be created
            console_callback: Callback that shows progress lines to the user

        Returns:
            Tuple of (logger, handler, log_to_all_function)
            - logger: Logger writing only to this job's file
            - handler: File handler (needed for cleanup)
            - log_to_all: Function to log to both file and console
        """
        input_path = Path(input_path)
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger = logging.getLogger(f"jpsubs_job_{input_path.stem}")
        logger.setLevel(logging.INFO)

        # Remove any existing handlers
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        handler = logging.FileHandler(log_dir / f"{input_path.stem}.log", mode="w", encoding="utf-8")
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False

        logger.info(f"Input: {input_path}")

        def log_to_all(message: str):
            logger.info(message.strip())
            console_callback(message)

        return logger, handler, log_to_all

    @staticmethod
    def log_result(
        logger: logging.Logger, result: OperationResult, output_path: Optional[Path] = None
    ):
        """
        Writes the per-pass table and the outcome to the job log file only.

        Each row is: pass name, lines affected, dialogue lines before -> after.
        """
        records = result.details.get("records", [])
        if records:
            logger.info("--- Pass Summary ---")
            for record in records:
                logger.info(
                    f"{record['operation']:<24}{record['events_affected']:>6}"
                    f"   {record['events_before']} -> {record['events_after']}"
                )
        if not result.success:
            logger.info(f"Not processed: {result.error}")
        elif output_path is not None:
            logger.info(f"Output: {output_path}")

    @staticmethod
    def cleanup_log(logger: logging.Logger, handler: logging.FileHandler):
        """
        Cleans up logger and handler resources.

        Args:
            logger: Logger instance to clean up
            handler: File handler to close
        """
        handler.close()
        logger.removeHandler(handler)
