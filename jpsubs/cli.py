from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pysubs2
from pysubs2.exceptions import Pysubs2Error

from jpsubs_core.config import AppConfig
from jpsubs_core.models.settings import NormalizerSettings
from jpsubs_core.orchestrator import Normalizer
from jpsubs_core.pipeline_components import LogManager
from jpsubs_core.subtitles.rules import RuleError

EXIT_OK = 0
EXIT_NOT_PROCESSED = 1
EXIT_BAD_INPUT = 2


def default_output_path(input_path: Path, suffix: str) -> Path:
    """``episode.ass`` -> ``episode<suffix>.ass``"""
    return input_path.with_name(f"{input_path.stem}{suffix}{input_path.suffix}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jpsubs", description="Normalize Japanese TV/web subtitles")
    p.add_argument("input", type=Path, help="Subtitle file to normalize (.ass, .srt, ...)")
    p.add_argument("-o", "--output", type=Path, help="Output file (format follows its extension)")
    p.add_argument("--style", help="Style assigned to every dialogue line")
    p.add_argument("--rules-dir", type=Path, help="Directory with rule tables overriding the bundled ones")
    p.add_argument("--settings", type=Path, help="JSON settings file")
    p.add_argument("--log-dir", type=Path, help="Write a per-file log into this directory")
    p.add_argument("--verbose", action="store_true", help="Show debug output")
    return p


class SettingsFileError(Exception):
    """The file passed with --settings could not be read."""


def _load_settings(args: argparse.Namespace) -> NormalizerSettings:
    config = {}
    if args.settings:
        # Never rewrite a settings file named on the command line
        app_config = AppConfig(args.settings, autosave=False)
        if app_config.load_error:
            raise SettingsFileError(f"Could not read settings '{args.settings}': {app_config.load_error}")
        config = dict(app_config.settings)
    if args.style:
        config["default_style"] = args.style
    if args.rules_dir:
        config["rules_dir"] = str(args.rules_dir)
    if args.log_dir:
        config["logs_folder"] = str(args.log_dir)
    if args.verbose:
        config["log_compact"] = False
    return NormalizerSettings.from_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = _load_settings(args)
    except SettingsFileError as e:
        print(f"[!] {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        subs = pysubs2.load(str(args.input), encoding=settings.encoding)
    except (OSError, UnicodeDecodeError, Pysubs2Error) as e:
        print(f"[!] Could not read '{args.input}': {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        normalizer = Normalizer(settings=settings)
    except RuleError as e:
        print(f"[!] {e}", file=sys.stderr)
        return EXIT_NOT_PROCESSED

    log = print
    job_logger = job_handler = None
    if settings.logs_folder:
        job_logger, job_handler, log = LogManager.setup_job_log(
            args.input, Path(settings.logs_folder), print
        )

    try:
        result = normalizer.run(subs, log)
        output = None
        if result.success:
            output = args.output or default_output_path(args.input, settings.output_suffix)
            subs.save(str(output), encoding=settings.encoding)
            log(f"Saved {output}")
        if job_logger is not None:
            LogManager.log_result(job_logger, result, output)
        return EXIT_OK if result.success else EXIT_NOT_PROCESSED
    finally:
        if job_handler is not None:
            LogManager.cleanup_log(job_logger, job_handler)


if __name__ == "__main__":
    sys.exit(main())
