"""Loading dial configuration from JSON files and command-line flags."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Union

import argparse
import logging

from ._version import get_version
from .models import ConfigurationError, DialConfig

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_config(path: Optional[Union[str, PathLike[str]]] = None) -> DialConfig:
    """Read a :class:`DialConfig` from ``path``.

    ``None`` or a missing file yields the defaults; unreadable or malformed
    content raises :class:`ConfigurationError`.
    """
    if path is None:
        return DialConfig()
    p = Path(path)
    if not p.exists():
        logger.info("No configuration at %s, using defaults", p)
        return DialConfig()
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration {p}: {exc}") from exc
    cfg = DialConfig.from_json(text)
    logger.info("Loaded configuration from %s", p)
    return cfg


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dial-sweep",
        description="Multi-position dial with an animated marker sweep.",
    )
    parser.add_argument("--config", type=Path, help="JSON configuration file")
    parser.add_argument(
        "--selections", type=int, help="number of dial positions (default 12)"
    )
    parser.add_argument(
        "--duration-ms", type=int, help="sweep duration in milliseconds"
    )
    parser.add_argument(
        "--diagnostics",
        action="store_true",
        default=None,
        help="draw debug outlines around the arcs",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default="WARNING", help="log verbosity"
    )
    parser.add_argument("--version", action="version", version=get_version())
    return parser


def config_from_args(args: argparse.Namespace) -> DialConfig:
    """Merge parsed flags over the configuration file (flags win)."""
    cfg = load_config(args.config)
    changes = {}
    if args.selections is not None:
        changes["selection_count"] = args.selections
    if args.duration_ms is not None:
        changes["duration_ms"] = args.duration_ms
    if args.diagnostics is not None:
        changes["diagnostics"] = bool(args.diagnostics)
    return cfg.replace(**changes) if changes else cfg


__all__ = [
    "load_config",
    "build_arg_parser",
    "config_from_args",
]
