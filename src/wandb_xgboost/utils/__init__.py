"""Utilities: logging and console output."""

from .logging import (
    console,
    format_time,
    get_logger,
    print_best,
    print_eval_round,
    print_header,
    print_options,
    setup_logging,
)

__all__ = [
    "console", "setup_logging", "get_logger",
    "print_header", "print_options", "print_eval_round", "print_best", "format_time",
]
