"""Rich logging and console output for boosting runs."""

import logging
from pathlib import Path
from typing import Any, Mapping, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme

from ..metrics import MetricDirection, classify

THEME = Theme({
    "split": "bold cyan", "option": "cyan", "warning": "yellow",
    "success": "bold green", "better": "green", "worse": "red", "path": "blue underline",
})

console = Console(theme=THEME)
_logging_configured = False

# Loggers that flood the console during training
QUIET_LOGGERS = ("wandb", "xgboost")


def setup_logging(level: int = logging.INFO, log_file: Optional[Path] = None, name: str = "wandb_xgboost") -> logging.Logger:
    """Attach a Rich handler (and optionally a file handler) to the package logger. Idempotent."""
    global _logging_configured

    logger = logging.getLogger(name)
    if _logging_configured:
        return logger

    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=console, level=level, show_path=False, markup=True, rich_tracebacks=True))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter("%(asctime)s | %(name)s | %(levelname)s | %(message)s"))
        logger.addHandler(file_handler)

    logger.propagate = False
    for noisy in QUIET_LOGGERS:
        logging.getLogger(noisy).setLevel(logging.WARNING)

    _logging_configured = True
    return logger


def get_logger(name: str = "wandb_xgboost") -> logging.Logger:
    """Get a logger under the package namespace.

    Nothing is configured on import: module loggers inherit whatever
    ``setup_logging`` (or the embedding application) installs.
    """
    return logging.getLogger(name)


def print_header(title: str) -> None:
    console.rule(f"[bold]{title}[/]", style="split", characters="=")


def print_options(options: Mapping[str, Any], title: str = "Callback options") -> None:
    """Two-column view of ``RunConfig.to_dict()``."""
    table = Table(title=title, show_header=False, box=None, padding=(0, 2))
    for key, value in options.items():
        table.add_row(f"[option]{key}[/]", str(value))
    console.print(table)


def print_eval_round(epoch: int, history: Mapping[str, Mapping[str, Any]]) -> None:
    """One line per split with the latest score of every metric and its change since the previous round.

    Improvement is judged by the metric's summary direction; undeclared
    metrics are shown without colour.
    """
    console.print(f"[bold]round {epoch}[/]")
    for split, metrics in history.items():
        cells = []
        for metric, scores in metrics.items():
            latest = scores[-1]
            cell = f"{metric}={latest:.5f}"
            if len(scores) > 1:
                delta = latest - scores[-2]
                direction = classify(metric)
                if direction is MetricDirection.UNDECLARED or delta == 0:
                    style = None
                else:
                    better = delta < 0 if direction is MetricDirection.MINIMIZE else delta > 0
                    style = "better" if better else "worse"
                cell += f" ([{style}]{delta:+.5f}[/])" if style else f" ({delta:+.5f})"
            cells.append(cell)
        console.print(f"  [split]{split:>8}[/]  " + "  ".join(cells))


def print_best(best_score: Optional[float], best_iteration: Optional[int], rounds: int) -> None:
    """Summary after training: best round when early stopping ran, total rounds otherwise."""
    if best_score is None:
        console.print(f"[warning]⚠[/] {rounds} rounds trained, no early stopping: best score not recorded")
        return
    console.print(f"[success]✓[/] best score {best_score:.5f} at round {best_iteration} of {rounds}")


def format_time(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    return f"{seconds/60:.1f}m" if seconds < 3600 else f"{seconds/3600:.1f}h"
