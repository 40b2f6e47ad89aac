"""Sync command."""

from __future__ import annotations

import argparse
import logging
from contextlib import ExitStack
from pathlib import Path

from productsync import CompositeFeedback, Feedback, LoggingFeedback, ProductSyncConfig, SyncResult
from productsync.cli.progress.rich import RichFeedback

_LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def format_sync_summary(result: SyncResult, config: ProductSyncConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"productsync - sync complete ({mode})",
        "",
        f"  Records:   {result.records}",
        f"  Created:   {result.created}",
        f"  Updated:   {result.updated}",
    ]
    if result.records != result.total:
        lines.append(f"  Merged:    {result.records - result.total} duplicate record(s)")
    lines.append("")
    lines.append(f"  Store:     {config.store_path}")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def _file_feedback(path: str, stack: ExitStack) -> Feedback:
    handler = logging.FileHandler(Path(path), encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    stack.callback(handler.close)

    file_logger = logging.getLogger("productsync.sync_log")
    file_logger.setLevel(logging.INFO)
    file_logger.propagate = False
    file_logger.addHandler(handler)
    stack.callback(file_logger.removeHandler, handler)
    return LoggingFeedback(file_logger)


def run_sync(args: argparse.Namespace) -> SyncResult:
    import productsync.cli as cli

    config = cli.load_config(args.config)

    with ExitStack() as stack:
        sinks: list[Feedback] = []
        if args.verbose:
            sinks.append(LoggingFeedback())
        else:
            sinks.append(stack.enter_context(RichFeedback()))
        if args.log_file:
            sinks.append(_file_feedback(args.log_file, stack))

        feedback = sinks[0] if len(sinks) == 1 else CompositeFeedback(sinks)
        ps = cli.ProductSync.from_config(config, feedback=feedback, dry_run=args.dry_run)
        result = ps.sync()

    print(cli._format_summary(result, config))
    return result


__all__ = ["format_sync_summary", "run_sync"]
