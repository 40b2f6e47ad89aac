"""Command-line interface for productsync."""

from __future__ import annotations

import logging as logging

from productsync import ProductSync as ProductSync
from productsync import load_config as load_config
from productsync.cli.app import main as main
from productsync.cli.commands import sync as sync_command
from productsync.cli.parser import build_parser as build_parser

_format_summary = sync_command.format_sync_summary
_run_sync = sync_command.run_sync
