"""Command-line interface for rustci."""

from __future__ import annotations

import logging as logging

from rustci import check_workflow as check_workflow
from rustci import generate as generate
from rustci.cli.app import main as main
from rustci.cli.commands import generate as generate_command
from rustci.cli.common import make_console as make_console
from rustci.cli.common import print_error as print_error
from rustci.cli.parser import build_parser as build_parser

_format_summary = generate_command.format_generate_summary
_run_generate = generate_command.run_generate
_run_check = generate_command.run_check
