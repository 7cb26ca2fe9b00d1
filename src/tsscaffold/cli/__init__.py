"""Command-line interface for tsscaffold."""

from __future__ import annotations

import logging as logging

from tsscaffold import Scaffolder as Scaffolder
from tsscaffold import answers_from_options as answers_from_options
from tsscaffold import load_answers as load_answers
from tsscaffold.cli.app import main as main
from tsscaffold.cli.commands import create as create_command
from tsscaffold.cli.parser import build_parser as build_parser
from tsscaffold.cli.parser import validate_args as validate_args
from tsscaffold.cli.reporter import RichReporter as RichReporter

collect_answers = create_command.collect_answers

_run_create = create_command.run_create
