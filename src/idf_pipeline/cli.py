#!/usr/bin/env python3
"""Run the IDF pipeline steps over a data directory, one dataset at a time.

usage:
  run-pipeline [-h] [-n] [-c FILE] DATA_DIR DATA_SETS STEPS
  run-pipeline ls

DATA_SETS and STEPS are 'all' or comma-separated selectors. Each selector
token is NAME, NAME- (NAME to the last), -NAME (first to NAME) or
NAME1-NAME2 (closed range). Steps always run in pipeline order, once each.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, TextIO

from idf_pipeline.core.config import ConfigError, load_config
from idf_pipeline.core.engine.engine import Engine
from idf_pipeline.core.engine.runner import ProgramRunner
from idf_pipeline.core.errors import (
    EXIT_FATAL,
    EXIT_OK,
    EXIT_USAGE,
    exception_to_error,
    format_error,
)
from idf_pipeline.core.exceptions import InvalidArgument, PipelineException
from idf_pipeline.core.pipeline.catalogue import DATASET_CATALOGUE, DatasetCatalogue
from idf_pipeline.core.pipeline.context import RunContext
from idf_pipeline.core.pipeline.registry import STEP_REGISTRY, StepRegistry
from idf_pipeline.core.pipeline.selector import select_datasets, select_steps
from idf_pipeline.core.pipeline.types import Handler, RunPlan, StepName

PROG = "run-pipeline"
LIST_COMMAND = "ls"
USAGE = (
    f"{PROG} [-h] [-n] [-c FILE] DATA_DIR DATA_SETS STEPS\n"
    f"       {PROG} {LIST_COMMAND}"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description=__doc__.split("\n\n")[0],
        epilog=f"Run '{PROG} {LIST_COMMAND}' to list the available steps and datasets.",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the steps that would run for each dataset without running them.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help="YAML/JSON file merged over the packaged defaults (commands, programs_dir, log_level).",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="DATA_DIR DATA_SETS STEPS",
        help="Data directory, dataset selector and step selector (or 'ls').",
    )
    return parser


def format_listing(
    registry: StepRegistry = STEP_REGISTRY,
    catalogue: DatasetCatalogue = DATASET_CATALOGUE,
) -> str:
    """Steps numbered from 1 in pipeline order, then every dataset once."""
    width = max((len(name) for name in registry.names()), default=0)
    lines = ["Steps:"]
    for ordinal, name, description in registry.describe_all():
        lines.append(f"  {ordinal + 1}. {name.ljust(width)}  {description}")
    lines.append("")
    lines.append("Datasets:")
    lines.extend(f"  {name}" for name in catalogue)
    return "\n".join(lines)


FLAG_OPTIONS = {"-h", "--help", "-n", "--dry-run"}
VALUE_OPTIONS = {"-c", "--config"}


def _separate_selectors(argv: Sequence[str]) -> List[str]:
    """Move positionals after "--" so selectors such as "-ams" are not read as options."""
    options: List[str] = []
    positionals: List[str] = []
    tokens = list(argv)
    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token == "--":
            positionals.extend(tokens[i + 1 :])
            break
        if token in FLAG_OPTIONS or token.startswith("--config="):
            options.append(token)
        elif token in VALUE_OPTIONS:
            options.extend(tokens[i : i + 2])
            i += 1
        else:
            positionals.append(token)
        i += 1
    return options + ["--"] + positionals


def _split_arguments(arguments: List[str]) -> List[str]:
    if len(arguments) != 3:
        raise InvalidArgument(
            message=f"Expected DATA_DIR DATA_SETS STEPS or '{LIST_COMMAND}', got {len(arguments)} argument(s)",
            details={"arguments": list(arguments)},
            hint=f"usage: {USAGE}",
        )
    return arguments


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    runner: Optional[ProgramRunner] = None,
    handlers: Optional[Mapping[StepName, Handler]] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    try:
        raw = sys.argv[1:] if argv is None else argv
        args = build_parser().parse_args(_separate_selectors(raw))
    except SystemExit as exc:
        # -h/--help (0) ou opção desconhecida (2)
        return int(exc.code or 0)

    if args.arguments == [LIST_COMMAND]:
        print(format_listing(), file=out)
        return EXIT_OK

    try:
        data_dir, datasets_selector, steps_selector = _split_arguments(args.arguments)
    except InvalidArgument as exc:
        print(format_error(exception_to_error(exc)), file=err)
        return EXIT_USAGE

    working_dir = Path(data_dir)
    if not working_dir.is_dir():
        print(f"error: data directory does not exist: {working_dir}", file=err)
        return EXIT_FATAL
    working_dir = working_dir.resolve()

    try:
        config = load_config(local_path=args.config, require_local=args.config is not None)
    except ConfigError as exc:
        print(f"error: {exc}", file=err)
        return EXIT_FATAL

    try:
        datasets = select_datasets(datasets_selector)
        steps = select_steps(steps_selector)
    except PipelineException as exc:
        print(format_error(exception_to_error(exc)), file=err)
        return EXIT_USAGE

    ctx = RunContext.create(config, data_dir=str(working_dir), dry_run=args.dry_run)
    ctx.stream = err

    if not datasets or not steps:
        ctx.add_warning(step_id="selection", message="nothing selected; no step will run")

    plan = RunPlan(
        working_dir=working_dir,
        datasets=tuple(datasets),
        steps=tuple(steps),
        dry_run=args.dry_run,
    )
    result = Engine(plan=plan, ctx=ctx, runner=runner, handlers=handlers, out=out, err=err).run()
    return result.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
