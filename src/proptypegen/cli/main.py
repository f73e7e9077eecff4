# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the PropTypeGen command-line interface."""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from proptypegen.compiler.artifact import ArtifactError, ConversionRequest, read_request, serialize, write_props
from proptypegen.compiler.convert import DEFAULT_NAMESPACE_ALIAS, convert_to_prop_types
from proptypegen.validation.checks import find_omissions
from proptypegen.workspace.config import CONFIG_FILE_NAME, ConfigError, ConversionConfig, load_config

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the PropTypeGen CLI."""
    parser = argparse.ArgumentParser(
        prog="proptypegen",
        description="PropTypeGen - compile TypeScript prop types into PropTypes validators",
    )
    parser.add_argument("--verbose", action="store_true", help="Log skipped types and properties")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # convert subcommand
    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a request document into PropTypes validators",
        description="Convert the selected type groups of a JSON request document into PropTypes.",
    )
    _add_request_arguments(convert_parser)
    convert_parser.add_argument(
        "--output",
        "-o",
        help="File to write the converted props to (default: standard output)",
    )
    convert_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when any selected property cannot be converted",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Report properties that would be dropped by conversion",
        description="List selected type groups and properties for which no validator can be generated.",
    )
    _add_request_arguments(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


@dataclass
class _Job:
    """A request with its effective settings after applying flags and config."""

    request: ConversionRequest
    namespace_alias: str
    type_names: list[str]
    strict: bool


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("request", help="JSON request document describing the type groups")
    parser.add_argument(
        "--alias",
        help=f"Local name of the React import (default: {DEFAULT_NAMESPACE_ALIAS})",
    )
    parser.add_argument(
        "--type",
        dest="type_names",
        action="append",
        metavar="NAME",
        help="Type group to convert; may be repeated (default: all groups)",
    )
    parser.add_argument(
        "--config",
        help=f"Configuration file (default: {CONFIG_FILE_NAME} next to the request, if present)",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "convert":
        return _cmd_convert(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_convert(args: argparse.Namespace) -> int:
    """Handle the convert subcommand."""
    job = _load_job(args)
    if job is None:
        return 1

    if job.strict or args.strict:
        omissions = find_omissions(job.request.types, job.type_names, job.namespace_alias)
        if omissions:
            for omission in omissions:
                print(f"Warning: {omission.message}", file=sys.stderr)
            print(f"Error: {len(omissions)} omission(s) in strict mode.", file=sys.stderr)
            return 1

    props = convert_to_prop_types(job.request.types, job.type_names, job.namespace_alias)

    if args.output:
        output = Path(args.output)
        try:
            write_props(props, output)
        except OSError as exc:
            print(f"Error: cannot write '{output}': {exc}", file=sys.stderr)
            return 1
        print(f"Wrote {len(props)} prop type(s) to '{output}'.")
    else:
        print(serialize(props))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    job = _load_job(args)
    if job is None:
        return 1

    omissions = find_omissions(job.request.types, job.type_names, job.namespace_alias)
    for omission in omissions:
        print(f"Warning: {omission.message}")
    if omissions:
        return 1

    print("No omissions found.")
    return 0


def _load_job(args: argparse.Namespace) -> _Job | None:
    """Read the request and config, printing an error and returning None on failure."""
    request_path = Path(args.request)
    try:
        request = read_request(request_path)
    except ArtifactError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return None

    config = ConversionConfig()
    config_path = Path(args.config) if args.config else request_path.parent / CONFIG_FILE_NAME
    if args.config or config_path.exists():
        try:
            config = load_config(config_path)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return None

    # Flags take precedence over the request document, which takes precedence over the config.
    namespace_alias = args.alias or request.namespace_alias or config.namespace_alias or DEFAULT_NAMESPACE_ALIAS
    type_names = args.type_names or request.type_names or config.type_names or list(request.types)

    return _Job(request=request, namespace_alias=namespace_alias, type_names=type_names, strict=config.strict)
