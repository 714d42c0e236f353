#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for the orgwriter renderer.

The CLI reads a document tree serialized as JSON (see
:mod:`orgwriter.ast.serialization`), renders it to Org source and writes the
result to a file or stdout.

Environment Variable Support
----------------------------
Every option accepts a default from an ``ORGWRITER_<OPTION_NAME>`` variable,
with the option name upper-cased and dashes replaced by underscores. Command
line arguments always override environment variables, and both override
values from a configuration file.

Examples
--------
Render a tree to stdout::

    $ orgwriter tree.json

Read from stdin and write to a file::

    $ parse-org notes.org | orgwriter - --out notes.org

Use a wider tag column::

    $ orgwriter tree.json --tags-column 100

Use environment variables for defaults::

    $ export ORGWRITER_TAGS_COLUMN=70
    $ orgwriter tree.json

"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from orgwriter import __version__
from orgwriter.ast import Document, json_to_ast
from orgwriter.cli.config import load_config_with_priority, renderer_section
from orgwriter.cli.output import print_error, print_rendered, should_use_rich_output
from orgwriter.constants import CONFIG_ENV_VAR, ENV_VAR_PREFIX
from orgwriter.exceptions import OrgWriterError, OutputWriteError, ParsingError, RenderingError, ValidationError
from orgwriter.logging_utils import LOG_LEVEL_NAMES, configure_logging
from orgwriter.options.org import OrgRendererOptions
from orgwriter.renderers.org import OrgRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

_TRUE_VALUES = ("true", "1", "yes", "on")

__all__ = [
    "main",
    "create_parser",
    "apply_env_vars_to_parser",
    "build_options",
    "get_exit_code_for_exception",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
    "EXIT_RENDERING_ERROR",
]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``orgwriter`` command."""
    parser = argparse.ArgumentParser(
        prog="orgwriter",
        description="Render a JSON-serialized Org document tree back to Org source.",
        epilog=f"Options also read defaults from {ENV_VAR_PREFIX}<OPTION> environment variables.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON AST file to render; '-' or omitted reads stdin",
    )
    parser.add_argument("--out", "-o", help="Write Org output to this file instead of stdout")

    render_group = parser.add_argument_group("rendering options")
    render_group.add_argument(
        "--tags-column",
        type=int,
        default=None,
        help="Column at which trailing headline tags are right-aligned (default: 77)",
    )
    render_group.add_argument(
        "--indent",
        dest="base_indent",
        default=None,
        help="Whitespace prefix applied to the top-level render (default: none)",
    )

    parser.add_argument("--config", help="Load renderer options from this JSON, TOML or YAML file")
    parser.add_argument("--rich", action="store_true", help="Frame terminal output with Rich (requires rich)")
    parser.add_argument("--force-rich", action="store_true", help=argparse.SUPPRESS)

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVEL_NAMES,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log records to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    parser.add_argument("--version", "-v", action="version", version=f"orgwriter {__version__}")
    return parser


def get_env_var_value(key: str) -> Optional[str]:
    """Return the ``ORGWRITER_``-prefixed environment value for ``key``, if set."""
    return os.environ.get(f"{ENV_VAR_PREFIX}{key.upper().replace('-', '_')}")


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Use environment variables as defaults for parser arguments.

    Invalid values are logged and ignored; the built-in default stays.

    Parameters
    ----------
    parser : argparse.ArgumentParser
        The argument parser to modify

    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue
        env_value = get_env_var_value(action.dest)
        if env_value is None:
            continue

        env_name = f"{ENV_VAR_PREFIX}{action.dest.upper()}"
        if action.type is int:
            try:
                action.default = int(env_value)
            except ValueError:
                logger.warning("Invalid integer value for %s: %s", env_name, env_value)
        elif action.choices:
            normalized = env_value.upper() if action.type is str.upper else env_value
            if normalized in action.choices:
                action.default = normalized
            else:
                logger.warning("Invalid choice for %s: %s. Choices: %s", env_name, env_value, list(action.choices))
        elif isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in _TRUE_VALUES
        else:
            action.default = env_value


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace, config: dict[str, Any]) -> OrgRendererOptions:
    """Combine config file values and command line flags into options.

    Flags (including their environment defaults) win over the config file.

    Raises
    ------
    ValidationError
        If a merged value is invalid
    argparse.ArgumentTypeError
        If the config's ``org`` section is malformed

    """
    options = OrgRendererOptions.from_mapping(renderer_section(config))
    overrides = {
        name: getattr(parsed_args, name)
        for name in ("tags_column", "base_indent")
        if getattr(parsed_args, name, None) is not None
    }
    if overrides:
        options = options.create_updated(**overrides)
    return options


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    # Check for validation errors, including malformed config files
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    # Output errors are rendering errors too, so check them first
    if isinstance(exception, (OutputWriteError, OSError, UnicodeDecodeError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    # All other errors (unexpected errors)
    return EXIT_ERROR


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _load_document(source: str) -> Document:
    tree = json_to_ast(_read_input(source))
    if not isinstance(tree, Document):
        raise ParsingError(
            f"Expected a Document at the root, got {type(tree).__name__}",
            parsing_stage="structure",
        )
    return tree


def _run(parsed_args: argparse.Namespace, use_rich: bool) -> None:
    config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
    options = build_options(parsed_args, config)

    doc = _load_document(parsed_args.input)

    logger.debug("Rendering %s with %r", parsed_args.input, options)
    renderer = OrgRenderer(options)

    if parsed_args.out:
        renderer.render(doc, parsed_args.out)
        logger.info("Wrote %s", parsed_args.out)
    else:
        title = "stdin" if parsed_args.input == "-" else parsed_args.input
        print_rendered(renderer.render_to_string(doc), title, use_rich)


def main(args: Optional[Sequence[str]] = None) -> int:
    """Run the orgwriter CLI.

    Parameters
    ----------
    args : sequence of str, optional
        Arguments to parse; ``sys.argv[1:]`` when omitted

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    apply_env_vars_to_parser(parser)
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)
    use_rich = should_use_rich_output(parsed_args)

    try:
        _run(parsed_args, use_rich)
    except Exception as e:
        exit_code = get_exit_code_for_exception(e)
        error_msg = str(e)
        if isinstance(e, (OSError, UnicodeDecodeError)):
            error_msg = f"Cannot read {parsed_args.input}: {e}"
        elif not isinstance(e, (OrgWriterError, argparse.ArgumentTypeError)):
            error_msg = f"Unexpected error: {e}"
            logger.debug("Unexpected error", exc_info=True)
        print_error(error_msg, use_rich)
        return exit_code

    return EXIT_SUCCESS
