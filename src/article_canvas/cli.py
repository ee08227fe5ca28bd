"""Command-line interface for article-canvas."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from article_canvas.clients import TemplateClient
from article_canvas.exceptions import EngineError
from article_canvas.layout import PREDEFINED_TEMPLATE_TYPES, create_predefined_template, parse_layout
from article_canvas.mappers import (
    ContentMapper,
    IdContentMapper,
    PositionalContentMapper,
    set_field_value,
)
from article_canvas.workflow import get_valid_next_states, is_valid_transition
from schemas.article import ArticleState

DEFAULT_BASE_URL = "http://localhost:8080"
MAPPERS = {
    "positional": PositionalContentMapper,
    "id": IdContentMapper,
}


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text())


def _write_json(data: Any, output: Path | None) -> None:
    text = json.dumps(data, indent=2)
    if output is None:
        print(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text + "\n")


def _parse_state(value: str) -> ArticleState:
    normalized = value.strip().lower()
    for state in ArticleState:
        if state.value == normalized:
            return state
    raise argparse.ArgumentTypeError(
        f"unknown state {value!r} (choose from {', '.join(s.value for s in ArticleState)})"
    )


def _load_skeleton(args: argparse.Namespace, mapper: ContentMapper):
    template_data = _read_json(args.template)
    layout_data = template_data.get("layout", template_data) if isinstance(template_data, dict) else None
    content = _read_json(args.content) if args.content else None
    return mapper.load(parse_layout(layout_data), content)


def new_template(args: argparse.Namespace) -> int:
    """Execute the new-template command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if args.type not in PREDEFINED_TEMPLATE_TYPES:
        logger.error(
            f"Unknown template type {args.type!r}. "
            f"Choose from: {', '.join(PREDEFINED_TEMPLATE_TYPES)}"
        )
        return 1

    template = create_predefined_template(args.type)
    _write_json(template.model_dump(mode="json", exclude_none=True), args.output)

    element_count = len(parse_layout(template).elements)
    logger.info(f"Created template: {template.name}")
    logger.info(f"  Elements: {element_count}")
    if args.output is not None:
        logger.info(f"  Output: {args.output}")
    return 0


def show_skeleton(args: argparse.Namespace) -> int:
    """Execute the skeleton command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        skeleton = _load_skeleton(args, MAPPERS[args.match]())
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    _write_json([field.model_dump(mode="json") for field in skeleton], None)
    return 0


def fill_content(args: argparse.Namespace) -> int:
    """Execute the fill command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    mapper = MAPPERS[args.match]()
    try:
        skeleton = _load_skeleton(args, mapper)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read input: {e}")
        return 1

    try:
        for assignment in args.set:
            element_id, sep, value = assignment.partition("=")
            if not sep:
                logger.error(f"Expected ID=VALUE, got {assignment!r}")
                return 1
            skeleton = set_field_value(skeleton, element_id, value)
    except EngineError as e:
        logger.error(f"Failed to fill content: {e}")
        return 1

    payload = mapper.serialize(skeleton)
    _write_json(payload.to_json_dict(), args.output)
    logger.info(f"Filled {len(payload.elements)} content elements")
    return 0


def list_transitions(args: argparse.Namespace) -> int:
    """Execute the transitions command."""
    setup_logging(args.verbose)

    for state in sorted(get_valid_next_states(args.state), key=lambda s: s.value):
        print(state.value)
    return 0


def check_transition(args: argparse.Namespace) -> int:
    """Execute the check-transition command."""
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    if is_valid_transition(args.from_state, args.to_state):
        logger.info(f"{args.from_state.value} -> {args.to_state.value}: allowed")
        return 0

    logger.error(f"{args.from_state.value} -> {args.to_state.value}: not allowed")
    return 1


def pull_template(args: argparse.Namespace) -> int:
    """Execute the pull-template command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    config = {
        "base_url": args.base_url,
        "headers": {"User-Agent": "article-canvas/1.0"},
    }
    if args.token:
        config["token"] = args.token

    try:
        with TemplateClient(config) as client:
            template = client.fetch(args.id)
    except Exception as e:
        logger.error(f"Failed to fetch template {args.id}: {e}")
        return 1

    layout = parse_layout(template)
    record = template.model_dump(mode="json", exclude_none=True)
    record["layout"] = layout.to_json_dict()
    _write_json(record, args.output)

    logger.info(f"Fetched template {template.id}: {template.name}")
    logger.info(f"  Elements: {len(layout.elements)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="article-canvas",
        description="Work with article templates, content payloads and workflow states",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    new_parser = subparsers.add_parser(
        "new-template",
        help="Create a template from the predefined catalog",
        description="Write a predefined template (with fresh element ids) as JSON.",
    )
    new_parser.add_argument(
        "--type",
        type=str,
        required=True,
        help=f"Template type ({', '.join(PREDEFINED_TEMPLATE_TYPES)})",
    )
    new_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    new_parser.set_defaults(func=new_template)

    for name, func, help_text in (
        ("skeleton", show_skeleton, "Show the editable fields of a template"),
        ("fill", fill_content, "Build a content payload from a template"),
    ):
        sub = subparsers.add_parser(name, help=help_text, description=help_text + ".")
        sub.add_argument(
            "--template",
            type=Path,
            required=True,
            help="Template JSON file (a template record or a bare layout)",
        )
        sub.add_argument(
            "--content",
            type=Path,
            default=None,
            help="Existing content payload JSON to load into the fields",
        )
        sub.add_argument(
            "--match",
            choices=sorted(MAPPERS),
            default="positional",
            help="How stored content is matched to elements (default: positional)",
        )
        sub.set_defaults(func=func)
        if name == "fill":
            sub.add_argument(
                "--set",
                action="append",
                default=[],
                metavar="ID=VALUE",
                help="Set a field value; may be repeated",
            )
            sub.add_argument(
                "--output",
                type=Path,
                default=None,
                help="Output file (default: stdout)",
            )

    transitions_parser = subparsers.add_parser(
        "transitions",
        help="List the states an article can move to",
    )
    transitions_parser.add_argument("state", type=_parse_state)
    transitions_parser.set_defaults(func=list_transitions)

    check_parser = subparsers.add_parser(
        "check-transition",
        help="Check whether a state transition is allowed",
    )
    check_parser.add_argument("from_state", type=_parse_state)
    check_parser.add_argument("to_state", type=_parse_state)
    check_parser.set_defaults(func=check_transition)

    pull_parser = subparsers.add_parser(
        "pull-template",
        help="Fetch a template from the backend",
        description="Fetch a template by id and write it with a normalized layout.",
    )
    pull_parser.add_argument(
        "--id",
        type=int,
        required=True,
        help="Template id",
    )
    pull_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output file (default: stdout)",
    )
    pull_parser.add_argument(
        "--base-url",
        type=str,
        default=DEFAULT_BASE_URL,
        help=f"Backend base URL (default: {DEFAULT_BASE_URL})",
    )
    pull_parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="Bearer token for the backend",
    )
    pull_parser.set_defaults(func=pull_template)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
