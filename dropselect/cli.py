"""Command-line front door for dropselect.

Parses option specs and flags, builds the initial selection, and either
renders the control once or runs the interactive terminal session.
"""

from __future__ import annotations

import argparse
import json
import logging
import shutil
import sys
from pathlib import Path

from .controller import SelectionController, SelectionValue
from .options import Option, duplicate_options, find_option, parse_option_lines, parse_option_spec
from .render import render_select_text
from .runtime import run_select
from .runtime.config import load_default_multiple, load_theme_name, save_default_multiple, save_theme_name
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

ABORT_EXIT_STATUS = 130


def _option_spec(value: str) -> Option:
    """argparse type for ``label`` / ``label=value`` option specs."""
    try:
        return parse_option_spec(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default render width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _option_as_json(option: Option) -> dict[str, object]:
    return {"label": option.label, "value": option.value}


def format_selection(selection: SelectionValue, *, as_json: bool = False) -> str:
    """Format a committed selection for stdout.

    Plain output is one value per line (empty for no selection); JSON output
    is an object, a list of objects, or ``null``.
    """
    if as_json:
        if selection is None:
            payload: object = None
        elif isinstance(selection, Option):
            payload = _option_as_json(selection)
        else:
            payload = [_option_as_json(option) for option in selection]
        return json.dumps(payload) + "\n"
    if selection is None:
        return ""
    if isinstance(selection, Option):
        return f"{selection.value}\n"
    return "".join(f"{option.value}\n" for option in selection)


def _load_options(args: argparse.Namespace) -> list[Option]:
    options: list[Option] = list(args.options)
    if args.file is not None:
        path = Path(args.file)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SystemExit(f"Cannot read options file: {path} ({exc.strerror})") from exc
        try:
            options.extend(parse_option_lines(text.splitlines()))
        except ValueError as exc:
            raise SystemExit(f"Invalid options file {path}: {exc}") from exc
    if not options:
        raise SystemExit("At least one option is required.")
    repeated = duplicate_options(options)
    if repeated:
        raise SystemExit(f"Duplicate option: {repeated[0].label}={repeated[0].value}")
    return options


def _initial_selection(options: list[Option], values: list[str], multiple: bool) -> Option | tuple[Option, ...] | None:
    picked: list[Option] = []
    for needle in values:
        option = find_option(options, needle)
        if option is None:
            raise SystemExit(f"Unknown initial value: {needle}")
        if option not in picked:
            picked.append(option)
    if multiple:
        return tuple(picked)
    if len(picked) > 1:
        raise SystemExit("Only one --value is allowed without --multiple.")
    return picked[0] if picked else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dropselect",
        description="Pick one or more options from a dropdown in the terminal.",
    )
    parser.add_argument(
        "options",
        nargs="*",
        type=_option_spec,
        metavar="OPTION",
        help="Option as LABEL or LABEL=VALUE.",
    )
    parser.add_argument(
        "-m",
        "--multiple",
        action="store_true",
        default=None,
        help="Allow selecting several options (default from config).",
    )
    parser.add_argument(
        "--single",
        dest="multiple",
        action="store_false",
        default=None,
        help="Select at most one option, overriding the config default.",
    )
    parser.add_argument(
        "--value",
        action="append",
        default=[],
        metavar="LABEL_OR_VALUE",
        help="Initially selected option; repeatable with --multiple.",
    )
    parser.add_argument("--file", metavar="PATH", help="Read option specs from PATH, one per line.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Persist --theme as the default theme.")
    parser.add_argument(
        "--save-default-multiple",
        action="store_true",
        help="Persist the current --multiple/--single mode as the default.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--json", action="store_true", help="Print the selection as JSON.")
    parser.add_argument("--render", action="store_true", help="Render the control once and exit.")
    parser.add_argument("--open", action="store_true", help="Show the option list from the start.")
    parser.add_argument(
        "--max-cols",
        type=_positive_int,
        default=None,
        help="Column width for --render output (default: terminal width).",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write debug logging to PATH.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run a render or an interactive session.

    Accepting prints the selection to stdout. Aborting exits with status 130
    and prints nothing.
    """
    args = build_parser().parse_args(argv)

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    options = _load_options(args)
    multiple = args.multiple if args.multiple is not None else load_default_multiple()
    initial = _initial_selection(options, args.value, multiple)
    theme_name = args.theme if args.theme is not None else load_theme_name()

    if args.save_theme:
        if args.theme is None:
            raise SystemExit("--save-theme requires --theme.")
        save_theme_name(args.theme)
    if args.save_default_multiple:
        save_default_multiple(multiple)

    if args.render:
        if multiple:
            controller = SelectionController.multiple(options, lambda _value: None, initial or ())
        else:
            controller = SelectionController.single(options, lambda _value: None, initial)
        if args.open:
            controller.open()
        max_cols = args.max_cols if args.max_cols is not None else _default_render_width()
        theme = resolve_theme(theme_name, no_color=args.no_color)
        sys.stdout.write(render_select_text(controller, theme, max_cols))
        return

    result = run_select(
        options,
        multiple=multiple,
        initial=initial,
        theme_name=theme_name,
        no_color=args.no_color,
        start_open=args.open,
    )
    logger.debug(
        "session %s after %d committed change(s)",
        "accepted" if result.accepted else "aborted",
        result.changes,
    )
    if not result.accepted:
        raise SystemExit(ABORT_EXIT_STATUS)
    sys.stdout.write(format_selection(result.selection, as_json=args.json))


if __name__ == "__main__":
    main()
