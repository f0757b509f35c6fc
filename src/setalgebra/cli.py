"""
SetAlgebra Command-Line Interface.

Provides commands to check and run set-algebra scripts.

Usage:
    setalgebra run input.in         # Execute a script
    setalgebra run -                # Read the script from stdin
    setalgebra check input.in       # Parse only
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from setalgebra import __version__
from setalgebra.script.reader import Script, read_script
from setalgebra.script.runner import ScriptRunner
from setalgebra.utils.errors import SetAlgebraError

logger = logging.getLogger("setalgebra")


# =============================================================================
# ANSI Color Codes for Terminal Output
# =============================================================================


class Colors:
    """ANSI escape codes for colored terminal output."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BOLD = "\033[1m"
    RESET = "\033[0m"

    @classmethod
    def disable(cls) -> None:
        """Disable all colors (for non-TTY output)."""
        cls.RED = ""
        cls.GREEN = ""
        cls.YELLOW = ""
        cls.BOLD = ""
        cls.RESET = ""


def _init_colors(no_color: bool = False) -> None:
    """Initialize colors based on terminal capabilities."""
    if no_color or not sys.stdout.isatty() or os.environ.get("NO_COLOR"):
        Colors.disable()


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.setLevel(getattr(logging, level_name.upper()))


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="setalgebra",
        description="SetAlgebra - named sets and set algebra from plain-text scripts",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="warning",
        help="Logging level (default: warning)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Run command
    run_parser = subparsers.add_parser(
        "run",
        aliases=["r"],
        help="Execute a set-algebra script",
    )
    run_parser.add_argument(
        "input",
        type=Path,
        help="Script file ('-' reads from stdin)",
    )

    # Check command
    check_parser = subparsers.add_parser(
        "check",
        help="Parse a script without executing it",
    )
    check_parser.add_argument(
        "input",
        type=Path,
        help="Script file ('-' reads from stdin)",
    )

    return parser


def _load_script(input_path: Path) -> Optional[Script]:
    """Read and parse a script, printing an error and returning None on failure."""
    if str(input_path) == "-":
        return read_script(sys.stdin.read(), "<stdin>")

    if not input_path.exists():
        print(f"{Colors.RED}Error:{Colors.RESET} File not found: {input_path}", file=sys.stderr)
        return None

    source = input_path.read_text(encoding="utf-8")
    return read_script(source, str(input_path))


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the run command."""
    try:
        script = _load_script(args.input)
        if script is None:
            return 1

        result = ScriptRunner().run(script)
        return 0 if result.ok else 1

    except SetAlgebraError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} Cannot open file: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"{Colors.RED}Internal error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handle the check command."""
    try:
        script = _load_script(args.input)
        if script is None:
            return 1

        print(
            f"{Colors.GREEN}OK:{Colors.RESET} {script.filename} "
            f"({len(script.definitions)} sets, {len(script.commands)} commands)"
        )
        return 0

    except SetAlgebraError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"{Colors.RED}Error:{Colors.RESET} Cannot open file: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"{Colors.RED}Internal error:{Colors.RESET} {e}", file=sys.stderr)
        return 1


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    _init_colors(args.no_color)
    _configure_logging(args.log_level)

    if args.command is None:
        parser.print_help()
        return 0

    command_handlers = {
        "run": cmd_run,
        "r": cmd_run,
        "check": cmd_check,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
