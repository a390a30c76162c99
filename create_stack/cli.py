"""Command-line entry point: ``create-stack``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.prompt import Confirm

from create_stack import __version__
from create_stack.config import ProjectConfig, Settings
from create_stack.core.errors import ConfigurationError
from create_stack.create import create_project, report_failure
from create_stack.prerequisites import check_prerequisites, print_prerequisite_warnings
from create_stack.prompts import prompt_project_config
from create_stack.utils import console, print_banner, print_error, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-stack",
        description="Interactive CLI to scaffold modern web projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  create-stack\n"
            "  create-stack --config answers.json\n"
            "  create-stack --skip-checks\n"
        ),
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"create-stack v{__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Read answers from a JSON file instead of prompting",
    )
    parser.add_argument(
        "--skip-checks",
        action="store_true",
        help="Skip the Node.js / package manager / git checks",
    )
    return parser


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    args = build_parser().parse_args(argv)

    print_banner()

    try:
        settings = Settings.from_env()
        if args.config is not None:
            config = ProjectConfig.load(args.config)
        else:
            config = prompt_project_config()
        if not config.confirm:
            print_warning("\n  Maybe next time!")
            return 0

        if not (args.skip_checks or settings.skip_prerequisites):
            issues = asyncio.run(
                check_prerequisites(config.package_manager, settings.min_node_major)
            )
            if print_prerequisite_warnings(issues) and not Confirm.ask(
                "Continue anyway?", default=False, console=console
            ):
                print_warning("\n  Please fix the issues above and try again.")
                return 1
    except (KeyboardInterrupt, EOFError):
        print_error("\n  Operation cancelled")
        return 0
    except ConfigurationError as exc:
        report_failure(exc)
        return 1
    except OSError as exc:
        print_error(f"\n  Cannot read answers file: {exc}")
        return 1

    console.print()
    return asyncio.run(create_project(config, cwd=settings.output_dir))


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
