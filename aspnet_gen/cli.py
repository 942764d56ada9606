"""Command line interface for aspnet-gen.

Usage::

    aspnet-gen list
    aspnet-gen new mvc webTest -C ./projects
    aspnet-gen run -C ./projects/webTest mvccontroller HomeController
    aspnet-gen run dockerfile --sqlite
    aspnet-gen scenarios --parallel
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from aspnet_gen.config import GeneratorConfig
from aspnet_gen.errors import AspnetGenError
from aspnet_gen.generators.app import APPLICATION_KINDS, KIND_ALIASES
from aspnet_gen.generators.registry import GENERATORS
from aspnet_gen.harness.bootstrap import ApplicationBootstrapper
from aspnet_gen.harness.catalog import build_default_registry
from aspnet_gen.harness.invoker import GeneratorInvoker
from aspnet_gen.harness.results import print_run_summary
from aspnet_gen.harness.scenario import run_registry
from aspnet_gen.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def _parse_answers(pairs: Sequence[str]) -> dict[str, str]:
    answers: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise argparse.ArgumentTypeError(
                f"invalid answer {pair!r}. Expected KEY=VALUE syntax."
            )
        answers[key.strip()] = value
    return answers


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aspnet-gen",
        description="aspnet-gen -- ASP.NET project and file generators",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  aspnet-gen new mvc webTest\n"
            "  aspnet-gen run -C webTest mvccontroller HomeController\n"
            "  aspnet-gen run readme --txt\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="list generators and application types")

    new_parser = subparsers.add_parser("new", help="create a new application")
    new_parser.add_argument("kind", help="Application type (e.g. web, classlib)")
    new_parser.add_argument("name", help="Project name; also its directory and namespace")
    new_parser.add_argument(
        "-C", "--directory", type=Path, default=Path("."),
        help="Parent directory for the project (default: .)",
    )

    run_parser = subparsers.add_parser(
        "run", help="run a sub-generator (options go before the generator name)"
    )
    run_parser.add_argument(
        "-C", "--directory", type=Path, default=Path("."),
        help="Directory to generate into (default: .)",
    )
    run_parser.add_argument(
        "-a", "--answer", metavar="KEY=VALUE", action="append", default=[],
        help="Answer for a value the generator would prompt for",
    )
    run_parser.add_argument("generator", help="Generator name (see 'aspnet-gen list')")
    run_parser.add_argument(
        "args", nargs=argparse.REMAINDER, help="Arguments forwarded to the generator"
    )

    scenarios_parser = subparsers.add_parser(
        "scenarios", help="run the built-in generator scenarios"
    )
    scenarios_parser.add_argument(
        "--parallel", action="store_true", help="Run scenarios on a thread pool"
    )
    scenarios_parser.add_argument(
        "--keep", action="store_true", help="Keep scenario workspaces for debugging"
    )

    return parser


def _handle_list() -> int:
    print_summary_table(
        {name: cls.description for name, cls in sorted(GENERATORS.items())},
        title="Generators",
    )
    kinds = {name: kind.description for name, kind in APPLICATION_KINDS.items()}
    kinds.update({alias: f"alias for {target}" for alias, target in KIND_ALIASES.items()})
    print_summary_table(kinds, title="Application types")
    return 0


def _handle_new(args: argparse.Namespace, config: GeneratorConfig) -> int:
    bootstrapper = ApplicationBootstrapper(config)
    project = bootstrapper.bootstrap_application(args.kind, args.name, args.directory)
    print_success(f"Created {args.kind} application at {project}")
    return 0


def _handle_run(args: argparse.Namespace, config: GeneratorConfig) -> int:
    invoker = GeneratorInvoker(config, verbose=True)
    answers = _parse_answers(args.answer)
    written = invoker.invoke(args.generator, args.args, args.directory, answers)
    print_success(f"{args.generator}: {len(written)} file(s) written")
    return 0


def _handle_scenarios(args: argparse.Namespace, config: GeneratorConfig) -> int:
    if args.keep:
        config = config.model_copy(update={"keep_workspaces": True})
    summary = run_registry(build_default_registry(config), config=config, parallel=args.parallel)
    print_run_summary(summary)
    if summary.skipped:
        print_warning(f"{summary.skipped} scenario(s) pending and not run")
    return 0 if summary.all_passed else 1


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``aspnet-gen`` / ``python -m aspnet_gen.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = GeneratorConfig.from_env()

    try:
        if args.command == "list":
            code = _handle_list()
        elif args.command == "new":
            code = _handle_new(args, config)
        elif args.command == "run":
            code = _handle_run(args, config)
        else:
            code = _handle_scenarios(args, config)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
    except AspnetGenError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if code:
        console.print("[bold red]Some scenarios failed.[/bold red]")
        sys.exit(code)


if __name__ == "__main__":
    main()
