"""ABP Helper command line.

Usage::

    abphelper scaffold ./MySolution --business Order
    abphelper scaffold ./MySolution --request order.json --app-name Acme
    abphelper templates
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from abphelper.config import Config
from abphelper.host import (
    ConsoleNotifier,
    PackagesDirectoryInspector,
    RichProgressReporter,
    SolutionDirectory,
)
from abphelper.scaffolder import (
    ScaffoldError,
    ScaffoldOrchestrator,
    ScaffoldRequest,
    TemplateRenderer,
)
from abphelper.utils import console, print_error, print_summary_table


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="abphelper",
        description="ABP Helper -- scaffold application services and views",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  abphelper scaffold ./Acme --business Order\n"
            "  abphelper scaffold ./Acme --request order.json\n"
            "  abphelper templates --template-dir ./my-templates\n"
        ),
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON config file (default: ABPH_* environment variables)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    scaffold = sub.add_parser("scaffold", help="Generate service, interface and view files")
    scaffold.add_argument(
        "solution",
        nargs="?",
        default=None,
        help="Solution directory (default: config solution_dir)",
    )
    source = scaffold.add_mutually_exclusive_group(required=True)
    source.add_argument("--request", "-r", help="JSON file describing the scaffold request")
    source.add_argument("--business", "-b", help="Business name; conventional ABP names are used")
    scaffold.add_argument("--app-name", default=None, help="Override the application name")
    scaffold.add_argument("--template-dir", default=None, help="Directory with replacement templates")

    templates = sub.add_parser("templates", help="List the templates in use")
    templates.add_argument("--template-dir", default=None, help="Directory with replacement templates")
    return parser


def _load_config(args: argparse.Namespace) -> Config:
    config = Config.load(Path(args.config)) if args.config else Config.from_env()
    updates: dict[str, object] = {}
    if getattr(args, "solution", None):
        updates["solution_dir"] = Path(args.solution)
    if getattr(args, "app_name", None):
        updates["application_name"] = args.app_name
    if args.template_dir:
        updates["template_dir"] = Path(args.template_dir)
    return config.model_copy(update=updates)


def _run_scaffold(config: Config, args: argparse.Namespace) -> int:
    if not config.solution_dir.is_dir():
        print_error(f"Error: solution directory not found: {config.solution_dir}")
        return 1

    try:
        if args.request:
            request = ScaffoldRequest.load(args.request)
        else:
            request = ScaffoldRequest.from_business_name(args.business)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Error: invalid scaffold request: {exc}")
        return 1

    renderer = TemplateRenderer(config.template_dir)
    try:
        renderer.check()
    except ScaffoldError as exc:
        print_error(f"Error: {exc}")
        return 1

    orchestrator = ScaffoldOrchestrator(
        discovery=SolutionDirectory(config.solution_dir, config.application_name),
        inspector=PackagesDirectoryInspector(
            config.packages_dir_name, extra_dirs=[config.packages_path]
        ),
        progress=RichProgressReporter(),
        notifier=ConsoleNotifier(),
        renderer=renderer,
    )
    if not orchestrator.can_execute(request):
        return 1

    result = orchestrator.execute(request)
    print_summary_table(
        {
            "State": result.state.value,
            "Steps": f"{result.step}/{result.total_steps}",
            "Created": "\n".join(result.created) or "-",
            "Skipped": "\n".join(result.skipped) or "-",
        },
        title="Scaffold",
    )
    return 0 if result.success else 1


def _run_templates(config: Config) -> int:
    renderer = TemplateRenderer(config.template_dir)
    rows = {
        template_id.value: f"{path}{'' if path.is_file() else '  (missing)'}"
        for template_id, path in renderer.list_templates().items()
    }
    print_summary_table(rows, title="Templates")
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``abphelper`` / ``python -m abphelper``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, ValidationError) as exc:
        console.print(f"[bold red]Error:[/bold red] Cannot load configuration: {exc}")
        sys.exit(1)

    if args.command == "scaffold":
        code = _run_scaffold(config, args)
    else:
        code = _run_templates(config)
    sys.exit(code)


if __name__ == "__main__":
    main()
