"""Command-line interface for the operator playground.

Runs the catalog of operator sections and shows every statement with its
result and type, the way a playground sidebar would.
"""

import logging
import os
import sys

import rich.box
import rich.console
import rich.markup
import rich.table

from . import catalog
from .playground import Playground

logger = logging.getLogger("opsem.cli")

USAGE = """\
Usage:
  opsem [options]                 - Run every section of the operator tour
  opsem [options] <section> ...   - Run only the named sections
  opsem list                      - List section names

Options:
  -v, --verbose   Debug logging
  --plain         Plain text output instead of tables"""


def setup_logging(verbose=False):
    """Set up logging configuration.

    `--verbose` means DEBUG. Otherwise the level comes from the
    OPSEM_LOG_LEVEL environment variable, defaulting to WARNING.
    """
    if verbose:
        log_level = logging.DEBUG
    else:
        name = os.environ.get("OPSEM_LOG_LEVEL", "WARNING").upper()
        log_level = logging.getLevelNamesMapping().get(name, logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
    root = logging.getLogger()
    root.handlers = []  # Remove any existing handlers
    root.addHandler(handler)
    root.setLevel(log_level)


def run_sections(names=None):
    """Evaluate sections on one shared playground.

    Args:
        names: (list[str] | None) Section names, all sections when None

    Returns:
        (list[tuple[Section, list[Result]]]) Results grouped by section
    """
    playground = Playground()
    if names:
        sections = [catalog.section(name) for name in names]
    else:
        sections = catalog.sections()

    grouped = []
    for section in sections:
        logger.debug("Running section %s (%d statements)", section.name,
                     len(section.statements))
        grouped.append((section, playground.run(section.statements)))
    return grouped


def render_rich(grouped, console=None):
    """Render results as one table per section."""
    console = console or rich.console.Console()
    for section, results in grouped:
        table = rich.table.Table(title=section.title, box=rich.box.SIMPLE,
                                 title_justify="left")
        table.add_column("Statement", style="cyan", no_wrap=True)
        table.add_column("Result")
        table.add_column("Type", style="magenta")
        for result in results:
            display = result.display
            if not result.ok:
                display = f"[red]✗ {rich.markup.escape(display)}[/red]"
            else:
                display = rich.markup.escape(display)
            table.add_row(rich.markup.escape(result.source), display, result.type_name)
        console.print(table)


def render_plain(grouped, stream=None):
    """Render results as plain text lines."""
    stream = stream or sys.stdout
    for section, results in grouped:
        print(f"# {section.title}", file=stream)
        for result in results:
            marker = "  " if result.ok else "✗ "
            suffix = f"  : {result.type_name}" if result.type_name else ""
            print(f"{marker}{result.source}  // {result.display}{suffix}", file=stream)
        print(file=stream)


def main(argv=None):
    """Main entry point for the opsem CLI."""
    args = list(sys.argv[1:] if argv is None else argv)

    if "-h" in args or "--help" in args:
        print(USAGE)
        return

    verbose = False
    for flag in ("-v", "--verbose"):
        while flag in args:
            args.remove(flag)
            verbose = True
    plain = "--plain" in args
    while "--plain" in args:
        args.remove("--plain")

    setup_logging(verbose)

    unknown = [a for a in args if a.startswith("-")]
    if unknown:
        print(f"Error: Unknown option: {unknown[0]}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        sys.exit(1)

    if args and args[0] == "list":
        for section in catalog.sections():
            print(f"{section.name:<12} {section.title}")
        return

    missing = [name for name in args if name not in catalog.names()]
    if missing:
        print(f"Error: Unknown section: {missing[0]}", file=sys.stderr)
        print(f"Available: {', '.join(catalog.names())}", file=sys.stderr)
        sys.exit(1)

    grouped = run_sections(args)
    if plain:
        render_plain(grouped)
    else:
        render_rich(grouped)


if __name__ == "__main__":
    main()
