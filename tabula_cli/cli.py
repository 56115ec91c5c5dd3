"""Command-line interface: option table, plan construction and exit codes."""
import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from tabula_cli import __version__
from tabula_cli.backends.base import Collaborators
from tabula_cli.errors import ConfigurationError, InputError
from tabula_cli.extraction.options import build_plan
from tabula_cli.extraction.runner import run_batch
from tabula_cli.models.plan import OutputFormat
from tabula_cli.settings import configure_logging

logger = logging.getLogger(__name__)

BANNER = "Tabula helps you extract tables from PDFs"
VERSION_STRING = f"tabula-cli {__version__}"


class _ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as ConfigurationError instead of exiting with status 2."""

    def error(self, message: str):
        raise ConfigurationError(f"{message}\nTry --help for help")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="tabula", description=BANNER)
    parser.add_argument("files", nargs="*", metavar="FILE", help="PDF file to extract tables from")
    parser.add_argument("-v", "--version", action="version", version=VERSION_STRING,
                        help="Print version and exit.")
    parser.add_argument("-g", "--guess", action="store_true",
                        help="Guess the portion of the page to analyze per page.")
    parser.add_argument("-r", "--spreadsheet", action="store_true",
                        help="[Deprecated in favor of -l/--lattice] Force spreadsheet-style extraction.")
    parser.add_argument("-n", "--no-spreadsheet", action="store_true",
                        help="[Deprecated in favor of -t/--stream] Force non-spreadsheet extraction.")
    parser.add_argument("-l", "--lattice", action="store_true",
                        help="Force lattice-mode extraction (ruling lines separate each cell).")
    parser.add_argument("-t", "--stream", action="store_true",
                        help="Force stream-mode extraction (no ruling lines between cells).")
    parser.add_argument("-i", "--silent", action="store_true",
                        help="Suppress all stderr output.")
    parser.add_argument("-u", "--use-line-returns", action="store_true",
                        help="Use embedded line returns in cells.")
    parser.add_argument("-b", "--batch", metavar="DIRECTORY",
                        help="Convert all .pdfs in the provided directory.")
    parser.add_argument("-o", "--outfile", metavar="OUTFILE",
                        help="Write output to <file> instead of STDOUT. Default: -")
    parser.add_argument("-f", "--format", metavar="FORMAT",
                        help=f"Output format: ({','.join(OutputFormat.names())}). Default: CSV")
    parser.add_argument("-s", "--password", metavar="PASSWORD",
                        help="Password to decrypt document. Default is empty")
    parser.add_argument("-c", "--columns", metavar="COLUMNS",
                        help="X coordinates of column boundaries. Example --columns 10.1,20.2,30.3. "
                             "Preceded by '%%', values are percentages of the page width. "
                             "Example: --columns %%25,50,80.6")
    parser.add_argument("-a", "--area", metavar="AREA", action="append",
                        help="Portion of the page to analyze, as top,left,bottom,right in points "
                             "from the top left corner. Preceded by '%%', values are percentages "
                             "of the page height or width. Example: --area %%0,0,100,50. "
                             "Repeat for multiple areas. Default is entire page")
    parser.add_argument("-p", "--pages", metavar="PAGES",
                        help="Comma separated list of ranges, or all. Examples: --pages 1-3,5-7, "
                             "--pages 3 or --pages all. Default is --pages 1")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    stdout: Optional[TextIO] = None,
    collaborators: Optional[Collaborators] = None,
) -> int:
    """Run the tool and return the process exit code.

    0 on success, 1 on a configuration error or a failed single-file run.
    A batch run returns 0 once every file has been attempted; failed files
    are reported on stderr.
    """
    try:
        args = build_parser().parse_args(argv)
        configure_logging(silent=args.silent)
        plan = build_plan(args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        outcomes = run_batch(plan, collaborators=collaborators, stdout=stdout)
    except InputError as e:
        logger.error(str(e))
        return 1

    if not plan.is_batch and not outcomes[0].ok:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
