"""Parse command-line values into an ExtractionPlan.

Everything here runs before any document is opened; every problem is raised
as a ConfigurationError.
"""
import argparse
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from tabula_cli.errors import ConfigurationError
from tabula_cli.models.geometry import AreaSpec, ColumnSpec, CoordinateMode, Rectangle
from tabula_cli.models.plan import ExtractionPlan, Method, OutputFormat

logger = logging.getLogger(__name__)

RELATIVE_MARKER = "%"
DEFAULT_PAGES = "1"


def parse_float_list(option: str) -> list[float]:
    """Parse ``"1.0,2.5,3.3"`` into ``[1.0, 2.5, 3.3]``."""
    values: list[float] = []
    for token in option.split(","):
        try:
            values.append(float(token))
        except ValueError:
            raise ConfigurationError(
                f"Invalid number format in: {option} (bad value {token!r})"
            ) from None
    return values


def _split_mode(option: str) -> tuple[CoordinateMode, str]:
    if option.startswith(RELATIVE_MARKER):
        return CoordinateMode.RELATIVE, option[len(RELATIVE_MARKER):]
    return CoordinateMode.ABSOLUTE, option


def parse_area(option: str) -> AreaSpec:
    """Parse ``[%]top,left,bottom,right``."""
    mode, numbers = _split_mode(option)
    values = parse_float_list(numbers)
    if len(values) != 4:
        raise ConfigurationError(
            "area parameters must be top,left,bottom,right optionally preceded by %"
        )
    top, left, bottom, right = values
    rect = Rectangle.from_bounds(top=top, left=left, bottom=bottom, right=right)
    if rect.is_inverted:
        logger.warning(
            f"Area {option} has bottom above top or right left of left; "
            f"using it as given (width={rect.width}, height={rect.height})"
        )
    return AreaSpec(mode=mode, rect=rect)


def parse_columns(option: str) -> ColumnSpec:
    """Parse ``[%]x1,x2,...``."""
    mode, numbers = _split_mode(option)
    return ColumnSpec(mode=mode, positions=tuple(parse_float_list(numbers)))


def _parse_page_number(token: str, option: str) -> int:
    try:
        page = int(token)
    except ValueError:
        raise ConfigurationError(f"Syntax error in page range specification: {option}") from None
    if page < 1:
        raise ConfigurationError(f"Page numbers must be 1 or greater: {option}")
    return page


def parse_pages(option: str) -> Optional[tuple[int, ...]]:
    """Parse ``all``, ``3`` or ``1-3,5``; ``None`` stands for every page.

    Order is kept as written and duplicates are not removed.
    """
    option = option.strip()
    if option == "all":
        return None

    pages: list[int] = []
    for part in option.split(","):
        part = part.strip()
        if "-" in part:
            start_token, _, end_token = part.partition("-")
            start = _parse_page_number(start_token, option)
            end = _parse_page_number(end_token, option)
            if end < start:
                raise ConfigurationError(f"Descending page range {part!r} in: {option}")
            pages.extend(range(start, end + 1))
        else:
            pages.append(_parse_page_number(part, option))
    return tuple(pages)


def which_method(args: argparse.Namespace) -> Method:
    """Ruling-based aliases win over flow-based ones; otherwise decide per page."""
    if args.spreadsheet or args.lattice:
        return Method.RULING
    if args.no_spreadsheet or args.stream:
        return Method.FLOW
    return Method.AUTO


def which_output_format(token: Optional[str]) -> OutputFormat:
    if token is None:
        return OutputFormat.CSV
    if token not in OutputFormat.names():
        raise ConfigurationError(
            f"format {token} is illegal. Available formats: {','.join(OutputFormat.names())}"
        )
    return OutputFormat(token)


def _which_source(args: argparse.Namespace) -> tuple[Optional[Path], Optional[Path]]:
    files = args.files or []
    if args.batch is not None:
        if files:
            raise ConfigurationError("Filename specified with batch\nTry --help for help")
        return None, Path(args.batch)

    if len(files) != 1:
        raise ConfigurationError("Need exactly one filename\nTry --help for help")
    return Path(files[0]), None


def build_plan(args: argparse.Namespace) -> ExtractionPlan:
    """Validate every option and freeze the result into an ExtractionPlan."""
    input_path, batch_dir = _which_source(args)
    output_path = Path(args.outfile) if args.outfile else None
    if batch_dir is not None and output_path is not None:
        logger.warning("--outfile is ignored in batch mode; outputs are written next to each input")
        output_path = None

    try:
        return ExtractionPlan(
            pages=parse_pages(args.pages if args.pages is not None else DEFAULT_PAGES),
            areas=tuple(parse_area(a) for a in args.area or []),
            method=which_method(args),
            guess=args.guess,
            use_line_returns=args.use_line_returns,
            columns=parse_columns(args.columns) if args.columns is not None else None,
            output_format=which_output_format(args.format),
            password=args.password,
            input_path=input_path,
            batch_dir=batch_dir,
            output_path=output_path,
        )
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
