"""
Entry point of the plotting engine: description text in, ParseResult out.

    >>> result = parse("N90E 300; S00E 400; N36.52.12W 500")
    >>> result.is_closed, round(result.area_sq_ft, -2)
    (True, 60000.0)

Every recoverable problem lands in ``ParseResult.errors``; nothing is raised to the
caller.
"""
import logging
from typing import Optional

from parcelplot.core.config import settings
from parcelplot.schemas.geometry import Coordinate
from parcelplot.schemas.parsing import ParseResult
from parcelplot.services.closure import suggest_closing_call, validate_closure
from parcelplot.services.measure import calculate_area, calculate_perimeter
from parcelplot.services.parsing import extract_calls, normalize_description
from parcelplot.services.plotting import plot_calls
from parcelplot.services.plss import extract_plss_reference

logger = logging.getLogger(__name__)

NO_CALLS_ERROR = "no valid metes and bounds calls found in the description"


def default_start() -> Coordinate:
    return Coordinate(lat=settings.default_start_lat, lng=settings.default_start_lng)


def parse(description: str, start_point: Optional[Coordinate] = None) -> ParseResult:
    start = start_point if start_point is not None else default_start()
    try:
        return _parse(description or "", start)
    except Exception as e:
        logger.exception("Failed to plot description")
        return ParseResult(errors=[f"internal error: {e}"])


def _parse(description: str, start: Coordinate) -> ParseResult:
    plss_reference, prefix = extract_plss_reference(description)
    normalized = normalize_description(description, prefix)

    calls, errors = extract_calls(normalized)
    logger.debug("Classified %d call(s), %d unparseable line(s)", len(calls), len(errors))

    if not calls:
        return ParseResult(
            errors=[*errors, NO_CALLS_ERROR],
            plss_reference=plss_reference,
        )

    coordinates, segments = plot_calls(calls, start)

    is_closed, closure_errors = validate_closure(coordinates)
    errors.extend(closure_errors)

    closing = None
    if not is_closed and len(coordinates) >= 2:
        closing = suggest_closing_call(coordinates)

    return ParseResult(
        coordinates=coordinates,
        segments=segments,
        is_valid=not errors,
        is_closed=is_closed,
        area_sq_ft=calculate_area(coordinates),
        perimeter_ft=calculate_perimeter(coordinates),
        errors=errors,
        closing_suggestion=closing,
        plss_reference=plss_reference,
    )
