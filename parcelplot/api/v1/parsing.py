from fastapi import APIRouter

from parcelplot.schemas.parsing import DescriptionRequest, ExtractRequest, ExtractResponse, ParseResult
from parcelplot.services.engine import parse
from parcelplot.services.extraction import extract_boundary_text
from parcelplot.services.plss import estimate_reference_location, extract_plss_reference

router = APIRouter(prefix="/api/v1/parsing", tags=["Parsing"])


@router.post("/description", response_model=ParseResult)
def parse_description(req: DescriptionRequest):
    """
    Plot a metes-and-bounds description. Problems come back in ``errors``;
    the request itself only fails on malformed payloads.
    """
    start = req.start
    if start is None and req.use_plss_start:
        ref, _ = extract_plss_reference(req.description)
        if ref is not None:
            start = estimate_reference_location(ref)
    return parse(req.description, start)


@router.post("/extract", response_model=ExtractResponse)
def extract_description(req: ExtractRequest):
    return ExtractResponse(text=extract_boundary_text(req.text))
