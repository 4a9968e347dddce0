import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────────────────────────────────────
# Maintain/extend these lists as you encounter new phrasing or page furniture
# ──────────────────────────────────────────────────────────────────────────────

DEFAULT_START_VARIATIONS = [
    r"beginning\s+at",
    r"begin\s+at",
    r"beg\.\s*at",
    r"commencing\s+at",
    r"starting\s+at",
]

DEFAULT_END_VARIATIONS = [
    r"(?:true\s+)?point\s+of\s+beginning",
    r"place\s+of\s+beginning",
    r"p\.\s*o\.\s*b\.",
]

PAGE_HEADER_FOOTER_PATTERNS = [
    r"^\s*page\s*\d+\s*(of\s*\d+)?\s*$",
    r"^\s*-?\s*\d+\s*-?\s*$",                     # - 2 -
    r"^\s*(?:book|o\.?\s*r\.?\s*book)\s+\d+\s*,?\s*page\s+\d+\s*$",   # Book 123 Page 45
    r"^\s*exhibit\s+[\"']?[a-z0-9]+[\"']?\s*$",
]

CONTINUATION_PATTERNS = [
    r"\(?\s*continued\s+on\s+(?:next\s+)?page\s*\d*\s*\)?",
    r"\(?\s*continued\s+from\s+(?:previous\s+)?page\s*\d*\s*\)?",
]

# If no explicit end anchor is found, stop at the first of these markers
STOP_MARKERS = [
    r"\bcontaining\b",
    r"\bsubject\s+to\b",
    r"\bless\s+and\s+except\b",
    r"\btogether\s+with\b",
]

HEADER_FOOTER_RE = re.compile("|".join(PAGE_HEADER_FOOTER_PATTERNS), re.IGNORECASE)
CONTINUATION_RE = re.compile("|".join(CONTINUATION_PATTERNS), re.IGNORECASE)
STOP_MARKERS_RE = re.compile("|".join(STOP_MARKERS), re.IGNORECASE)


def _compile_anchor_regex(variations: List[str]) -> re.Pattern:
    return re.compile(r"(?:%s)" % "|".join(variations), re.IGNORECASE | re.DOTALL)


START_RE = _compile_anchor_regex(DEFAULT_START_VARIATIONS)
END_RE = _compile_anchor_regex(DEFAULT_END_VARIATIONS)


def _dehyphenate(line: str) -> str:
    # Merge words broken at line end, e.g., "north-\nwest" -> "northwest"
    return re.sub(r"(\w)-\s*$", r"\1", line)


def strip_page_furniture(text: str) -> str:
    """
    Remove page headers/footers, page numbers, and "(continued ...)" notes.
    Also joins lines broken by end-of-line hyphenation.
    """
    cleaned: List[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if line and HEADER_FOOTER_RE.match(line):
            continue
        cleaned.append(CONTINUATION_RE.sub("", line))

    joined: List[str] = []
    for i, line in enumerate(cleaned):
        if i > 0 and cleaned[i - 1].rstrip().endswith("-") and joined:
            joined[-1] = _dehyphenate(joined[-1]) + line.lstrip()
        else:
            joined.append(line)
    return "\n".join(joined)


def slice_between_anchors(text: str, use_last_end: bool = False) -> str:
    """
    Slice from the first start anchor to the (first|last) end anchor after it, markers
    included. Without an end anchor, stop before the first STOP_MARKER, else run to EOF.
    Text without a start anchor comes back whole.
    """
    m_start = START_RE.search(text)
    if not m_start:
        logger.debug("No start anchor found, keeping the whole text")
        return text.strip()

    m_end = None
    if use_last_end:
        for _m in END_RE.finditer(text, m_start.end()):
            m_end = _m
    else:
        m_end = END_RE.search(text, m_start.end())

    if m_end:
        end_idx = m_end.end()
    else:
        m_stop = STOP_MARKERS_RE.search(text, m_start.end())
        end_idx = m_stop.start() if m_stop else len(text)

    return text[m_start.start():end_idx].strip()


def extract_boundary_text(document_text: str, use_last_end: bool = False) -> str:
    """
    Heuristic pre-filter that trims a deed or legal document down to the part most
    likely to hold the boundary calls:

    1) strip page headers/footers and continuation notes;
    2) slice between "BEGINNING AT ..." and "... POINT OF BEGINNING" (or a stop marker).

    Use ``use_last_end=True`` when a commencement description ("... to the point of
    beginning; thence ...") precedes the real boundary.
    """
    if not isinstance(document_text, str) or not document_text.strip():
        return ""
    cleaned = strip_page_furniture(document_text)
    return slice_between_anchors(cleaned, use_last_end=use_last_end)
