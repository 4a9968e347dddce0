import logging
import re
from typing import Callable, Iterator, List, Optional, Tuple

from parcelplot.schemas.parsing import BearingCall, ChordBearing, CurveCall, DMSAngle
from parcelplot.services.geodesy import VALID_QUADRANT_PAIRS
from parcelplot.services.plss import extract_plss_reference
from parcelplot.utils.strings import collapse_spaces, fold_typography

logger = logging.getLogger(__name__)

# ---------------- Normalization ----------------

_DEG_WORD_RX = re.compile(r'(?<=\d)\s*(?:°|\bdeg(?:ree)?s?\b\.?)\s*(?=\d)', re.IGNORECASE)
_MIN_WORD_RX = re.compile(r"(?<=\d)\s*(?:'|\bmin(?:ute)?s?\b\.?)\s*(?=\d)", re.IGNORECASE)
_UNIT_WORD_RX = re.compile(r'\b(?:deg(?:ree)?s?|min(?:ute)?s?|sec(?:ond)?s?)\b\.?', re.IGNORECASE)
_MARKS_RX = re.compile(r'[°\'"]')
_THOUSANDS_RX = re.compile(r'(?<=\d),(?=\d{3}(?!\d))')
_CARDINAL_WORD_RX = re.compile(r'\b(north|south|east|west)\b')

# cardinal letters standing alone, i.e. not inside words such as "radius"
_DIGIT_CARDINAL_RX = re.compile(r'(?<=\d)([nsew])(?![a-z])')
_CARDINAL_DIGIT_RX = re.compile(r'(?<![a-z])([nsew])(?=\d)')
_CARDINAL_PAIR_RX = re.compile(r'(?<![a-z])([nsew])(?=[nsew](?![a-z]))')


def normalize_description(description: str, plss_prefix: Optional[str] = None) -> str:
    """
    Case-fold and re-space raw text so the call grammars match regardless of the
    author's spacing: "/SW,20,2S,19W N45°30'E 1,200'" -> "n 45.30 e 1200".
    Newlines and semicolons are kept; they separate calls.
    """
    text = description or ""
    if plss_prefix is None:
        _, plss_prefix = extract_plss_reference(text)
    if plss_prefix and text.startswith(plss_prefix):
        text = text[len(plss_prefix):]

    text = fold_typography(text)
    # 45°30'20" -> 45.30.20
    text = _DEG_WORD_RX.sub(".", text)
    text = _MIN_WORD_RX.sub(".", text)
    text = _UNIT_WORD_RX.sub(" ", text)
    text = _MARKS_RX.sub(" ", text)
    text = _THOUSANDS_RX.sub("", text)

    text = collapse_spaces(text).strip().lower()
    # "north 45.30 east" -> "n 45.30 e"
    text = _CARDINAL_WORD_RX.sub(lambda m: m.group(1)[0], text)

    text = _DIGIT_CARDINAL_RX.sub(r" \1", text)
    text = _CARDINAL_DIGIT_RX.sub(r"\1 ", text)
    text = _CARDINAL_PAIR_RX.sub(r"\1 ", text)
    return collapse_spaces(text)


# ---------------- Call grammars ----------------

_NUM = r'(?:\d+(?:\.\d+)?|\.\d+)'
_C1 = r'(?<![a-z])(?P<c1>[nsew])'
_C2 = r'(?P<c2>[nsew])(?![a-z])'
# decimal degrees (21.4233) or dotted D.M.S (21.25.24)
_ANGLE = r'\d+(?:\.\d+){0,3}'

_CURVE_CALL_RX = re.compile(r'\bcurve\s+(?:left|right)\b')
_CURVE_RX = re.compile(
    r'\bcurve\s+(?P<direction>left|right)\s+'
    rf'radius\s+(?P<radius>{_NUM})\s+'
    rf'arc\s+(?P<arc>{_NUM})\s+'
    rf'delta\s+(?P<delta>{_ANGLE})\s+'
    rf'chord\s+{_C1}\s*(?P<angle>{_ANGLE})\s*{_C2}\s*(?P<length>{_NUM})'
)
# N45.30.20E 150.5
_BEARING_DMS_RX = re.compile(
    rf'{_C1}\s*(?P<deg>\d+)\.(?P<min>\d+)\.(?P<sec>\d+(?:\.\d+)?)\s*{_C2}\s*(?P<dist>{_NUM})'
)
# N45.30E 150.5
_BEARING_DM_RX = re.compile(
    rf'{_C1}\s*(?P<deg>\d+)\.(?P<min>\d+)\s*{_C2}\s*(?P<dist>{_NUM})'
)
# N45E 150.5
_BEARING_DEG_RX = re.compile(
    rf'{_C1}\s*(?P<deg>{_NUM})\s*{_C2}\s*(?P<dist>{_NUM})'
)
# N 45 E 150.5
_BEARING_SPACED_RX = re.compile(
    rf'{_C1}\s+(?P<deg>\d+)\s+{_C2}\s+(?P<dist>{_NUM})'
)


def _quadrant_matches(rx: re.Pattern, line: str) -> Iterator[re.Match]:
    for m in rx.finditer(line):
        if (m.group("c1").upper(), m.group("c2").upper()) in VALID_QUADRANT_PAIRS:
            yield m


def parse_angle(text: str) -> float:
    """Decimal degrees ("21.4233") or dotted D.M.S ("21.25.24"), as decimal degrees."""
    parts = text.split(".")
    if len(parts) < 3:
        return float(text)
    return DMSAngle(
        degrees=float(parts[0]),
        minutes=float(parts[1]),
        seconds=float(".".join(parts[2:])),
    ).decimal


def parse_curve_call(line: str) -> Optional[CurveCall]:
    # curve left radius 606.00 arc 226.59 delta 21.2524 chord n33.4731w 225.27
    m = next(_quadrant_matches(_CURVE_RX, line), None)
    if not m:
        return None
    return CurveCall(
        direction=m.group("direction"),
        radius_ft=float(m.group("radius")),
        arc_length_ft=float(m.group("arc")),
        delta=parse_angle(m.group("delta")),
        chord=ChordBearing(
            start_cardinal=m.group("c1").upper(),
            angle=parse_angle(m.group("angle")),
            end_cardinal=m.group("c2").upper(),
        ),
        chord_length_ft=float(m.group("length")),
    )


def _bearing_parser(rx: re.Pattern) -> Callable[[str], Optional[BearingCall]]:
    def parse(line: str) -> Optional[BearingCall]:
        m = next(_quadrant_matches(rx, line), None)
        if not m:
            return None
        b = m.groupdict()
        return BearingCall(
            start_cardinal=b["c1"].upper(),
            end_cardinal=b["c2"].upper(),
            angle=DMSAngle(
                degrees=float(b["deg"]),
                minutes=float(b.get("min") or 0),
                seconds=float(b.get("sec") or 0),
            ),
            distance_ft=float(b["dist"]),
        )
    return parse


parse_bearing_dms = _bearing_parser(_BEARING_DMS_RX)
parse_bearing_dm = _bearing_parser(_BEARING_DM_RX)
parse_bearing_degrees = _bearing_parser(_BEARING_DEG_RX)
parse_bearing_spaced = _bearing_parser(_BEARING_SPACED_RX)

# Precedence: first grammar that matches wins
GRAMMARS = (
    parse_curve_call,
    parse_bearing_dms,
    parse_bearing_dm,
    parse_bearing_degrees,
    parse_bearing_spaced,
)


def classify_line(line: str):
    for grammar in GRAMMARS:
        call = grammar(line)
        if call is not None:
            return call
        if _CURVE_CALL_RX.search(line):
            # a malformed curve call must not be read as its chord bearing
            return None
    return None


def split_lines(normalized: str) -> List[str]:
    return [ln.strip() for ln in re.split(r'[;\n]', normalized) if ln.strip()]


def extract_calls(normalized: str) -> Tuple[List, List[str]]:
    """
    Classify each line of a normalized description.

    Returns (calls, errors); unparseable lines are reported by 1-based line number and
    skipped.
    """
    calls = []
    errors: List[str] = []
    for n, line in enumerate(split_lines(normalized), start=1):
        call = classify_line(line)
        if call is None:
            logger.debug("line %d did not match any call grammar: %r", n, line)
            errors.append(f"line {n}: unparseable")
            continue
        calls.append(call)
    return calls, errors
