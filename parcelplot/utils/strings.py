import re
from typing import Optional

# Typographic variants that OCR and word processors put into deed text
_CHAR_MAP = str.maketrans({
    "′": "'",
    "’": "'",
    "‘": "'",
    "`": "'",
    "″": '"',
    "“": '"',
    "”": '"',
    "º": "°",
    "˚": "°",
    "–": "-",
    "—": "-",
})

_HSPACE_RX = re.compile(r"[ \t\f\v\xa0]+")


def norm_str(s: Optional[str]) -> Optional[str]:
    if isinstance(s, str):
        s = s.strip()
        return s or None
    return None


def norm_upper(s: Optional[str]) -> Optional[str]:
    s = norm_str(s)
    return s.upper() if s is not None else None


def fold_typography(s: str) -> str:
    return s.translate(_CHAR_MAP)


def collapse_spaces(s: str) -> str:
    """Collapse horizontal whitespace only; line breaks are kept."""
    return _HSPACE_RX.sub(" ", s)
