"""
Data Normalization Module

Small coercion helpers shared by the provider adapters. Each takes a raw
JSON value and returns a clean Python value, or None when the input cannot be
interpreted, so a single odd field never sinks a whole record.

Usage:
    from gov_watchdog.ingestion.normalization import normalize_state, normalize_chamber

    state = normalize_state(raw.get("state"))
    chamber = normalize_chamber(term.get("chamber"))
"""
import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from gov_watchdog.models.legislator import Chamber

logger = logging.getLogger(__name__)


# ============================================================================
# State Normalization
# ============================================================================

STATE_NAME_TO_CODE = {
    "Alabama": "AL", "Alaska": "AK", "Arizona": "AZ", "Arkansas": "AR",
    "California": "CA", "Colorado": "CO", "Connecticut": "CT", "Delaware": "DE",
    "Florida": "FL", "Georgia": "GA", "Hawaii": "HI", "Idaho": "ID",
    "Illinois": "IL", "Indiana": "IN", "Iowa": "IA", "Kansas": "KS",
    "Kentucky": "KY", "Louisiana": "LA", "Maine": "ME", "Maryland": "MD",
    "Massachusetts": "MA", "Michigan": "MI", "Minnesota": "MN", "Mississippi": "MS",
    "Missouri": "MO", "Montana": "MT", "Nebraska": "NE", "Nevada": "NV",
    "New Hampshire": "NH", "New Jersey": "NJ", "New Mexico": "NM", "New York": "NY",
    "North Carolina": "NC", "North Dakota": "ND", "Ohio": "OH", "Oklahoma": "OK",
    "Oregon": "OR", "Pennsylvania": "PA", "Rhode Island": "RI", "South Carolina": "SC",
    "South Dakota": "SD", "Tennessee": "TN", "Texas": "TX", "Utah": "UT",
    "Vermont": "VT", "Virginia": "VA", "Washington": "WA", "West Virginia": "WV",
    "Wisconsin": "WI", "Wyoming": "WY",
    # Territories with delegates
    "American Samoa": "AS", "District of Columbia": "DC", "Guam": "GU",
    "Northern Mariana Islands": "MP", "Puerto Rico": "PR",
    "Virgin Islands": "VI",
}

STATE_CODE_TO_NAME = {v: k for k, v in STATE_NAME_TO_CODE.items()}


def normalize_state(state: Optional[str]) -> Optional[str]:
    """
    Normalize state to 2-letter code.

    Unrecognized values are passed through trimmed rather than dropped, so
    the provider's own text is kept when it is not a state we know.

    Examples:
        >>> normalize_state("Utah")
        'UT'
        >>> normalize_state("ut")
        'UT'
    """
    if not isinstance(state, str) or not state.strip():
        return None

    state_clean = state.strip()

    if len(state_clean) == 2 and state_clean.upper() in STATE_CODE_TO_NAME:
        return state_clean.upper()

    for full_name, code in STATE_NAME_TO_CODE.items():
        if full_name.lower() == state_clean.lower():
            return code

    return state_clean


# ============================================================================
# Chamber Normalization
# ============================================================================

CHAMBER_MAPPINGS = {
    "senate": Chamber.SENATE,
    "house": Chamber.HOUSE,
    "house of representatives": Chamber.HOUSE,
}


def normalize_chamber(chamber: Optional[str]) -> Chamber:
    """
    Normalize chamber text to the Chamber enum.

    Examples:
        >>> normalize_chamber("House of Representatives")
        <Chamber.HOUSE: 'house'>
        >>> normalize_chamber(None)
        <Chamber.UNKNOWN: 'unknown'>
    """
    if not isinstance(chamber, str):
        return Chamber.UNKNOWN
    return CHAMBER_MAPPINGS.get(chamber.strip().lower(), Chamber.UNKNOWN)


# ============================================================================
# Numbers
# ============================================================================

_INTEGER_RE = re.compile(r"[+-]?\d+")
_PLAIN_DECIMAL_RE = re.compile(r"[+-]?\d+\.\d*")


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an integer-valued field (district, year, congress).

    Returns None for anything that is not a whole number, e.g. "At-Large".
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_RE.fullmatch(value.strip()):
        return int(value.strip())
    return None


def parse_amount(value: Any) -> int:
    """
    Parse a reported dollar amount into whole currency units.

    Plain digit strings and numbers parse, with any fractional part truncated
    toward zero ("1200.5" -> 1200); anything else (including thousands
    separators such as "1,000") becomes 0.
    """
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str) and _PLAIN_DECIMAL_RE.fullmatch(value.strip()):
        return int(Decimal(value.strip()))
    parsed = parse_int(value)
    if parsed is None:
        if value not in (None, ""):
            logger.debug(f"Unparseable amount {value!r}, using 0")
        return 0
    return parsed


def parse_decimal(value: Any) -> Optional[Decimal]:
    """
    Parse a monetary value keeping the precision the provider reported.

    NaN and infinities are treated like any other unreadable amount.
    """
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        amount = Decimal(str(value).strip())
    except InvalidOperation:
        logger.debug(f"Invalid decimal {value!r}, leaving amount empty")
        return None
    if not amount.is_finite():
        logger.debug(f"Non-finite decimal {value!r}, leaving amount empty")
        return None
    return amount


def clean_text(value: Any) -> Optional[str]:
    """Return a stripped string, or None for blanks and non-scalar values."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value.strip() or None
    return None
