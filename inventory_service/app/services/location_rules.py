import re
from typing import Optional

from shared.core.config import settings

RACK_PATTERN = re.compile(r"^[A-Za-z][0-9]{1,2}$")
BIN_PATTERN = re.compile(r"^(0[1-9]|[1-9][0-9])$")


def check_rack(rack: Optional[str]) -> str:
    """Return the trimmed rack or raise ValueError if it is outside the vocabulary."""
    value = (rack or "").strip()
    if not value:
        raise ValueError("Rack is required")
    if not RACK_PATTERN.match(value):
        raise ValueError("Rack must be a letter followed by a number, e.g. A1")
    allowed = settings.allowed_racks
    if allowed and value.upper() not in allowed:
        raise ValueError(f"Unknown rack {value}")
    return value


def check_bin(bin_code: Optional[str]) -> str:
    value = (bin_code or "").strip()
    if not value:
        raise ValueError("Bin is required")
    if not BIN_PATTERN.match(value):
        raise ValueError("Bin must be a two-digit code from 01 to 99")
    allowed = settings.allowed_bins
    if allowed and value not in allowed:
        raise ValueError(f"Unknown bin {value}")
    return value


def same_location(rack_a: str, bin_a: str, rack_b: str, bin_b: str) -> bool:
    return (
        rack_a.strip().casefold() == rack_b.strip().casefold()
        and bin_a.strip().casefold() == bin_b.strip().casefold()
    )


def bin_location(rack: str, bin_code: str) -> str:
    return f"{rack}-{bin_code}"
