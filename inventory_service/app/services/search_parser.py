"""Search term grammar for the materials list.

Three shapes are recognised, tried in this order:

* ``rack:A1-bin:01`` exact rack and bin, case-insensitive
* ``rack:A``         rack prefix, case-insensitive
* anything else      substring of code, rack, bin or ``rack-bin``
"""
import re
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict

RACK_BIN_PATTERN = re.compile(
    r"^\s*rack:\s*(?P<rack>[^-]*?)\s*-\s*bin:\s*(?P<bin>[^-]*?)\s*(?:-.*)?$", re.IGNORECASE)
RACK_MARKER = "rack:"


class ExactRackBin(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["exact_rack_bin"] = "exact_rack_bin"
    rack: str
    bin: str


class RackPrefix(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rack_prefix"] = "rack_prefix"
    prefix: str


class FreeText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["free_text"] = "free_text"
    text: str


SearchFilter = Union[ExactRackBin, RackPrefix, FreeText]


def parse_search_term(term: Optional[str]) -> Optional[SearchFilter]:
    """Turn a raw ``search`` query value into a filter; ``None`` means no filter."""
    if term is None or not term.strip():
        return None

    match = RACK_BIN_PATTERN.match(term)
    if match:
        return ExactRackBin(
            rack=match.group("rack").strip().lower(),
            bin=match.group("bin").strip().lower(),
        )

    stripped = term.strip()
    if stripped.lower().startswith(RACK_MARKER):
        return RackPrefix(prefix=stripped[len(RACK_MARKER):].strip().lower())

    return FreeText(text=stripped)
