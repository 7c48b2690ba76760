from typing import Optional
from pydantic import Field, field_validator

from shared.core.schemas import CamelModel
from ..services.location_rules import check_bin, check_rack


class StockActionBase(CamelModel):
    material_code: str = Field(..., min_length=1, max_length=64)
    quantity: int = Field(..., gt=0, strict=True)
    rack: str
    bin: str

    @field_validator("material_code")
    @classmethod
    def code_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Material code is required")
        return value

    @field_validator("rack")
    @classmethod
    def rack_in_vocabulary(cls, value: str) -> str:
        return check_rack(value)

    @field_validator("bin")
    @classmethod
    def bin_in_vocabulary(cls, value: str) -> str:
        return check_bin(value)


class EntryRequest(StockActionBase):
    entered_by: Optional[str] = None

    @field_validator("entered_by")
    @classmethod
    def blank_actor_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() or None if value else None


class IssueRequest(StockActionBase):
    issued_by: Optional[str] = None

    @field_validator("issued_by")
    @classmethod
    def blank_actor_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value.strip() or None if value else None
