"""Pydantic schemas mirroring the ruleset YAML document"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class RulesetDocumentModel(BaseModel):
    """Base for ruleset document nodes: camelCase keys, unknown keys rejected"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class MatchCriteriaSchema(RulesetDocumentModel):
    """One entry of a fee's `rules` list"""

    min_tx_amount: Optional[Decimal] = Field(None, ge=0)
    max_tx_amount: Optional[Decimal] = Field(None, ge=0)
    card_type: Optional[str] = None
    card_entry_mode: Optional[str] = None
    debit: Optional[bool] = None
    prepaid: Optional[bool] = None
    international: Optional[bool] = None
    opt_blue: Optional[bool] = None
    refund: Optional[bool] = None
    avs: Optional[bool] = None
    cvc: Optional[bool] = None

    @property
    def has_inverted_range(self) -> bool:
        return (
            self.min_tx_amount is not None
            and self.max_tx_amount is not None
            and self.min_tx_amount > self.max_tx_amount
        )


class FeeSchema(RulesetDocumentModel):
    """Single fee definition"""

    key: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""
    rules: List[MatchCriteriaSchema] = Field(default_factory=list)
    auth_rate: Decimal = Field(Decimal("0"), ge=0)
    tx_rate: Decimal = Field(Decimal("0"), ge=0)
    pct_rate: Decimal = Field(Decimal("0"), ge=0)

    @field_validator("rules", mode="before")
    @classmethod
    def empty_rules(cls, value):
        return [] if value is None else value


class RulesetSchema(RulesetDocumentModel):
    """Top-level ruleset document"""

    id: str
    name: str
    effective_date: str
    status: str
    fees: List[FeeSchema] = Field(default_factory=list)

    @field_validator("effective_date", mode="before")
    @classmethod
    def effective_date_as_text(cls, value):
        # YAML turns unquoted 2023-04-01 into a date
        return str(value)

    @field_validator("fees", mode="before")
    @classmethod
    def empty_fees(cls, value):
        return [] if value is None else value

    @field_validator("fees")
    @classmethod
    def unique_fee_keys(cls, fees: List[FeeSchema]) -> List[FeeSchema]:
        seen = set()
        for fee in fees:
            if fee.key in seen:
                raise ValueError(f"duplicate fee key: {fee.key}")
            seen.add(fee.key)
        return fees
