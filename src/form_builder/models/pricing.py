"""Pricing breakdown models."""

from pydantic import BaseModel, Field

from form_builder.models.schema import OptionPriceType


class AdditionalCharge(BaseModel):
    """A charge contributed by one selected option."""

    field_name: str
    label: str
    option: str
    charge: float = Field(..., description="Amount added to the base price")
    type: OptionPriceType = "fixed"


class FormPricingCalculation(BaseModel):
    """Base price plus the charges derived from the selected options."""

    base_price: float = 0.0
    additional_charges: list[AdditionalCharge] = Field(default_factory=list)
    total_price: float = 0.0

    @property
    def additional_total(self) -> float:
        return sum((charge.charge for charge in self.additional_charges), 0.0)
