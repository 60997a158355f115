from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

from booking_engine.domain.entities.booking_draft import BookingDraft, CustomerInfo, ManualAdjustments
from booking_engine.domain.entities.eligibility import Eligibility
from booking_engine.domain.entities.quote import DurationAdjustment, Quote


Quantity = Annotated[int, Field(ge=1)]


class DurationUnit(str, Enum):
    hours = "Hours"
    minutes = "Minutes"


class CustomerSchema(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    zip_code: str = ""


class AdjustmentsSchema(BaseModel):
    adjust_service_total: bool = False
    adjustment_service_total_amount: str | None = None
    adjust_price: bool = False
    adjustment_amount: str | None = None
    adjust_time: bool = False
    adjusted_hours: str | None = None
    adjusted_minutes: str | None = None


class DraftSchema(BaseModel):
    customer: CustomerSchema = Field(default_factory=CustomerSchema)
    service: str = ""
    frequency: str = ""
    date: str = ""
    time: str = ""
    duration: str = ""
    duration_unit: DurationUnit = DurationUnit.hours
    variable_values: dict[str, str] = Field(default_factory=dict)
    selected_extras: list[str] = Field(default_factory=list)
    extra_quantities: dict[str, Quantity] = Field(default_factory=dict)
    is_partial_cleaning: bool = False
    selected_exclude_params: list[str] = Field(default_factory=list)
    exclude_quantities: dict[str, Quantity] = Field(default_factory=dict)
    adjustments: AdjustmentsSchema = Field(default_factory=AdjustmentsSchema)
    is_first_appointment: bool = True
    service_provider_id: str | None = None
    payment_method: str = ""
    notes: str = ""
    priority: str = "Medium"
    waiting_list: bool = False

    def to_draft(self) -> BookingDraft:
        return BookingDraft(
            customer=CustomerInfo(**self.customer.model_dump()),
            service=self.service,
            frequency=self.frequency,
            date=self.date,
            time=self.time,
            duration=self.duration,
            duration_unit=self.duration_unit.value,
            variable_values=dict(self.variable_values),
            selected_extras=tuple(dict.fromkeys(self.selected_extras)),
            extra_quantities=dict(self.extra_quantities),
            is_partial_cleaning=self.is_partial_cleaning,
            selected_exclude_params=tuple(dict.fromkeys(self.selected_exclude_params)),
            exclude_quantities=dict(self.exclude_quantities),
            adjustments=ManualAdjustments(**self.adjustments.model_dump()),
            is_first_appointment=self.is_first_appointment,
            service_provider_id=self.service_provider_id,
            payment_method=self.payment_method,
            notes=self.notes,
            priority=self.priority,
            waiting_list=self.waiting_list,
        )


class QuoteRequestSchema(BaseModel):
    industry_id: str
    draft: DraftSchema
    zipcode: str | None = None
    customer_facing: bool = True


class QuoteSchema(BaseModel):
    service_total: float
    extras_total: float
    partial_cleaning_discount: float
    frequency_discount: float
    subtotal: float
    total_discount: float
    final_amount: float
    price_source: str

    @staticmethod
    def from_quote(quote: Quote) -> "QuoteSchema":
        return QuoteSchema(
            service_total=quote.service_total,
            extras_total=quote.extras_total,
            partial_cleaning_discount=quote.partial_cleaning_discount,
            frequency_discount=quote.frequency_discount,
            subtotal=quote.subtotal,
            total_discount=quote.total_discount,
            final_amount=quote.final_amount,
            price_source=quote.price_source,
        )


class DurationSchema(BaseModel):
    duration: float
    duration_unit: str
    display_text: str | None = None
    adjusted: bool = False

    @staticmethod
    def from_adjustment(adjustment: DurationAdjustment) -> "DurationSchema":
        return DurationSchema(
            duration=adjustment.duration,
            duration_unit=adjustment.duration_unit,
            display_text=adjustment.display_text,
            adjusted=adjustment.adjusted,
        )


class SelectionsSchema(BaseModel):
    frequency: str
    variable_values: dict[str, str]
    selected_extras: list[str]
    extra_quantities: dict[str, int]
    selected_exclude_params: list[str]
    exclude_quantities: dict[str, int]

    @staticmethod
    def from_draft(draft: BookingDraft) -> "SelectionsSchema":
        return SelectionsSchema(
            frequency=draft.frequency,
            variable_values=dict(draft.variable_values),
            selected_extras=list(draft.selected_extras),
            extra_quantities=dict(draft.extra_quantities),
            selected_exclude_params=list(draft.selected_exclude_params),
            exclude_quantities=dict(draft.exclude_quantities),
        )


class QuoteResponseSchema(BaseModel):
    quote: QuoteSchema
    duration: DurationSchema
    selections: SelectionsSchema
    visit_dates: list[str] = Field(default_factory=list)


class OptionSchema(BaseModel):
    id: str
    name: str
    price: float | None = None


class EligibilityResponseSchema(BaseModel):
    service_categories: list[OptionSchema]
    frequencies: list[OptionSchema]
    extras: list[OptionSchema]
    variable_options: dict[str, list[OptionSchema]]
    exclude_parameters: list[OptionSchema]
    selections: SelectionsSchema

    @staticmethod
    def from_eligibility(eligibility: Eligibility, draft: BookingDraft) -> "EligibilityResponseSchema":
        return EligibilityResponseSchema(
            service_categories=[OptionSchema(id=c.id, name=c.name) for c in eligibility.service_categories],
            frequencies=[OptionSchema(id=f.id, name=f.name) for f in eligibility.frequencies],
            extras=[OptionSchema(id=e.id, name=e.name, price=e.price) for e in eligibility.extras],
            variable_options={
                name: [OptionSchema(id=p.id, name=p.name, price=p.price) for p in options]
                for name, options in eligibility.variable_options.items()
            },
            exclude_parameters=[
                OptionSchema(id=p.id, name=p.name, price=p.price) for p in eligibility.exclude_parameters
            ],
            selections=SelectionsSchema.from_draft(draft),
        )


class BookingRequestSchema(BaseModel):
    industry_id: str
    business_id: str | None = None
    draft: DraftSchema
    status: str = "pending"
    customer_facing: bool = True


class BookingResponseSchema(BaseModel):
    booking_id: str | None
    quote: QuoteSchema


class AvailabilityResponseSchema(BaseModel):
    business_id: str
    dates: list[str]
    available_slots: list[str]


class IndustrySchema(BaseModel):
    id: str
    name: str


class IndustriesResponseSchema(BaseModel):
    business_id: str
    industries: list[IndustrySchema]
