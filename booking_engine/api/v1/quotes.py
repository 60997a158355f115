from fastapi import APIRouter, Depends

from booking_engine.api.v1.schemas import (
    DurationSchema,
    EligibilityResponseSchema,
    QuoteRequestSchema,
    QuoteResponseSchema,
    QuoteSchema,
    SelectionsSchema,
)
from booking_engine.application.use_cases.booking_session import BookingSessionUseCase
from booking_engine.application.use_cases.quote import QuoteCalculator
from booking_engine.wiring.dependencies import get_booking_session_use_case

router = APIRouter()


@router.post("/quotes", response_model=QuoteResponseSchema)
async def create_quote(
    req: QuoteRequestSchema,
    uc: BookingSessionUseCase = Depends(get_booking_session_use_case),
):
    snapshot, draft = await uc.prepare(
        industry_id=req.industry_id,
        draft=req.draft.to_draft(),
        zipcode=req.zipcode,
        customer_facing=req.customer_facing,
    )
    calculator = QuoteCalculator(snapshot)
    return QuoteResponseSchema(
        quote=QuoteSchema.from_quote(calculator.calculate(draft)),
        duration=DurationSchema.from_adjustment(calculator.adjusted_duration(draft)),
        selections=SelectionsSchema.from_draft(draft),
        visit_dates=[d.isoformat() for d in calculator.visit_dates(draft)],
    )


@router.post("/eligibility", response_model=EligibilityResponseSchema)
async def get_eligibility(
    req: QuoteRequestSchema,
    uc: BookingSessionUseCase = Depends(get_booking_session_use_case),
):
    eligibility, draft = await uc.eligibility(
        industry_id=req.industry_id,
        draft=req.draft.to_draft(),
        zipcode=req.zipcode,
        customer_facing=req.customer_facing,
    )
    return EligibilityResponseSchema.from_eligibility(eligibility, draft)
