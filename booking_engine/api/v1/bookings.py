from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from booking_engine.api.v1.catalog import resolve_business_id
from booking_engine.api.v1.schemas import (
    AvailabilityResponseSchema,
    BookingRequestSchema,
    BookingResponseSchema,
    QuoteSchema,
)
from booking_engine.application.exceptions import BookingSubmissionError, BookingValidationError
from booking_engine.application.ports.booking_store import BookingStorePort
from booking_engine.application.use_cases.availability import ProviderAvailabilityUseCase
from booking_engine.application.use_cases.booking_session import BookingSessionUseCase
from booking_engine.application.use_cases.submit_booking import SubmitBookingUseCase, ensure_valid
from booking_engine.wiring.dependencies import (
    get_availability_use_case,
    get_booking_session_use_case,
    get_booking_store,
)

router = APIRouter()


def _unprocessable(e: BookingValidationError) -> HTTPException:
    return HTTPException(status_code=422, detail={"message": str(e), "errors": e.errors})


@router.post("/bookings", response_model=BookingResponseSchema, status_code=201)
async def create_booking(
    req: BookingRequestSchema,
    session: BookingSessionUseCase = Depends(get_booking_session_use_case),
    store: BookingStorePort = Depends(get_booking_store),
):
    business_id = resolve_business_id(req.business_id)
    draft = req.draft.to_draft()
    # required fields never depend on the catalog, so reject before any backend read
    try:
        ensure_valid(draft)
    except BookingValidationError as e:
        raise _unprocessable(e)

    snapshot, draft = await session.prepare(
        industry_id=req.industry_id,
        draft=draft,
        zipcode=req.draft.customer.zip_code or None,
        customer_facing=req.customer_facing,
    )
    try:
        confirmation = await SubmitBookingUseCase(store=store, business_id=business_id).execute(
            draft, snapshot, status=req.status
        )
    except BookingValidationError as e:
        raise _unprocessable(e)
    except BookingSubmissionError as e:
        raise HTTPException(
            status_code=502,
            detail={"message": str(e), "error": e.error, "detail": e.detail, "hint": e.hint},
        )

    return BookingResponseSchema(
        booking_id=confirmation.booking_id,
        quote=QuoteSchema.from_quote(confirmation.quote),
    )


@router.get("/providers/availability", response_model=AvailabilityResponseSchema)
async def provider_availability(
    provider_ids: list[str] = Query(..., alias="providerId"),
    dates: list[date] = Query(..., alias="date"),
    business_id: str | None = Query(None, alias="businessId"),
    uc: ProviderAvailabilityUseCase = Depends(get_availability_use_case),
):
    resolved_business_id = resolve_business_id(business_id)
    slots = await uc.execute(provider_ids, dates, resolved_business_id)
    return AvailabilityResponseSchema(
        business_id=resolved_business_id,
        dates=[d.isoformat() for d in dates],
        available_slots=slots,
    )
