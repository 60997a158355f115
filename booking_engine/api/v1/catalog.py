from fastapi import APIRouter, Depends, HTTPException, Query

from booking_engine.api.v1.schemas import IndustriesResponseSchema, IndustrySchema
from booking_engine.application.use_cases.load_catalog import LoadCatalogUseCase
from booking_engine.core.config import settings
from booking_engine.wiring.dependencies import get_load_catalog_use_case

router = APIRouter()


def resolve_business_id(value: str | None) -> str:
    business_id = value or settings.BUSINESS_ID
    if not business_id:
        raise HTTPException(status_code=400, detail="Business context required")
    return business_id


@router.get("/industries", response_model=IndustriesResponseSchema)
async def list_industries(
    business_id: str | None = Query(None),
    uc: LoadCatalogUseCase = Depends(get_load_catalog_use_case),
):
    resolved_business_id = resolve_business_id(business_id)
    industries = await uc.list_industries(resolved_business_id)
    return IndustriesResponseSchema(
        business_id=resolved_business_id,
        industries=[IndustrySchema(id=i.id, name=i.name) for i in industries],
    )
