"""Benefit Routes — list, create, activate, deactivate and delete benefits.

Invariants:
    - One AsyncSession (and one repository) per request via get_db
    - Errors are raised, never formatted here: the global BenefitsError handler
      picks the status from the error type
    - Query parameters validated by FastAPI: limit >= 1, offset >= 0 (both
      within the storage integer range),
      orderBy in OrderField, orderDirection ASC/DESC (any case)
    - DELETE answers 204 with an empty body
    - Path ids outside [1, MAX_BENEFIT_ID] are rejected as INVALID_ID
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import (
    MAX_BENEFIT_ID, ListOptions, OrderDirection, OrderField,
)
from app.infrastructure.benefit_repository import SqlAlchemyBenefitRepository
from app.infrastructure.database import get_db
from app.schemas.benefit import (
    BenefitCreate, BenefitListResponse, BenefitOut, BenefitResponse,
)
from app.services.activate_benefit import ActivateBenefit
from app.services.create_benefit import CreateBenefit
from app.services.deactivate_benefit import DeactivateBenefit
from app.services.delete_benefit import DeleteBenefit
from app.services.list_benefits import ListBenefits

router = APIRouter(prefix="/api/benefits", tags=["benefits"])


def get_benefit_repository(
    db: AsyncSession = Depends(get_db),
) -> SqlAlchemyBenefitRepository:
    return SqlAlchemyBenefitRepository(db)


@router.get("", response_model=BenefitListResponse)
async def list_benefits(
    limit: int | None = Query(None, ge=1, le=MAX_BENEFIT_ID),
    offset: int | None = Query(None, ge=0, le=MAX_BENEFIT_ID),
    order_by: OrderField = Query(OrderField.NAME, alias="orderBy"),
    order_direction: str = Query(
        "ASC", alias="orderDirection", pattern=r"^(?i:asc|desc)$",
    ),
    active_only: bool = Query(False, alias="activeOnly"),
    inactive_only: bool = Query(False, alias="inactiveOnly"),
    name: str | None = Query(None, min_length=1, max_length=100),
    repository: SqlAlchemyBenefitRepository = Depends(get_benefit_repository),
):
    """List benefits; `name` switches to substring search."""
    options = ListOptions(
        limit=limit,
        offset=offset,
        order_by=order_by,
        order_direction=OrderDirection(order_direction.upper()),
        active_only=active_only,
        inactive_only=inactive_only,
    )
    use_case = ListBenefits(repository)
    if name:
        benefits = await use_case.search(name, options)
    else:
        benefits = await use_case.execute(options)
    return BenefitListResponse(
        data=[BenefitOut.from_entity(b) for b in benefits],
    )


@router.post(
    "", response_model=BenefitResponse, status_code=status.HTTP_201_CREATED,
)
async def create_benefit(
    body: BenefitCreate,
    repository: SqlAlchemyBenefitRepository = Depends(get_benefit_repository),
):
    benefit = await CreateBenefit(repository).execute(body.to_input())
    return BenefitResponse(
        data=BenefitOut.from_entity(benefit),
        message="Benefit created successfully",
    )


@router.put("/{benefit_id}/activate", response_model=BenefitResponse)
async def activate_benefit(
    benefit_id: int,
    repository: SqlAlchemyBenefitRepository = Depends(get_benefit_repository),
):
    benefit = await ActivateBenefit(repository).execute(benefit_id)
    return BenefitResponse(
        data=BenefitOut.from_entity(benefit),
        message="Benefit activated successfully",
    )


@router.put("/{benefit_id}/deactivate", response_model=BenefitResponse)
async def deactivate_benefit(
    benefit_id: int,
    repository: SqlAlchemyBenefitRepository = Depends(get_benefit_repository),
):
    benefit = await DeactivateBenefit(repository).execute(benefit_id)
    return BenefitResponse(
        data=BenefitOut.from_entity(benefit),
        message="Benefit deactivated successfully",
    )


@router.delete("/{benefit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_benefit(
    benefit_id: int,
    repository: SqlAlchemyBenefitRepository = Depends(get_benefit_repository),
):
    await DeleteBenefit(repository).execute(benefit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
