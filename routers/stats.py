# routers/stats.py

from fastapi import APIRouter, Depends

from dependencies.auth import require_admin
from dependencies.services import (
    get_agreement_repository,
    get_apartment_repository,
    get_user_repository,
)
from models.stats import Stats
from repositories import AgreementRepository, ApartmentRepository, UserRepository
from services.stats import collect_stats

router = APIRouter(
    prefix="/stats",
    tags=["Stats"],
)


@router.get("", response_model=Stats, summary="Admin: Unit and user counts", dependencies=[Depends(require_admin)])
def get_stats(
    apartments: ApartmentRepository = Depends(get_apartment_repository),
    users: UserRepository = Depends(get_user_repository),
    agreements: AgreementRepository = Depends(get_agreement_repository),
):
    return collect_stats(apartments, users, agreements)
