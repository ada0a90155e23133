# services/stats.py

from models.enums import AgreementStatus, Role
from models.stats import Stats
from repositories.agreements import AgreementRepository
from repositories.apartments import ApartmentRepository
from repositories.users import UserRepository


def collect_stats(
    apartments: ApartmentRepository,
    users: UserRepository,
    agreements: AgreementRepository,
) -> Stats:
    """Unit and user counts; a unit is taken once any checked agreement references it."""
    total_units = apartments.count()
    taken = {a.apartment_id for a in agreements.list_by_status(AgreementStatus.checked)}

    return Stats(
        total_units=total_units,
        available_units=max(total_units - len(taken), 0),
        total_users=users.count(),
        members=users.count(Role.member),
    )
