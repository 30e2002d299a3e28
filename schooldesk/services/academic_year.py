"""Academic years; at most one year is active at a time and it can only be replaced."""
import logging
from datetime import datetime
from typing import Optional

from schooldesk.errors import NotFound, ValidationError
from schooldesk.models.academic_year import (
    AcademicYear,
    AcademicYearCreate,
    AcademicYearStatus,
    AcademicYearUpdate,
)
from schooldesk.store import Store

logger = logging.getLogger(__name__)


async def _archive_others(store: Store, active_id: str) -> None:
    others = await store.find(AcademicYear, lambda ay: ay.id != active_id, status=AcademicYearStatus.ACTIVE)
    for ay in others:
        ay.status = AcademicYearStatus.ARCHIVED
        ay.updated_at = datetime.utcnow()
        await store.save(ay)


def _check_dates(ay: AcademicYear) -> None:
    if ay.end_date <= ay.start_date:
        raise ValidationError(f"Academic year {ay.name} must end after it starts")


async def fetch_academic_years(store: Store) -> list[AcademicYear]:
    years = await store.find(AcademicYear)
    return sorted(years, key=lambda ay: ay.start_date)


async def get_academic_year(store: Store, academic_year_id: str) -> AcademicYear:
    ay = await store.get(AcademicYear, academic_year_id)
    if not ay:
        raise NotFound(f"Academic year with id {academic_year_id} not found")
    return ay


async def create_academic_year(store: Store, data: AcademicYearCreate) -> AcademicYear:
    ay = AcademicYear(**data.model_dump())
    _check_dates(ay)
    async with store.transaction():
        await store.insert(ay)
        if ay.status == AcademicYearStatus.ACTIVE:
            await _archive_others(store, ay.id)
    return ay


async def update_academic_year(store: Store, academic_year_id: str, data: AcademicYearUpdate) -> AcademicYear:
    """Apply a partial update; the active year is replaced by activating another one."""
    current = await get_academic_year(store, academic_year_id)
    ay = current.apply_update(data)
    if current.status == AcademicYearStatus.ACTIVE and ay.status != AcademicYearStatus.ACTIVE:
        raise ValidationError(
            f"Academic year {current.name} is the active year; activate another year instead of archiving it"
        )
    _check_dates(ay)
    ay.updated_at = datetime.utcnow()
    async with store.transaction():
        await store.save(ay)
        if ay.status == AcademicYearStatus.ACTIVE:
            await _archive_others(store, ay.id)
    return ay


async def set_active_academic_year(store: Store, academic_year_id: str) -> AcademicYear:
    """Mark one year active and archive every other year."""
    ay = await update_academic_year(
        store, academic_year_id, AcademicYearUpdate(status=AcademicYearStatus.ACTIVE)
    )
    logger.info("Academic year %s is now active", ay.name)
    return ay


async def get_current_academic_year(store: Store) -> Optional[AcademicYear]:
    return await store.find_one(AcademicYear, status=AcademicYearStatus.ACTIVE)
