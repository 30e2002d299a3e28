"""Classes and the per-year sections inside them."""
from datetime import datetime
from typing import Optional

from schooldesk.errors import NotFound
from schooldesk.models.school_class import SchoolClass, SchoolClassCreate, SchoolClassUpdate
from schooldesk.models.section import Section, SectionCreate, SectionUpdate
from schooldesk.store import Store


async def fetch_classes(store: Store) -> list[SchoolClass]:
    classes = await store.find(SchoolClass)
    return sorted(classes, key=lambda c: (c.level, c.name))


async def get_class(store: Store, class_id: str) -> SchoolClass:
    cls = await store.get(SchoolClass, class_id)
    if not cls:
        raise NotFound(f"Class with id {class_id} not found")
    return cls


async def create_class(store: Store, data: SchoolClassCreate) -> SchoolClass:
    return await store.insert(SchoolClass(**data.model_dump()))


async def update_class(store: Store, class_id: str, data: SchoolClassUpdate) -> SchoolClass:
    cls = (await get_class(store, class_id)).apply_update(data)
    cls.updated_at = datetime.utcnow()
    return await store.save(cls)


async def delete_class(store: Store, class_id: str) -> None:
    if not await store.delete(SchoolClass, class_id):
        raise NotFound(f"Class with id {class_id} not found")


async def fetch_sections(
    store: Store,
    academic_year_id: Optional[str] = None,
    class_id: Optional[str] = None,
) -> list[Section]:
    filters = {}
    if academic_year_id:
        filters["academic_year_id"] = academic_year_id
    if class_id:
        filters["class_id"] = class_id
    return await store.find(Section, **filters)


async def get_section(store: Store, section_id: str) -> Section:
    section = await store.get(Section, section_id)
    if not section:
        raise NotFound(f"Section with id {section_id} not found")
    return section


async def create_section(store: Store, data: SectionCreate) -> Section:
    return await store.insert(Section(**data.model_dump()))


async def update_section(store: Store, section_id: str, data: SectionUpdate) -> Section:
    section = (await get_section(store, section_id)).apply_update(data)
    section.updated_at = datetime.utcnow()
    return await store.save(section)


async def delete_section(store: Store, section_id: str) -> None:
    if not await store.delete(Section, section_id):
        raise NotFound(f"Section with id {section_id} not found")
