"""Load the campus seed section of a configuration into the repositories.

Buildings and floors are stored directly after passing their domain
validation. Passages go through ``PassageService.create_passage`` so they
obey exactly the same rules as passages created over HTTP.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from campus.application.dtos import CoordinatesInput, PassageInput, PassagePointInput
from campus.domain.entities import Building, Floor
from campus.domain.value_objects import BuildingCode, BuildingDimensions, FloorNumber

if TYPE_CHECKING:
    from campus.application.factory import ServiceFactory

    from .schema import CampusConfiguration, PassagePointSeedConfig

logger = logging.getLogger(__name__)

__all__ = ["seed_campus"]


def _point_input(point: PassagePointSeedConfig) -> PassagePointInput:
    return PassagePointInput(
        floor_id=point.floor_id,
        first_coordinates=CoordinatesInput(point.first_coordinates.x, point.first_coordinates.y),
        last_coordinates=CoordinatesInput(point.last_coordinates.x, point.last_coordinates.y),
    )


async def seed_campus(config: CampusConfiguration, factory: ServiceFactory) -> list[str]:
    """Seed buildings, floors and passages from a configuration.

    Items that fail validation are skipped and reported; later items that
    depend on them (floors of a rejected building, passages on a missing
    floor) fail in turn with their own message.

    Args:
        config: Validated configuration; nothing happens without a campus section.
        factory: Factory whose repositories receive the data.

    Returns:
        One message per rejected item, empty when everything was loaded.
    """
    if config.campus is None:
        return []

    errors: list[str] = []
    building_repo = factory.get_building_repository()
    floor_repo = factory.get_floor_repository()
    passage_service = factory.get_passage_service()
    max_code_length = config.building.max_code_length

    for item in config.campus.buildings:
        code_or_error = BuildingCode.create(item.code, max_code_length)
        dimensions_or_error = BuildingDimensions.create(item.width, item.length)
        for result in (code_or_error, dimensions_or_error):
            if result.is_failure:
                errors.append(f"Building {item.domain_id}: {result.error}")
        if code_or_error.is_failure or dimensions_or_error.is_failure:
            continue
        building_or_error = Building.create(
            code=code_or_error.get_value(),
            dimensions=dimensions_or_error.get_value(),
            name=item.name,
            description=item.description,
            domain_id=item.domain_id,
        )
        if building_or_error.is_failure:
            errors.append(f"Building {item.domain_id}: {building_or_error.error}")
            continue
        await building_repo.save(building_or_error.get_value())
        logger.debug(f"Seeded building {item.domain_id} ({item.code})")

    for item in config.campus.floors:
        building = await building_repo.find_by_domain_id(item.building_id)
        if building is None:
            errors.append(f"Floor {item.domain_id}: Building not found.")
            continue
        floor_or_error = Floor.create(
            building=building,
            floor_number=FloorNumber.create(item.floor_number).get_value(),
            description=item.description,
            domain_id=item.domain_id,
        )
        if floor_or_error.is_failure:
            errors.append(f"Floor {item.domain_id}: {floor_or_error.error}")
            continue
        await floor_repo.save(floor_or_error.get_value())
        logger.debug(f"Seeded floor {item.domain_id}")

    for item in config.campus.passages:
        result = await passage_service.create_passage(
            PassageInput(
                domain_id=item.domain_id,
                passage_start_point=_point_input(item.start_point),
                passage_end_point=_point_input(item.end_point),
            )
        )
        if result.is_failure:
            errors.append(f"Passage {item.domain_id}: {result.error}")

    if errors:
        logger.warning(f"Campus seeding rejected {len(errors)} item(s)")
    else:
        logger.info(
            f"Seeded {len(config.campus.buildings)} building(s), "
            f"{len(config.campus.floors)} floor(s), "
            f"{len(config.campus.passages)} passage(s)"
        )
    return errors
