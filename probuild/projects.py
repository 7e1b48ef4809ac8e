"""Saved-item lifecycle for projects.

Projects are immutable: every operation returns a new Project with the
item list updated and ``last_modified`` refreshed. Storing projects is the
caller's business.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from probuild.data.catalog import ELEMENT_PREFIXES
from probuild.exceptions import ItemNotFoundError
from probuild.models.enums import ElementType
from probuild.models.estimate import EstimationResult, SavedItem
from probuild.models.inputs import RawValue

if TYPE_CHECKING:
    from probuild.engine import EstimationEngine
    from probuild.models.project import Project

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[- ]")


def next_item_name(element_type: ElementType, items: Iterable[SavedItem]) -> str:
    """Return the next free auto-generated name for an element type.

    Names look like ``"C-3"``: the type's prefix and one more than the
    highest number already used by items of that type.
    """
    prefix = ELEMENT_PREFIXES[element_type]
    highest = 0
    for item in items:
        if item.element_type != element_type or not item.name.startswith(prefix):
            continue
        suffix = _SEPARATORS.sub("", item.name.replace(prefix, "", 1))
        match = re.match(r"\d+", suffix)
        if match is not None:
            highest = max(highest, int(match.group(0)))
    return f"{prefix}-{highest + 1}"


def save_item(
    project: Project,
    element_type: ElementType,
    inputs: Mapping[str, Any],
    engine: EstimationEngine,
    name: str | None = None,
) -> Project:
    """Estimate an element and add it to the top of the project's items."""
    result = engine.calculate_estimation(element_type, inputs)
    item_name = (name or "").strip() or next_item_name(element_type, project.items)
    item = SavedItem(
        name=item_name,
        element_type=element_type,
        inputs=_storable(inputs),
        result=result,
    )
    logger.info("Saved %s '%s' to project '%s'", element_type, item_name, project.name)
    return _with_items(project, [item, *project.items])


def update_item(
    project: Project,
    item_id: str,
    inputs: Mapping[str, Any],
    engine: EstimationEngine,
    name: str | None = None,
) -> Project:
    """Re-estimate a saved item with new inputs and replace it wholesale.

    Raises:
        ItemNotFoundError: If no item in the project has ``item_id``.
    """
    existing = find_item(project, item_id)
    replacement = SavedItem(
        id=existing.id,
        name=(name or "").strip() or existing.name,
        element_type=existing.element_type,
        inputs=_storable(inputs),
        result=engine.calculate_estimation(existing.element_type, inputs),
    )
    items = [replacement if it.id == item_id else it for it in project.items]
    return _with_items(project, items)


def remove_item(project: Project, item_id: str) -> Project:
    """Drop an item from the project. Unknown ids leave the items unchanged."""
    items = [it for it in project.items if it.id != item_id]
    if len(items) == len(project.items):
        logger.debug("Item %s not in project '%s'; nothing removed", item_id, project.name)
    return _with_items(project, items)


def find_item(project: Project, item_id: str) -> SavedItem:
    """Look up a saved item by id."""
    for item in project.items:
        if item.id == item_id:
            return item
    msg = f"No item with id '{item_id}' in project '{project.name}'"
    raise ItemNotFoundError(msg)


def group_items_by_type(items: Iterable[SavedItem]) -> dict[ElementType, list[SavedItem]]:
    """Group items by element type, keeping first-seen type order and item order."""
    groups: dict[ElementType, list[SavedItem]] = {}
    for item in items:
        groups.setdefault(item.element_type, []).append(item)
    return groups


def project_total(project: Project, engine: EstimationEngine) -> EstimationResult:
    """Grand total of every item in the project."""
    return engine.calculate_grand_total(project.items)


def _storable(inputs: Mapping[str, Any]) -> dict[str, RawValue]:
    """Drop values a SavedItem cannot hold, such as None; the engine read them as 0."""
    return {
        key: value
        for key, value in inputs.items()
        if isinstance(value, int | float | str)
    }


def _with_items(project: Project, items: list[SavedItem]) -> Project:
    return project.model_copy(
        update={"items": items, "last_modified": datetime.now(UTC)},
    )
