"""
Editing helpers for a product's variant selection.

Every function returns a new ``Selection``; the one passed in is left as is.
"""
from __future__ import annotations
from typing import Iterable, Optional, Sequence
from .models import AttributeDimension, Brand, Selection


def set_values(selection: Selection, dimension_id: int, values: Iterable[str]) -> Selection:
    attributes = dict(selection.attributes)
    attributes[dimension_id] = list(values)
    return Selection(attributes=attributes, color_ids=selection.color_ids, brand_id=selection.brand_id)


def toggle_value(selection: Selection, dimension_id: int, value: str) -> Selection:
    current = selection.values_for(dimension_id)
    if value in current:
        current.remove(value)
    else:
        current.append(value)
    return set_values(selection, dimension_id, current)


def select_all(selection: Selection, dimension: AttributeDimension) -> Selection:
    return set_values(selection, dimension.id, dimension.values)


def toggle_color(selection: Selection, color_id: int) -> Selection:
    ids = list(selection.color_ids)
    if color_id in ids:
        ids.remove(color_id)
    else:
        ids.append(color_id)
    return selection.model_copy(update={"color_ids": ids})


def set_brand(selection: Selection, brand_id: Optional[int]) -> Selection:
    return selection.model_copy(update={"brand_id": brand_id})


def reset_selection(brands: Sequence[Brand]) -> Selection:
    return Selection(brand_id=brands[0].id if brands else None)


def resolve_brand_name(brands: Sequence[Brand], selection: Selection, default: str) -> str:
    brand_id = selection.brand_id
    if brand_id is None and brands:
        brand_id = brands[0].id
    for b in brands:
        if b.id == brand_id:
            return b.name
    return default
