from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple
from .combinatorics import cartesian
from .identifiers import synthesize
from .models import (
    AttributeDimension,
    ColorOption,
    GenerationRequest,
    GenerationResult,
    ProductVariantRow,
    Selection,
)
from .utils import get_logger

logger = get_logger("engine")

COLOR_LABEL = "Color"
BRAND_KEY = "Brand"


@dataclass(frozen=True)
class Axis:
    label: str
    values: Tuple[str, ...]


def missing_required(dimensions: Sequence[AttributeDimension], selection: Selection) -> List[str]:
    return [
        d.name
        for d in dimensions
        if d.required and d.active and not selection.values_for(d.id)
    ]


def assemble_axes(
    dimensions: Sequence[AttributeDimension],
    color_options: Sequence[ColorOption],
    selection: Selection,
) -> List[Axis]:
    axes: List[Axis] = []
    chosen = set(selection.color_ids)
    # colors follow catalog order, not click order
    colors = tuple(c.name for c in color_options if c.active and c.id in chosen)
    if colors:
        axes.append(Axis(COLOR_LABEL, colors))
    for d in dimensions:
        if not d.active:
            continue
        values = selection.values_for(d.id)
        if values:
            axes.append(Axis(d.name, tuple(values)))
    return axes


def preview_count(
    dimensions: Sequence[AttributeDimension],
    color_options: Sequence[ColorOption],
    selection: Selection,
) -> int:
    count = 1
    for axis in assemble_axes(dimensions, color_options, selection):
        count *= len(axis.values)
    return count


def _existing_skus(rows: Sequence[ProductVariantRow], product_id: int) -> Set[str]:
    return {r.sku for r in rows if r.product_id == product_id}


def _next_id(rows: Sequence[ProductVariantRow]) -> int:
    return max([0] + [r.id for r in rows]) + 1


def generate_variants(request: GenerationRequest) -> GenerationResult:
    missing = missing_required(request.dimensions, request.selection)
    if missing:
        logger.info("Product %s: required selections missing: %s", request.product_id, ", ".join(missing))
        return GenerationResult(ok=False, missing_required=missing)

    axes = assemble_axes(request.dimensions, request.color_options, request.selection)
    logger.debug("Product %s axes: %s", request.product_id, [(a.label, list(a.values)) for a in axes])
    keys = {BRAND_KEY} if request.selected_brand_name is not None else set()
    for axis in axes:
        if axis.label in keys:
            logger.warning(
                "Product %s: attribute %r overwrites an earlier %r entry in variant attributes",
                request.product_id, axis.label, axis.label,
            )
        keys.add(axis.label)
    combos = cartesian([a.values for a in axes])

    seen = _existing_skus(request.existing_variants, request.product_id)
    produced: Dict[str, Tuple[str, ...]] = {}
    next_id = _next_id(request.existing_variants)
    new_rows: List[ProductVariantRow] = []
    skipped = 0
    for combo in combos:
        labeled = [(axis.label, value) for axis, value in zip(axes, combo)]
        ident = synthesize(request.base_sku, labeled)
        if ident.sku in seen:
            if ident.sku in produced:
                logger.warning(
                    "SKU %s produced by both %s and %s; keeping the first",
                    ident.sku, list(produced[ident.sku]), list(combo),
                )
            skipped += 1
            continue
        seen.add(ident.sku)
        produced[ident.sku] = combo

        attributes: Dict[str, str] = {}
        if request.selected_brand_name is not None:
            attributes[BRAND_KEY] = request.selected_brand_name
        for label, value in labeled:
            attributes[label] = value

        new_rows.append(ProductVariantRow(
            id=next_id,
            product_id=request.product_id,
            name=ident.label,
            sku=ident.sku,
            price=request.default_price,
            stock=request.default_stock,
            active=True,
            attributes=attributes,
        ))
        next_id += 1

    logger.info(
        "Product %s: %d combinations, %d new variants, %d already present",
        request.product_id, len(combos), len(new_rows), skipped,
    )
    return GenerationResult(ok=True, new_rows=new_rows)
