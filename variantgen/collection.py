"""
Caller-side operations over a variant collection.

The generation engine only produces new rows; merging them in, editing,
removing and listing rows happens here. Functions never mutate the list or
rows they are given.
"""
from __future__ import annotations
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence
from .engine import BRAND_KEY
from .identifiers import DEFAULT_LABEL, normalize_token
from .models import Product, ProductVariantRow
from .utils import get_logger, safe_number

logger = get_logger("collection")

EDITABLE_FIELDS = ("name", "sku", "price", "stock", "active")


def merge_variants(existing: Sequence[ProductVariantRow], new_rows: Sequence[ProductVariantRow]) -> List[ProductVariantRow]:
    return list(new_rows) + list(existing)


def product_variants(rows: Sequence[ProductVariantRow], product_id: int, search: Optional[str] = None) -> List[ProductVariantRow]:
    found = [r for r in rows if r.product_id == product_id]
    q = (search or "").strip().lower()
    if not q:
        return found
    return [r for r in found if q in r.name.lower() or q in r.sku.lower()]


def update_variant(rows: Sequence[ProductVariantRow], variant_id: int, **patch: Any) -> List[ProductVariantRow]:
    unknown = set(patch) - set(EDITABLE_FIELDS)
    if unknown:
        raise ValueError(f"Fields not editable: {', '.join(sorted(unknown))}")
    out: List[ProductVariantRow] = []
    for r in rows:
        if r.id != variant_id:
            out.append(r)
            continue
        update: Dict[str, Any] = dict(patch)
        if "price" in update:
            update["price"] = safe_number(update["price"], r.price)
        if "stock" in update:
            update["stock"] = int(safe_number(update["stock"], r.stock))
        out.append(r.model_copy(update=update))
    return out


def remove_variant(rows: Sequence[ProductVariantRow], variant_id: int) -> List[ProductVariantRow]:
    return [r for r in rows if r.id != variant_id]


def clear_product_variants(rows: Sequence[ProductVariantRow], product_id: int) -> List[ProductVariantRow]:
    return [r for r in rows if r.product_id != product_id]


def add_default_variant(
    rows: Sequence[ProductVariantRow],
    product: Product,
    brand_name: Optional[str] = None,
    price: float = 0,
    stock: int = 0,
) -> List[ProductVariantRow]:
    sku = normalize_token(product.sku)
    if any(r.product_id == product.id and r.sku == sku for r in rows):
        logger.info("Product %s already has a variant with SKU %s", product.id, sku)
        return list(rows)
    attributes = {BRAND_KEY: brand_name} if brand_name is not None else {}
    row = ProductVariantRow(
        id=max([0] + [r.id for r in rows]) + 1,
        product_id=product.id,
        name=DEFAULT_LABEL,
        sku=sku,
        price=price,
        stock=stock,
        active=True,
        attributes=attributes,
    )
    return merge_variants(rows, [row])


def find_sku_conflicts(rows: Sequence[ProductVariantRow]) -> Dict[int, List[str]]:
    """SKUs used by more than one row of the same product, keyed by product id.

    Generation never creates these, but hand-edited SKUs can.
    """
    counts = Counter((r.product_id, r.sku) for r in rows)
    conflicts: Dict[int, List[str]] = {}
    for (product_id, sku), n in counts.items():
        if n > 1:
            conflicts.setdefault(product_id, []).append(sku)
    return conflicts
