from __future__ import annotations
from pathlib import Path
from typing import Optional
from .collection import merge_variants
from .config import Settings, get_settings
from .models import GenerationRequest, GenerationResult, Selection, Workspace
from .sample import sample_workspace
from .selection import resolve_brand_name
from .utils import get_logger

logger = get_logger("store")


def init_workspace(path: Path, overwrite: bool = False) -> Workspace:
    path = Path(path)
    if path.exists() and not overwrite:
        raise FileExistsError(f"Workspace already exists: {path}")
    ws = sample_workspace()
    save_workspace(ws, path)
    return ws


def load_workspace(path: Path) -> Workspace:
    path = Path(path)
    ws = Workspace.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug("Loaded workspace %s: %d products, %d variants", path, len(ws.products), len(ws.variants))
    return ws


def save_workspace(ws: Workspace, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(ws.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")
    logger.debug("Saved workspace %s", path)


def with_selection(ws: Workspace, product_id: int, selection: Selection) -> Workspace:
    ws.product(product_id)
    selections = dict(ws.selections)
    selections[product_id] = selection
    return ws.model_copy(update={"selections": selections})


def build_request(ws: Workspace, product_id: int, settings: Optional[Settings] = None) -> GenerationRequest:
    s = settings or get_settings()
    product = ws.product(product_id)
    selection = ws.selection_for(product_id)
    return GenerationRequest(
        product_id=product.id,
        base_sku=product.sku,
        selected_brand_name=resolve_brand_name(ws.brands, selection, s.default_brand_name),
        dimensions=ws.attributes,
        color_options=ws.colors,
        selection=selection,
        existing_variants=ws.variants,
        default_price=s.price_default,
        default_stock=s.stock_default,
    )


def apply_result(ws: Workspace, result: GenerationResult) -> Workspace:
    if not result.ok or not result.new_rows:
        return ws
    return ws.model_copy(update={"variants": merge_variants(ws.variants, result.new_rows)})
