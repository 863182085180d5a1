from __future__ import annotations
import os
from pathlib import Path
from typing import List, Optional
import typer
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

app = typer.Typer(add_completion=False, help="CLI for generating product variants from attribute selections")


@app.callback()
def main_callback(
    workspace: Optional[Path] = typer.Option(
        None, "--workspace", help="Workspace JSON file (override .env WORKSPACE_PATH)"
    ),
) -> None:
    if workspace is not None:
        os.environ["WORKSPACE_PATH"] = str(workspace)


def _load():
    from .config import get_settings
    from .store import load_workspace
    settings = get_settings()
    try:
        return settings, load_workspace(settings.workspace_path)
    except FileNotFoundError:
        rprint(f"[red]Workspace not found: {settings.workspace_path}[/red] (run `init` first)")
        raise typer.Exit(code=2)
    except ValidationError as e:
        rprint(f"[red]Invalid workspace {settings.workspace_path}[/red]\n{escape(str(e))}")
        raise typer.Exit(code=2)


def _product(ws, product_id: int):
    try:
        return ws.product(product_id)
    except ValueError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(code=2)


def _save(ws, settings) -> None:
    from .store import save_workspace
    save_workspace(ws, settings.workspace_path)


@app.command("init")
def init_cmd(force: bool = typer.Option(False, "--force", help="Overwrite an existing workspace")) -> None:
    from .config import get_settings
    from .store import init_workspace
    settings = get_settings()
    try:
        init_workspace(settings.workspace_path, overwrite=force)
    except FileExistsError as e:
        rprint(f"[yellow]{e}[/yellow] (use --force)")
        raise typer.Exit(code=1)
    rprint(f"[green]OK[/green] Workspace initialized: {settings.workspace_path}")


@app.command("preview")
def preview(product: int = typer.Option(..., "--product")) -> None:
    from .engine import preview_count
    settings, ws = _load()
    _product(ws, product)
    count = preview_count(ws.attributes, ws.colors, ws.selection_for(product))
    rprint({"product": product, "preview_variants": count})


@app.command("validate")
def validate(product: int = typer.Option(..., "--product")) -> None:
    from .engine import missing_required
    settings, ws = _load()
    _product(ws, product)
    missing = missing_required(ws.attributes, ws.selection_for(product))
    if missing:
        for name in missing:
            rprint(f"[yellow]- Required missing: {name}[/yellow]")
        raise typer.Exit(code=1)
    rprint("[green]OK[/green] Selection is complete")


@app.command("select")
def select(
    product: int = typer.Option(..., "--product"),
    attribute: Optional[int] = typer.Option(None, "--attribute", help="Attribute id to set values for"),
    values: Optional[str] = typer.Option(None, "--values", help="Comma-separated values for --attribute"),
    select_all_values: bool = typer.Option(False, "--all", help="Select every value of --attribute"),
    color: Optional[List[int]] = typer.Option(None, "--color", help="Toggle a color id (repeatable)"),
    brand: Optional[int] = typer.Option(None, "--brand", help="Brand id for the product"),
    reset: bool = typer.Option(False, "--reset", help="Clear selections before applying options"),
) -> None:
    from .selection import reset_selection, select_all, set_brand, set_values, toggle_color
    from .store import with_selection
    settings, ws = _load()
    _product(ws, product)
    sel = reset_selection(ws.brands) if reset else ws.selection_for(product)
    if attribute is not None:
        dim = next((d for d in ws.attributes if d.id == attribute), None)
        if dim is None:
            rprint(f"[red]Unknown attribute id: {attribute}[/red]")
            raise typer.Exit(code=2)
        if select_all_values:
            sel = select_all(sel, dim)
        elif values is not None:
            sel = set_values(sel, dim.id, [v.strip() for v in values.split(",") if v.strip()])
    for cid in color or []:
        sel = toggle_color(sel, cid)
    if brand is not None:
        if not any(b.id == brand for b in ws.brands):
            rprint(f"[red]Unknown brand id: {brand}[/red]")
            raise typer.Exit(code=2)
        sel = set_brand(sel, brand)
    ws = with_selection(ws, product, sel)
    _save(ws, settings)
    rprint(sel.model_dump())


@app.command("generate")
def generate(
    product: int = typer.Option(..., "--product"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show new variants without saving"),
) -> None:
    from .engine import generate_variants
    from .store import apply_result, build_request
    settings, ws = _load()
    _product(ws, product)
    result = generate_variants(build_request(ws, product, settings))
    if not result.ok:
        rprint(f"[red]Required missing: {', '.join(result.missing_required)}[/red]")
        raise typer.Exit(code=1)
    if not result.new_rows:
        rprint("[yellow]No new variants: every combination already exists[/yellow]")
        return
    _print_rows(result.new_rows, title=f"New variants ({len(result.new_rows)})")
    if dry_run:
        return
    _save(apply_result(ws, result), settings)
    rprint(f"[green]OK[/green] Added {len(result.new_rows)} variants")


@app.command("list")
def list_cmd(
    product: int = typer.Option(..., "--product"),
    search: Optional[str] = typer.Option(None, "--search", help="Filter by name or SKU"),
) -> None:
    from .collection import find_sku_conflicts, product_variants
    settings, ws = _load()
    _product(ws, product)
    rows = product_variants(ws.variants, product, search)
    _print_rows(rows, title=f"Variant List ({len(rows)})")
    for sku in find_sku_conflicts(ws.variants).get(product, []):
        rprint(f"[yellow]Duplicate SKU: {sku}[/yellow]")


@app.command("add-default")
def add_default(product: int = typer.Option(..., "--product")) -> None:
    from .collection import add_default_variant
    from .selection import resolve_brand_name
    settings, ws = _load()
    p = _product(ws, product)
    brand_name = resolve_brand_name(ws.brands, ws.selection_for(product), settings.default_brand_name)
    variants = add_default_variant(
        ws.variants, p, brand_name=brand_name, price=settings.price_default, stock=settings.stock_default
    )
    if len(variants) == len(ws.variants):
        rprint("[yellow]Default variant already exists[/yellow]")
        return
    _save(ws.model_copy(update={"variants": variants}), settings)
    rprint({"added": variants[0].model_dump(by_alias=True)})


@app.command("update")
def update(
    variant_id: int = typer.Option(..., "--id"),
    name: Optional[str] = typer.Option(None, "--name"),
    sku: Optional[str] = typer.Option(None, "--sku"),
    price: Optional[str] = typer.Option(None, "--price"),
    stock: Optional[str] = typer.Option(None, "--stock"),
    active: Optional[bool] = typer.Option(None, "--active/--inactive"),
) -> None:
    from .collection import update_variant
    settings, ws = _load()
    if not any(v.id == variant_id for v in ws.variants):
        rprint(f"[red]Unknown variant id: {variant_id}[/red]")
        raise typer.Exit(code=2)
    patch = {k: v for k, v in {"name": name, "sku": sku, "price": price, "stock": stock, "active": active}.items() if v is not None}
    variants = update_variant(ws.variants, variant_id, **patch)
    _save(ws.model_copy(update={"variants": variants}), settings)
    rprint(next(v for v in variants if v.id == variant_id).model_dump(by_alias=True))


@app.command("remove")
def remove(variant_id: int = typer.Option(..., "--id")) -> None:
    from .collection import remove_variant
    settings, ws = _load()
    variants = remove_variant(ws.variants, variant_id)
    _save(ws.model_copy(update={"variants": variants}), settings)
    rprint({"removed": len(ws.variants) - len(variants)})


@app.command("clear")
def clear(product: int = typer.Option(..., "--product")) -> None:
    from .collection import clear_product_variants
    settings, ws = _load()
    _product(ws, product)
    variants = clear_product_variants(ws.variants, product)
    _save(ws.model_copy(update={"variants": variants}), settings)
    rprint({"removed": len(ws.variants) - len(variants)})


def _print_rows(rows, title: str) -> None:
    table = Table(title=title)
    for h in ("Id", "Variant", "SKU", "Price", "Stock", "Active"):
        table.add_column(h)
    for v in rows:
        table.add_row(str(v.id), v.name, v.sku, f"{v.price:.2f}", str(v.stock), "yes" if v.active else "no")
    rprint(table)
