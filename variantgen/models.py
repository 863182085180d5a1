from __future__ import annotations
from typing import Dict, List, Literal, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field, field_validator

AttributeKind = Literal["text", "size", "material", "custom"]
T = TypeVar("T")


def _ordered_unique(values: List[T]) -> List[T]:
    seen = set()
    out: List[T] = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return out


class CatalogRecord(BaseModel):
    # admin API records call the on/off flag "status"
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    active: bool = Field(default=True, alias="status")


class AttributeDimension(CatalogRecord):
    type: AttributeKind = "text"
    required: bool = False
    priority: str = "Normal"
    values: List[str] = Field(default_factory=list)

    @field_validator("values")
    @classmethod
    def dedupe_values(cls, v: List[str]) -> List[str]:
        return _ordered_unique(v)


class ColorOption(CatalogRecord):
    hex: str = "#000000"
    priority: int = 1


class Brand(CatalogRecord):
    img_path: Optional[str] = None
    priority: int = 1


class Product(BaseModel):
    id: int
    name: str
    sku: str


class Selection(BaseModel):
    attributes: Dict[int, List[str]] = Field(default_factory=dict)
    color_ids: List[int] = Field(default_factory=list)
    brand_id: Optional[int] = None

    @field_validator("attributes")
    @classmethod
    def dedupe_attribute_values(cls, v: Dict[int, List[str]]) -> Dict[int, List[str]]:
        return {k: _ordered_unique(vals) for k, vals in v.items()}

    @field_validator("color_ids")
    @classmethod
    def dedupe_colors(cls, v: List[int]) -> List[int]:
        return _ordered_unique(v)

    def values_for(self, dimension_id: int) -> List[str]:
        return list(self.attributes.get(dimension_id, []))


class ProductVariantRow(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    product_id: int = Field(alias="productId")
    name: str
    sku: str
    price: float = 0
    stock: int = 0
    active: bool = True
    attributes: Dict[str, str] = Field(default_factory=dict)


class GenerationRequest(BaseModel):
    product_id: int
    base_sku: str
    selected_brand_name: Optional[str] = None
    dimensions: List[AttributeDimension] = Field(default_factory=list)
    color_options: List[ColorOption] = Field(default_factory=list)
    selection: Selection = Field(default_factory=Selection)
    existing_variants: List[ProductVariantRow] = Field(default_factory=list)
    default_price: float = 0
    default_stock: int = 0


class GenerationResult(BaseModel):
    ok: bool
    new_rows: List[ProductVariantRow] = Field(default_factory=list)
    missing_required: List[str] = Field(default_factory=list)


class Workspace(BaseModel):
    products: List[Product] = Field(default_factory=list)
    brands: List[Brand] = Field(default_factory=list)
    colors: List[ColorOption] = Field(default_factory=list)
    attributes: List[AttributeDimension] = Field(default_factory=list)
    selections: Dict[int, Selection] = Field(default_factory=dict)
    variants: List[ProductVariantRow] = Field(default_factory=list)

    def product(self, product_id: int) -> Product:
        for p in self.products:
            if p.id == product_id:
                return p
        raise ValueError(f"Unknown product id: {product_id}")

    def selection_for(self, product_id: int) -> Selection:
        return self.selections.get(product_id, Selection())
