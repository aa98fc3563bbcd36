"""Catalog payload shapes returned by the API.

Payloads are kept as the decoded JSON dicts; these TypedDicts only
describe them for type checkers.
"""

from typing import Any, TypedDict


class _BannerRequired(TypedDict):
    id: int
    title: str
    subtitle: str
    web_banner_url: str
    mobile_banner_url: str
    redirect_url: str
    start_date: str
    end_date: str
    active: bool
    zone_code: str


class Banner(_BannerRequired, total=False):
    popup_banner_url: str


class Subcategory(TypedDict):
    id: str
    name: str
    description: str
    image_url: str
    slug: str
    status: bool
    priority: int
    category_id: str


class Category(TypedDict):
    id: str
    name: str
    description: str
    image_url: str
    slug: str
    status: bool
    priority: int
    subcategories: list[Subcategory]


# Free-form technical sheet (motor, chasis, transmision, ...)
ProductFeatures = dict[str, Any]


class _ProductRequired(TypedDict):
    id: int
    name: str
    sku: str
    price: float
    image_url: str
    active: bool
    public: bool
    has_stock: bool
    stock: int
    category_id: str
    category_name: str
    subcategory_id: str
    subcategory_name: str


class Product(_ProductRequired, total=False):
    description: str
    features: ProductFeatures


class ProductVariation(TypedDict):
    id: int
    product_id: int
    sku: str
    image_url: str
    price: float
    stock: int


class ProductSearchResult(TypedDict):
    id: int
    name: str
    sku: str
    category_name: str
    subcategory_name: str
    image_url: str


class Pagination(TypedDict):
    limit: int
    page: int
    total: int


class _SearchData(TypedDict):
    pagination: Pagination
    results: list[ProductSearchResult]


class ProductSearchResponse(TypedDict):
    data: _SearchData
    message: str


class _FilterData(TypedDict):
    pagination: Pagination
    products: list[Product]


class ProductFilterBySkuResponse(TypedDict):
    data: _FilterData
    message: str
