"""Catalog resource services."""

from monolite.resources.banners import BannersService
from monolite.resources.base import ResourceService, translate_error
from monolite.resources.categories import CategoriesService
from monolite.resources.products import ProductsService

__all__ = [
    "ResourceService",
    "BannersService",
    "CategoriesService",
    "ProductsService",
    "translate_error",
]
