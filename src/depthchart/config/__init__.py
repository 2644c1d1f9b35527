"""Configuration helpers for sport position taxonomies."""

from .positions import (
    PositionTaxonomy,
    default_channel_name,
    get_taxonomy,
    iter_taxonomies,
)

__all__ = [
    "PositionTaxonomy",
    "default_channel_name",
    "get_taxonomy",
    "iter_taxonomies",
]
