"""Adapters that make common in-memory structures renderable."""

from .mapping import MappingAdapter, from_mapping

__all__ = [
    'MappingAdapter',
    'from_mapping',
]
