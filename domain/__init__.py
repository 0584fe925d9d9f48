"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- taxonomy: validated identifiers/titles/paths, the flat collection and
  path-keyed map forms, and the conversions between them
"""

from domain.taxonomy import TaxonomyCollection, TaxonomyMap

__all__ = [
    "TaxonomyCollection",
    "TaxonomyMap",
]
