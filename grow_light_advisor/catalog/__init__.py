"""
Fixture catalog: measurement data model and catalog sources.

Modules
-------
fixture_catalog : FixtureCatalog + Candidate — flattening, no I/O.
reference       : reference_catalog() — the built-in 7W/10W/24W/28W table.
loader          : load_catalog_file() — JSON catalog files.
"""

from grow_light_advisor.catalog.fixture_catalog import Candidate, FixtureCatalog
from grow_light_advisor.catalog.loader import load_catalog_file, parse_catalog_records
from grow_light_advisor.catalog.reference import reference_catalog

__all__ = [
    "Candidate",
    "FixtureCatalog",
    "load_catalog_file",
    "parse_catalog_records",
    "reference_catalog",
]
