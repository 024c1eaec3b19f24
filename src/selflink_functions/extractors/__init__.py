"""
Element extraction from resource self links and ids.
"""

from .element_extractor import ElementExtractor, ElementPattern, get_element
from .patterns import (
    LOCATION_PATTERN,
    PROJECT_PATTERN,
    REGION_PATTERN,
    RESOURCE_NAME_PATTERN,
    ZONE_PATTERN,
)

__all__ = [
    "ElementExtractor",
    "ElementPattern",
    "get_element",
    "RESOURCE_NAME_PATTERN",
    "PROJECT_PATTERN",
    "REGION_PATTERN",
    "ZONE_PATTERN",
    "LOCATION_PATTERN",
]
