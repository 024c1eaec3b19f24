"""
Host-callable functions and their registry.
"""

from typing import Optional

from .base import ProviderFunction
from .registry import FunctionRegistry
from .self_link import (
    SelfLinkFunction,
    location_from_self_link,
    project_from_self_link,
    region_from_self_link,
    resource_name_from_self_link,
    zone_from_self_link,
)


def default_registry(strict: Optional[bool] = None) -> FunctionRegistry:
    """
    Registry with every self link function registered.
    
    Args:
        strict: Treat ambiguous matches as errors (None uses settings)
    """
    registry = FunctionRegistry()
    for factory in (
        resource_name_from_self_link,
        project_from_self_link,
        region_from_self_link,
        zone_from_self_link,
        location_from_self_link,
    ):
        registry.register(factory(strict=strict))
    return registry


__all__ = [
    "ProviderFunction",
    "FunctionRegistry",
    "SelfLinkFunction",
    "default_registry",
    "resource_name_from_self_link",
    "project_from_self_link",
    "region_from_self_link",
    "zone_from_self_link",
    "location_from_self_link",
]
