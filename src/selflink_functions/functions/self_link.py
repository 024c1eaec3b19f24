"""
Functions that extract one element from a resource self link or id.
"""

from typing import Any, Optional, Sequence
from loguru import logger

from ..config import settings
from ..extractors.element_extractor import ElementExtractor, ElementPattern
from ..extractors.patterns import (
    LOCATION_PATTERN,
    PROJECT_PATTERN,
    REGION_PATTERN,
    RESOURCE_NAME_PATTERN,
    ZONE_PATTERN,
)
from ..schemas.diagnostics import Diagnostics
from ..schemas.function import FunctionDefinition, FunctionParameter, RunResponse
from .base import ProviderFunction


EXAMPLE_SELF_LINK = "https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-c/instances/my-instance"
EXAMPLE_ID = "projects/my-project/zones/us-central1-c/instances/my-instance"

SELF_LINK_PARAMETER = FunctionParameter(
    name="self_link",
    type="string",
    description=(
        f"A self link of a resource, or an id. For example, both \"{EXAMPLE_SELF_LINK}\" "
        f"and \"{EXAMPLE_ID}\" are valid inputs"
    ),
)


class SelfLinkFunction(ProviderFunction):
    """Takes one self link or id and returns the element matched by a pattern."""
    
    def __init__(
        self,
        name: str,
        pattern: ElementPattern,
        summary: str,
        description: str,
        strict: Optional[bool] = None
    ):
        self._name = name
        self.pattern = pattern
        self.summary = summary
        self.description = description
        self.strict = settings.strict_matching if strict is None else strict
    
    @property
    def name(self) -> str:
        return self._name
    
    def definition(self) -> FunctionDefinition:
        return FunctionDefinition(
            name=self._name,
            summary=self.summary,
            description=self.description,
            parameters=[SELF_LINK_PARAMETER],
            return_type="string",
        )
    
    def run(self, arguments: Sequence[Any]) -> RunResponse:
        response = RunResponse()
        
        args = self.load_arguments(arguments, response.diagnostics)
        if response.diagnostics.has_error():
            logger.debug(f"{self._name}: argument errors, not running")
            return response
        
        value, diagnostics = ElementExtractor(strict=self.strict).extract(args[0], self.pattern)
        response.diagnostics.extend(diagnostics)
        if response.diagnostics.has_error():
            return response
        
        response.result = value
        return response


def resource_name_from_self_link(strict: Optional[bool] = None) -> SelfLinkFunction:
    return SelfLinkFunction(
        name="resource_name_from_self_link",
        pattern=RESOURCE_NAME_PATTERN,
        summary="Returns the resource name within the resource self link or id provided as an argument.",
        description=(
            "Takes a single string argument, which should be a self link or id of a resource. "
            "This function will either return the resource's short name from the input string or "
            "raise an error. The function returns the last element in that path before the end of "
            f"the input string, e.g. when the function is passed the self link \"{EXAMPLE_SELF_LINK}\" "
            "as an argument it will return \"my-instance\"."
        ),
        strict=strict,
    )


def project_from_self_link(strict: Optional[bool] = None) -> SelfLinkFunction:
    return SelfLinkFunction(
        name="project_from_self_link",
        pattern=PROJECT_PATTERN,
        summary="Returns the project within the resource self link or id provided as an argument.",
        description=(
            "Takes a single string argument, which should be a self link or id of a resource. "
            "This function will either return the project id from the input string or raise an "
            "error due to no project being present in the string. The function uses the presence "
            "of \"projects/{project}/\" in the input string to identify the project id, e.g. "
            f"\"{EXAMPLE_SELF_LINK}\" returns \"my-project\"."
        ),
        strict=strict,
    )


def region_from_self_link(strict: Optional[bool] = None) -> SelfLinkFunction:
    return SelfLinkFunction(
        name="region_from_self_link",
        pattern=REGION_PATTERN,
        summary="Returns the region within the resource self link or id provided as an argument.",
        description=(
            "Takes a single string argument, which should be a self link or id of a resource. "
            "This function will either return the region from the input string or raise an error "
            "due to no region being present in the string. The function uses the presence of "
            "\"regions/{region}/\" in the input string to identify the region."
        ),
        strict=strict,
    )


def zone_from_self_link(strict: Optional[bool] = None) -> SelfLinkFunction:
    return SelfLinkFunction(
        name="zone_from_self_link",
        pattern=ZONE_PATTERN,
        summary="Returns the zone within the resource self link or id provided as an argument.",
        description=(
            "Takes a single string argument, which should be a self link or id of a resource. "
            "This function will either return the zone from the input string or raise an error "
            "due to no zone being present in the string. The function uses the presence of "
            "\"zones/{zone}/\" in the input string to identify the zone, e.g. "
            f"\"{EXAMPLE_SELF_LINK}\" returns \"us-central1-c\"."
        ),
        strict=strict,
    )


def location_from_self_link(strict: Optional[bool] = None) -> SelfLinkFunction:
    return SelfLinkFunction(
        name="location_from_self_link",
        pattern=LOCATION_PATTERN,
        summary="Returns the location within the resource self link or id provided as an argument.",
        description=(
            "Takes a single string argument, which should be a self link or id of a resource. "
            "This function will either return the location from the input string or raise an "
            "error due to no location being present in the string. The function uses the presence "
            "of \"locations/{location}/\" in the input string to identify the location."
        ),
        strict=strict,
    )
