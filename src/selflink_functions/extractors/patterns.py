"""
Patterns for the elements of a resource self link or id.

e.g. https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-c/instances/my-instance
"""

from .element_extractor import ElementPattern


# Last path segment; end-anchored so it matches at most once
RESOURCE_NAME_PATTERN = ElementPattern.compile(
    element="resource name",
    regex=r"/(?P<ResourceName>[^/]+)$",
    group="ResourceName",
    description="resourceType/{name}$",
)

PROJECT_PATTERN = ElementPattern.compile(
    element="project id",
    regex=r"projects/(?P<ProjectId>[^/]+)/",
    group="ProjectId",
    description="projects/{project}/",
)

REGION_PATTERN = ElementPattern.compile(
    element="region",
    regex=r"regions/(?P<Region>[^/]+)/",
    group="Region",
    description="regions/{region}/",
)

ZONE_PATTERN = ElementPattern.compile(
    element="zone",
    regex=r"zones/(?P<Zone>[^/]+)/",
    group="Zone",
    description="zones/{zone}/",
)

LOCATION_PATTERN = ElementPattern.compile(
    element="location",
    regex=r"locations/(?P<Location>[^/]+)/",
    group="Location",
    description="locations/{location}/",
)
