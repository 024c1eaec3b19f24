"""
pytest configuration and shared fixtures.
"""

import pytest
from loguru import logger

from selflink_functions.functions import default_registry


RESOURCE_NAME = "tf-test-my-resource"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test and restore the import-time disabled state"""
    yield
    logger.remove()
    logger.disable("selflink_functions")


@pytest.fixture
def resource_name():
    return RESOURCE_NAME


@pytest.fixture
def valid_self_link():
    """Full compute instance self link"""
    return f"https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-c/instances/{RESOURCE_NAME}"


@pytest.fixture
def truncated_self_link():
    """Self link that stops at the zone"""
    return "https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-c"


@pytest.fixture
def valid_id():
    """Resource id (self link without scheme/host/API version)"""
    return f"projects/my-project/zones/us-central1-c/instances/{RESOURCE_NAME}"


@pytest.fixture
def repetitive_input():
    """Self link with repeated resource type segments"""
    return (
        "https://www.googleapis.com/compute/v1/projects/my-project/zones/us-central1-c"
        f"/instances/not-this-1/instances/not-this-2/instances/{RESOURCE_NAME}"
    )


@pytest.fixture
def registry():
    """Default registry in non-strict mode"""
    return default_registry(strict=False)
