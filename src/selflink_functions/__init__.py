"""
Extract named elements from cloud resource self links and ids.
"""

from loguru import logger

from selflink_functions.extractors.element_extractor import (
    ElementExtractor,
    ElementPattern,
    get_element,
)
from selflink_functions.functions import FunctionRegistry, default_registry

__version__ = "1.0.0"

__all__ = [
    "ElementExtractor",
    "ElementPattern",
    "get_element",
    "FunctionRegistry",
    "default_registry",
    "__version__",
]

# Silent until the application opts in via setup_logger()
logger.disable("selflink_functions")
