"""
Element extraction from resource self links and ids.

A pattern holds one named capture group. Zero matches is an error, more than
one match is a warning and the left-most match wins.
"""

import re
import warnings
from dataclasses import dataclass
from typing import List, Tuple
from loguru import logger

from selflink_functions.exceptions import AmbiguousMatchWarning, ArgumentError, NoMatchError
from selflink_functions.schemas.diagnostics import Diagnostics


@dataclass(frozen=True)
class ElementPattern:
    """Compiled matcher plus the template used to expand its named group."""

    element: str  # Display name used in messages, e.g. "resource name"
    regex: re.Pattern
    template: str  # Must reference the named group, e.g. r"\g<ResourceName>"
    description: str  # Human-readable pseudo-regex used in errors and warnings

    @classmethod
    def compile(cls, element: str, regex: str, group: str, description: str) -> "ElementPattern":
        """
        Build a pattern from a regex string and the name of its capture group.

        Raises:
            ValueError: If the regex does not define the named group
        """
        compiled = re.compile(regex)
        if group not in compiled.groupindex:
            raise ValueError(f"Regex {regex!r} has no named group {group!r}")
        return cls(
            element=element,
            regex=compiled,
            template=rf"\g<{group}>",
            description=description,
        )

    def find_all(self, text: str) -> List[re.Match]:
        """All non-overlapping matches, left to right"""
        return list(self.regex.finditer(text))


class ElementExtractor:
    """
    Applies an ElementPattern to an input string and reports diagnostics.

    Stateless apart from the strict flag; safe to share between callers.
    """

    def __init__(self, strict: bool = False):
        """
        Args:
            strict: Treat ambiguous (multiple) matches as errors
        """
        self.strict = strict

    def extract(self, text: str, pattern: ElementPattern) -> Tuple[str, Diagnostics]:
        """
        Extract the pattern's element from text.

        Args:
            text: Self link or id
            pattern: Pattern to apply

        Returns:
            (value, diagnostics). value is "" when diagnostics has an error.
        """
        diagnostics = Diagnostics()
        matches = pattern.find_all(text)

        if not matches:
            error = NoMatchError(text, pattern)
            logger.debug(f"No {pattern.element} in {text!r}")
            diagnostics.add_argument_error(0, error.summary, str(error))
            return "", diagnostics

        if len(matches) > 1:
            warning = AmbiguousMatchWarning(text, pattern, len(matches))
            if self.strict:
                logger.debug(f"Rejecting {len(matches)} matches for {pattern.element} in {text!r}")
                diagnostics.add_argument_error(0, warning.summary, str(warning))
                return "", diagnostics
            logger.warning(f"{len(matches)} matches for {pattern.element} in {text!r}, using the first")
            diagnostics.add_argument_warning(0, warning.summary, str(warning))

        value = matches[0].expand(pattern.template)
        logger.debug(f"Extracted {pattern.element} {value!r} from {text!r}")
        return value, diagnostics


def get_element(text: str, pattern: ElementPattern) -> str:
    """
    Extract an element, raising instead of collecting diagnostics.

    Args:
        text: Self link or id
        pattern: Pattern to apply

    Returns:
        The expanded value of the first match

    Raises:
        ArgumentError: If text is not a string
        NoMatchError: If the pattern doesn't match

    Emits AmbiguousMatchWarning through the warnings module when more than
    one match is found.
    """
    if not isinstance(text, str):
        raise ArgumentError(f"Expected a string, got {type(text).__name__}")
    matches = pattern.find_all(text)
    if not matches:
        raise NoMatchError(text, pattern)
    if len(matches) > 1:
        warnings.warn(AmbiguousMatchWarning(text, pattern, len(matches)), stacklevel=2)
    return matches[0].expand(pattern.template)
