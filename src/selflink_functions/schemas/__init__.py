"""
Pydantic models for diagnostics and function metadata.
"""

from .diagnostics import Diagnostic, Diagnostics, Severity
from .function import FunctionDefinition, FunctionParameter, RunResponse

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "FunctionDefinition",
    "FunctionParameter",
    "RunResponse",
]
