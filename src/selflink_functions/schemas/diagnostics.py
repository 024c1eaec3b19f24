"""
Diagnostics reported back to the caller of a function.

Errors mean the call produced no usable result; warnings are informational
and the call still succeeds.
"""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Diagnostic severity"""
    ERROR = "error"
    WARNING = "warning"


class Diagnostic(BaseModel):
    """A single error or warning, optionally tied to a function argument."""
    
    severity: Severity = Field(..., description="'error' or 'warning'")
    summary: str = Field(..., description="Short one-line summary")
    detail: str = Field("", description="Full message including the offending input")
    argument_index: Optional[int] = Field(
        None,
        ge=0,
        description="Zero-based index of the argument that caused this diagnostic"
    )
    
    def format(self) -> str:
        """Render as 'Error: summary: detail'"""
        text = f"{self.severity.value.capitalize()}: {self.summary}"
        if self.detail:
            text += f": {self.detail}"
        return text


class Diagnostics(BaseModel):
    """Ordered collection of diagnostics."""
    
    items: List[Diagnostic] = Field(default_factory=list)
    
    def add_error(self, summary: str, detail: str = "") -> None:
        self.items.append(Diagnostic(severity=Severity.ERROR, summary=summary, detail=detail))
    
    def add_argument_error(self, index: int, summary: str, detail: str = "") -> None:
        self.items.append(
            Diagnostic(severity=Severity.ERROR, summary=summary, detail=detail, argument_index=index)
        )
    
    def add_argument_warning(self, index: int, summary: str, detail: str = "") -> None:
        self.items.append(
            Diagnostic(severity=Severity.WARNING, summary=summary, detail=detail, argument_index=index)
        )
    
    def extend(self, other: "Diagnostics") -> None:
        """Append all diagnostics from another collection"""
        self.items.extend(other.items)
    
    def has_error(self) -> bool:
        return any(d.severity == Severity.ERROR for d in self.items)
    
    @property
    def errors(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.ERROR]
    
    @property
    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.items if d.severity == Severity.WARNING]
    