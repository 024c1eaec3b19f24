"""
Function metadata and call response models.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .diagnostics import Diagnostics


class FunctionParameter(BaseModel):
    """A positional function parameter"""
    
    name: str = Field(..., description="Parameter name (e.g., 'self_link')")
    type: str = Field("string", description="Parameter type")
    description: str = Field("", description="What the caller should pass")


class FunctionDefinition(BaseModel):
    """
    Definition exposed to the host runtime.
    
    Describes the function signature so callers can validate and document it.
    """
    
    name: str
    summary: str
    description: str = ""
    parameters: List[FunctionParameter] = Field(default_factory=list)
    return_type: str = "string"


class RunResponse(BaseModel):
    """Result of a function call plus any diagnostics raised while running it"""
    
    result: Optional[str] = None
    diagnostics: Diagnostics = Field(default_factory=Diagnostics)
    
    @property
    def ok(self) -> bool:
        return not self.diagnostics.has_error()
