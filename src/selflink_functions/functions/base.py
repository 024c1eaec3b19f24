"""
Base class for host-callable functions.

All functions inherit from this to ensure consistent interface.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence

from ..schemas.diagnostics import Diagnostics
from ..schemas.function import FunctionDefinition, RunResponse


class ProviderFunction(ABC):
    """Base class for all functions exposed to the host runtime"""
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Name the function is registered and called under"""
        pass
    
    @abstractmethod
    def definition(self) -> FunctionDefinition:
        """Return signature and documentation"""
        pass
    
    @abstractmethod
    def run(self, arguments: Sequence[Any]) -> RunResponse:
        """
        Run the function.
        
        Args:
            arguments: Positional arguments from the caller
        
        Returns:
            RunResponse with result set only when no errors occurred
        """
        pass
    
    def load_arguments(self, arguments: Sequence[Any], diagnostics: Diagnostics) -> List[str]:
        """
        Check arguments against the definition's parameters.
        
        Args:
            arguments: Positional arguments from the caller
            diagnostics: Collection that receives argument errors
        
        Returns:
            Arguments as a list; only meaningful when no error was added
        """
        parameters = self.definition().parameters
        
        if len(arguments) != len(parameters):
            diagnostics.add_error(
                "Invalid number of arguments",
                f"Function \"{self.name}\" expects {len(parameters)} argument(s), got {len(arguments)}."
            )
            return []
        
        for index, (value, parameter) in enumerate(zip(arguments, parameters)):
            if parameter.type == "string" and not isinstance(value, str):
                diagnostics.add_argument_error(
                    index,
                    "Invalid argument type",
                    f"Parameter \"{parameter.name}\" must be a string, got {type(value).__name__}."
                )
        
        return list(arguments)
