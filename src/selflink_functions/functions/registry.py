"""
Registry of host-callable functions.

Functions are looked up by name and called with positional arguments.
"""

from typing import Any, Dict, List
from loguru import logger

from ..exceptions import DuplicateFunctionError, FunctionNotFoundError
from ..schemas.function import RunResponse
from .base import ProviderFunction


class FunctionRegistry:
    """Maps function names to ProviderFunction instances."""
    
    def __init__(self):
        self._functions: Dict[str, ProviderFunction] = {}
    
    def register(self, function: ProviderFunction) -> None:
        """
        Register a function under its name.
        
        Raises:
            DuplicateFunctionError: If the name is already registered
        """
        if function.name in self._functions:
            raise DuplicateFunctionError(f"Function already registered: {function.name}")
        self._functions[function.name] = function
        logger.debug(f"Registered function: {function.name}")
    
    def get(self, name: str) -> ProviderFunction:
        """
        Raises:
            FunctionNotFoundError: If no function has this name
        """
        try:
            return self._functions[name]
        except KeyError:
            raise FunctionNotFoundError(
                f"Unknown function: {name}. Available: {', '.join(self.names())}"
            ) from None
    
    def names(self) -> List[str]:
        return sorted(self._functions)
    
    def functions(self) -> List[ProviderFunction]:
        return [self._functions[name] for name in self.names()]
    
    def call(self, name: str, *arguments: Any) -> RunResponse:
        """Look up a function and run it with the given arguments"""
        function = self.get(name)
        response = function.run(arguments)
        logger.debug(
            f"{name}: result={response.result!r}, "
            f"{len(response.diagnostics.errors)} error(s), {len(response.diagnostics.warnings)} warning(s)"
        )
        return response
    
    def __contains__(self, name: str) -> bool:
        return name in self._functions
    
    def __len__(self) -> int:
        return len(self._functions)
