"""
Custom exception hierarchy for self link functions.

All exceptions inherit from SelfLinkFunctionError base class.
AmbiguousMatchWarning is a warning category, not an error.
"""


class SelfLinkFunctionError(Exception):
    """Base exception for all self link function errors"""
    pass


class NoMatchError(SelfLinkFunctionError):
    """Input string doesn't contain the expected pattern"""
    
    def __init__(self, input_string: str, pattern):
        self.input = input_string
        self.pattern = pattern
        super().__init__(
            f"The input string \"{input_string}\" doesn't contain the expected "
            f"pattern \"{pattern.description}\"."
        )
    
    @property
    def summary(self) -> str:
        return f"No {self.pattern.element} is present in the input string"


class ArgumentError(SelfLinkFunctionError):
    """Wrong number or type of function arguments"""
    pass


class FunctionNotFoundError(SelfLinkFunctionError):
    """No function registered under the requested name"""
    pass


class DuplicateFunctionError(SelfLinkFunctionError):
    """Function name already registered"""
    pass


class AmbiguousMatchWarning(UserWarning):
    """Input string contains more than one match; the first one is used"""
    
    def __init__(self, input_string: str, pattern, match_count: int):
        self.input = input_string
        self.pattern = pattern
        self.match_count = match_count
        super().__init__(
            f"The input string \"{input_string}\" contains more than one match for "
            f"the pattern \"{pattern.description}\". The first found match will be used."
        )
    
    @property
    def summary(self) -> str:
        return f"Ambiguous input string could contain more than one {self.pattern.element}"
