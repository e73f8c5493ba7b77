"""
Exceptions raised by json2ts.
"""


class Json2TsError(Exception):
    """Base class for every json2ts failure."""


class InvalidRootNameError(Json2TsError, ValueError):
    """The caller-supplied root declaration name is not a usable identifier."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Invalid interface name: "{name}". Must be a valid TypeScript identifier.')


class MaxDepthExceededError(Json2TsError):
    """Input nesting went past ``ConvertOptions.max_depth``."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Maximum nesting depth of {max_depth} exceeded")


class SampleReadError(Json2TsError):
    """A streamed sample could not be read from a JSON file."""


class WriteFailure(Json2TsError):
    """Generated declarations could not be written to their destination."""
