#!/usr/bin/env python3
"""
Passphrase Generator - Exception Classes
Exception hierarchy shared by the sampling core and the CLI.
"""


class PassgenError(Exception):
    """Base class for every generator error"""

    def __init__(self, message: str, context: str = ""):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.context:
            return f"[{self.context}] {self.message}"
        return self.message


class InvalidTarget(PassgenError):
    """Raised for an unusable entropy, length or count request

    Examples:
        - bits target is zero, negative or not finite
        - explicit length below 1
        - dictionary too small to carry any entropy
    """

    def __init__(self, message: str, target: str = ""):
        self.target = target
        super().__init__(message, context="target")


class InvalidDiceSpec(PassgenError):
    """Raised when a die has fewer than 2 or more than 144 sides"""

    def __init__(self, message: str, sides: int = 0):
        self.sides = sides
        super().__init__(message, context="dice")


class InvalidRange(PassgenError):
    """Raised when a sampling range below 2 is requested"""

    def __init__(self, message: str, size: int = 0, context: str = "range"):
        self.size = size
        super().__init__(message, context=context)


class EmptyDictionary(InvalidRange):
    """Raised when a dictionary holds fewer than 2 units"""

    def __init__(self, message: str, size: int = 0, name: str = ""):
        self.name = name
        super().__init__(message, size=size, context="dictionary")


class EntropySourceFailure(PassgenError):
    """Raised when the operating system RNG cannot be read

    Fatal. The call is never retried and no weaker source is substituted.
    """

    def __init__(self, message: str, source: str = ""):
        self.source = source
        super().__init__(message, context="entropy")


class DictionaryLoadError(PassgenError):
    """Raised when an external word list cannot be read

    Examples:
        - file does not exist or is not readable
        - file exceeds the size limit
        - file is not valid UTF-8
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message, context="dictionary")


class ConfigurationError(PassgenError):
    """Raised for invalid or conflicting options"""

    def __init__(self, message: str, param_name: str = ""):
        self.param_name = param_name
        super().__init__(message, context="config")
