"""Exceptions raised by the case converters when an input is rejected."""


class CaseConversionError(Exception):
    """Base class for every input rejected by a converter."""


class NullInputError(CaseConversionError, ValueError):
    """Raised when the input is None."""

    def __init__(self) -> None:
        super().__init__("Input cannot be None")


class InputTypeError(CaseConversionError, TypeError):
    """Raised when the input is present but is not a string."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Input must be a string, got {type(value).__name__}")


class EmptyInputError(CaseConversionError, ValueError):
    """Raised when the input is blank after stripping whitespace."""

    def __init__(self) -> None:
        super().__init__("Input cannot be empty")


class LeadingDigitError(CaseConversionError, ValueError):
    """Raised when the stripped input starts with a digit."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"String cannot start with a number: {text!r}")
