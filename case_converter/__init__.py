"""
String case converters

Converts free-form text to camelCase, kebab-case and dot.case through one
validate, tokenize and join pipeline with per-converter validation presets.
"""

from .converter import (
    PRESETS,
    ConverterPreset,
    camel_case_allow_blank,
    camel_case_strict,
    convert,
    dot_case,
    get_preset,
    to_camel_case,
    to_kebab_case,
)
from .errors import (
    CaseConversionError,
    EmptyInputError,
    InputTypeError,
    LeadingDigitError,
    NullInputError,
)
from .policy import CaseStyle, TokenizePolicy, ValidationPolicy

__version__ = "1.0.0"

__all__ = [
    "PRESETS",
    "CaseConversionError",
    "CaseStyle",
    "ConverterPreset",
    "EmptyInputError",
    "InputTypeError",
    "LeadingDigitError",
    "NullInputError",
    "TokenizePolicy",
    "ValidationPolicy",
    "camel_case_allow_blank",
    "camel_case_strict",
    "convert",
    "dot_case",
    "get_preset",
    "to_camel_case",
    "to_kebab_case",
]
