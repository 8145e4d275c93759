"""
Configuration values for the case conversion pipeline.

A converter is described by three independent choices: how strictly its
input is validated, how the text is split into tokens and how the tokens are
recased and joined. Each choice is a small immutable value so that presets
can be declared as a table rather than as separate functions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final


class CaseStyle(Enum):
    """Output style applied to the tokens."""

    CAMEL = "camel"
    DOT = "dot"
    KEBAB = "kebab"


class TokenizePolicy(Enum):
    """How the stripped input is split into tokens.

    ``SEPARATOR_RUN`` splits on runs of whitespace, underscores and hyphens
    and then drops any remaining non-alphanumeric character from each piece.
    ``NON_ALPHANUMERIC_RUN`` splits directly on runs of anything that is not
    an ASCII letter or digit.
    ``SPACE_SEPARATOR_RUN`` first drops everything except ASCII letters,
    digits, spaces, underscores and hyphens (tabs and newlines included), then
    splits on runs of spaces, underscores and hyphens.
    ``WHITESPACE_UNDERSCORE_RUN`` splits on runs of whitespace and underscores
    only and keeps every other character, hyphens and punctuation included.
    """

    SEPARATOR_RUN = "separator-run"
    NON_ALPHANUMERIC_RUN = "non-alphanumeric-run"
    SPACE_SEPARATOR_RUN = "space-separator-run"
    WHITESPACE_UNDERSCORE_RUN = "whitespace-underscore-run"


@dataclass(frozen=True)
class ValidationPolicy:
    """Which input contract violations raise instead of yielding ``""``."""

    reject_non_string: bool = True
    reject_empty: bool = True
    reject_leading_digit: bool = True


# Everything invalid collapses to an empty result
LENIENT_VALIDATION: Final = ValidationPolicy(
    reject_non_string=False,
    reject_empty=False,
    reject_leading_digit=False,
)

# None, wrong type, blank and leading digit all raise
STRICT_VALIDATION: Final = ValidationPolicy()

# Blank input is accepted and converts to ""
ALLOW_BLANK_VALIDATION: Final = ValidationPolicy(reject_empty=False)

# Only None and wrong type raise
TYPE_ONLY_VALIDATION: Final = ValidationPolicy(
    reject_empty=False,
    reject_leading_digit=False,
)
