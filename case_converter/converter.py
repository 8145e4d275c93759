"""
String case conversion pipeline.

Every converter runs the same three stages: the input is validated and
stripped, split into tokens, and the tokens are recased and
joined for the target style. The public converters at the bottom of this
module are presets of that pipeline which differ only in validation
strictness and tokenizer.
"""

import re
from dataclasses import dataclass
from typing import Final

from case_converter.errors import (
    EmptyInputError,
    InputTypeError,
    LeadingDigitError,
    NullInputError,
)
from case_converter.policy import (
    ALLOW_BLANK_VALIDATION,
    LENIENT_VALIDATION,
    STRICT_VALIDATION,
    TYPE_ONLY_VALIDATION,
    CaseStyle,
    TokenizePolicy,
    ValidationPolicy,
)

# Regex patterns for tokenization
_SEPARATOR_RUN_PATTERN: Final = re.compile(r"[\s_-]+")
_NON_ALPHANUMERIC_RUN_PATTERN: Final = re.compile(r"[^a-zA-Z0-9]+")
_SPACE_SEPARATOR_RUN_PATTERN: Final = re.compile(r"[ _-]+")
_NOT_SPACE_SEPARATOR_OR_ALPHANUMERIC_PATTERN: Final = re.compile(r"[^a-zA-Z0-9 _-]+")
_WHITESPACE_UNDERSCORE_RUN_PATTERN: Final = re.compile(r"[\s_]+")
_LOWER_UPPER_PATTERN: Final = re.compile(r"([a-z])([A-Z])")
_LEADING_DIGIT_PATTERN: Final = re.compile(r"[0-9]")

_JOIN_SEPARATORS: Final = {
    CaseStyle.CAMEL: "",
    CaseStyle.DOT: ".",
    CaseStyle.KEBAB: "-",
}


def validate(value: object, policy: ValidationPolicy) -> str:
    """Check ``value`` against ``policy`` and return it stripped.

    Args:
        value: Raw input of any type.
        policy: Which contract violations raise.

    Returns:
        The stripped string, or ``""`` when the policy tolerates the violation.

    Raises:
        NullInputError: If value is None and non-strings are rejected.
        InputTypeError: If value is not a string and non-strings are rejected.
        EmptyInputError: If the stripped value is blank and blanks are rejected.
        LeadingDigitError: If the stripped value starts with a digit and that is rejected.
    """
    if value is None:
        if policy.reject_non_string:
            raise NullInputError
        return ""

    if not isinstance(value, str):
        if policy.reject_non_string:
            raise InputTypeError(value)
        return ""

    text = value.strip()
    if not text:
        if policy.reject_empty:
            raise EmptyInputError
        return ""

    if policy.reject_leading_digit and _LEADING_DIGIT_PATTERN.match(text):
        raise LeadingDigitError(text)

    return text


def split_camel_boundaries(text: str) -> str:
    """Insert a hyphen wherever a lowercase letter is followed by an uppercase one.

    Examples:
        >>> split_camel_boundaries("HelloWorld")
        'Hello-World'
        >>> split_camel_boundaries("getHTTPResponse")
        'get-HTTPResponse'
    """
    return _LOWER_UPPER_PATTERN.sub(r"\1-\2", text)


def tokenize(
    text: str,
    tokenizer: TokenizePolicy,
    *,
    split_camel: bool = False,
) -> list[str]:
    """Split text into non-empty tokens.

    Args:
        text: Stripped input.
        tokenizer: Splitting policy.
        split_camel: Treat lowercase-to-uppercase transitions as separators.
            Applied before any case change so the boundaries are still visible.

    Returns:
        Tokens in input order with their original case.

    Examples:
        >>> tokenize("Foo_bar-baz", TokenizePolicy.SEPARATOR_RUN)
        ['Foo', 'bar', 'baz']
        >>> tokenize("some-mixed_string.example", TokenizePolicy.NON_ALPHANUMERIC_RUN)
        ['some', 'mixed', 'string', 'example']
        >>> tokenize("hello.world_again", TokenizePolicy.WHITESPACE_UNDERSCORE_RUN)
        ['hello.world', 'again']
    """
    if split_camel:
        text = split_camel_boundaries(text)

    if tokenizer is TokenizePolicy.SEPARATOR_RUN:
        pieces = [_NON_ALPHANUMERIC_RUN_PATTERN.sub("", piece) for piece in _SEPARATOR_RUN_PATTERN.split(text)]
    elif tokenizer is TokenizePolicy.SPACE_SEPARATOR_RUN:
        cleaned = _NOT_SPACE_SEPARATOR_OR_ALPHANUMERIC_PATTERN.sub("", text)
        pieces = _SPACE_SEPARATOR_RUN_PATTERN.split(cleaned)
    elif tokenizer is TokenizePolicy.WHITESPACE_UNDERSCORE_RUN:
        pieces = _WHITESPACE_UNDERSCORE_RUN_PATTERN.split(text)
    else:
        pieces = _NON_ALPHANUMERIC_RUN_PATTERN.split(text)

    return [piece for piece in pieces if piece]


def _capitalize_token(token: str) -> str:
    lower = token.lower()
    return lower[:1].upper() + lower[1:]


def join_tokens(tokens: list[str], style: CaseStyle) -> str:
    """Recase tokens and join them for ``style``.

    Examples:
        >>> join_tokens(["Robin", "HOod"], CaseStyle.CAMEL)
        'robinHood'
        >>> join_tokens(["Robin", "Hood"], CaseStyle.DOT)
        'robin.hood'
    """
    if not tokens:
        return ""

    if style is CaseStyle.CAMEL:
        recased = [tokens[0].lower(), *(_capitalize_token(token) for token in tokens[1:])]
    else:
        recased = [token.lower() for token in tokens]

    return _JOIN_SEPARATORS[style].join(recased)


def convert(
    value: object,
    style: CaseStyle,
    *,
    policy: ValidationPolicy = STRICT_VALIDATION,
    tokenizer: TokenizePolicy = TokenizePolicy.SEPARATOR_RUN,
) -> str:
    """Run the full validate, tokenize and join pipeline.

    Args:
        value: Raw input of any type.
        style: Target case style.
        policy: Validation strictness.
        tokenizer: Splitting policy.

    Returns:
        The converted string.
    """
    text = validate(value, policy)
    if not text:
        return ""
    tokens = tokenize(text, tokenizer, split_camel=style is CaseStyle.KEBAB)
    return join_tokens(tokens, style)


@dataclass(frozen=True)
class ConverterPreset:
    """A named combination of style, validation and tokenizer."""

    name: str
    style: CaseStyle
    validation: ValidationPolicy
    tokenizer: TokenizePolicy
    description: str = ""

    def __call__(self, value: object) -> str:
        return convert(value, self.style, policy=self.validation, tokenizer=self.tokenizer)


CAMEL_LENIENT: Final = ConverterPreset(
    name="camel",
    style=CaseStyle.CAMEL,
    validation=LENIENT_VALIDATION,
    tokenizer=TokenizePolicy.NON_ALPHANUMERIC_RUN,
    description="camelCase; invalid input converts to an empty string",
)
CAMEL_STRICT: Final = ConverterPreset(
    name="camel-strict",
    style=CaseStyle.CAMEL,
    validation=STRICT_VALIDATION,
    tokenizer=TokenizePolicy.SEPARATOR_RUN,
    description="camelCase; rejects None, non-strings, blank input and a leading digit",
)
CAMEL_ALLOW_BLANK: Final = ConverterPreset(
    name="camel-allow-blank",
    style=CaseStyle.CAMEL,
    validation=ALLOW_BLANK_VALIDATION,
    tokenizer=TokenizePolicy.SPACE_SEPARATOR_RUN,
    description="camelCase; like camel-strict but blank input converts to an empty string",
)
KEBAB: Final = ConverterPreset(
    name="kebab",
    style=CaseStyle.KEBAB,
    validation=TYPE_ONLY_VALIDATION,
    tokenizer=TokenizePolicy.WHITESPACE_UNDERSCORE_RUN,
    description="kebab-case; rejects None and non-strings only",
)
DOT: Final = ConverterPreset(
    name="dot",
    style=CaseStyle.DOT,
    validation=STRICT_VALIDATION,
    tokenizer=TokenizePolicy.NON_ALPHANUMERIC_RUN,
    description="dot.case; rejects None, non-strings, blank input and a leading digit",
)

PRESETS: Final[dict[str, ConverterPreset]] = {
    preset.name: preset for preset in (CAMEL_LENIENT, CAMEL_STRICT, CAMEL_ALLOW_BLANK, KEBAB, DOT)
}


def get_preset(name: str) -> ConverterPreset:
    """Look up a preset by name.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        msg = f"Unknown preset {name!r}, expected one of: {', '.join(PRESETS)}"
        raise KeyError(msg) from None


def to_camel_case(value: object) -> str:
    """Convert a string into camelCase, returning ``""`` for anything invalid.

    Examples:
        >>> to_camel_case("first name")
        'firstName'
        >>> to_camel_case("SCREEN_NAME")
        'screenName'
        >>> to_camel_case(123)
        ''
    """
    return CAMEL_LENIENT(value)


def camel_case_strict(value: object) -> str:
    """Convert a string into camelCase.

    Args:
        value: String to convert. Surrounding whitespace is ignored.

    Returns:
        camelCase string.

    Raises:
        NullInputError: If value is None.
        InputTypeError: If value is not a string.
        EmptyInputError: If value is blank.
        LeadingDigitError: If value starts with a digit.

    Examples:
        >>> camel_case_strict("Robin_HOod")
        'robinHood'
        >>> camel_case_strict("Terestial Animal001")
        'terestialAnimal001'
    """
    return CAMEL_STRICT(value)


def camel_case_allow_blank(value: object) -> str:
    """Convert a string into camelCase, mapping blank input to ``""``.

    Only spaces, underscores and hyphens separate words. Every other
    non-alphanumeric character is dropped first, so tabs and newlines inside
    the value join the words around them.

    Examples:
        >>> camel_case_allow_blank("  Foo_bar-baz ")
        'fooBarBaz'
        >>> camel_case_allow_blank("a\\tb")
        'ab'
    """
    return CAMEL_ALLOW_BLANK(value)


def to_kebab_case(value: object) -> str:
    """Convert a string into kebab-case.

    Runs of whitespace and underscores become a single hyphen and camelCase
    boundaries count as separators. Every other character, including
    punctuation and existing hyphens, is kept. Blank input and a leading
    digit are accepted.

    Raises:
        NullInputError: If value is None.
        InputTypeError: If value is not a string.

    Examples:
        >>> to_kebab_case("HelloWorld")
        'hello-world'
        >>> to_kebab_case("hello_world")
        'hello-world'
        >>> to_kebab_case("user.Name")
        'user.name'
    """
    return KEBAB(value)


def dot_case(value: object) -> str:
    """Convert a string into dot.case.

    Raises:
        NullInputError: If value is None.
        InputTypeError: If value is not a string.
        EmptyInputError: If value is blank.
        LeadingDigitError: If value starts with a digit.

    Examples:
        >>> dot_case("Robin Hood")
        'robin.hood'
        >>> dot_case("some-mixed_string.example")
        'some.mixed.string.example'
    """
    return DOT(value)
