"""Tests for the individual pipeline stages and the preset table."""

import pytest

from case_converter import PRESETS, CaseStyle, TokenizePolicy, ValidationPolicy, convert, get_preset
from case_converter.converter import join_tokens, split_camel_boundaries, tokenize, validate
from case_converter.errors import EmptyInputError, InputTypeError, LeadingDigitError, NullInputError
from case_converter.policy import LENIENT_VALIDATION, STRICT_VALIDATION, TYPE_ONLY_VALIDATION


class TestValidate:
    """Test the validation stage."""

    def test_strips_whitespace(self) -> None:
        """Test that surrounding whitespace is removed."""
        assert validate("  Robin Hood \n", STRICT_VALIDATION) == "Robin Hood"

    def test_lenient_coerces_everything(self) -> None:
        """Test that the lenient policy never raises."""
        for value in (None, 42, "", "   "):
            assert validate(value, LENIENT_VALIDATION) == ""
        assert validate("9lives", LENIENT_VALIDATION) == "9lives"

    @pytest.mark.parametrize(
        ("value", "error"),
        [
            (None, NullInputError),
            (42, InputTypeError),
            ("   ", EmptyInputError),
            (" 9lives", LeadingDigitError),
        ],
    )
    def test_strict_raises(self, value: object, error: type[Exception]) -> None:
        """Test that the strict policy raises the matching error."""
        with pytest.raises(error):
            validate(value, STRICT_VALIDATION)

    def test_type_only_policy(self) -> None:
        """Test that only None and wrong types raise under the type-only policy."""
        assert validate("", TYPE_ONLY_VALIDATION) == ""
        assert validate("9lives", TYPE_ONLY_VALIDATION) == "9lives"
        with pytest.raises(NullInputError):
            validate(None, TYPE_ONLY_VALIDATION)

    def test_none_checked_before_type(self) -> None:
        """Test that None is reported as missing rather than as the wrong type."""
        with pytest.raises(NullInputError):
            validate(None, ValidationPolicy(reject_empty=False, reject_leading_digit=False))

    def test_type_error_records_value(self) -> None:
        """Test that the rejected value is kept on the error."""
        with pytest.raises(InputTypeError) as exc_info:
            validate(3.5, STRICT_VALIDATION)

        assert exc_info.value.value == 3.5
        assert "float" in str(exc_info.value)


class TestTokenize:
    """Test the tokenize stage."""

    def test_separator_run_strips_inside_tokens(self) -> None:
        """Test that stray symbols are removed from tokens rather than splitting them."""
        assert tokenize("don't stop", TokenizePolicy.SEPARATOR_RUN) == ["dont", "stop"]

    def test_non_alphanumeric_run_splits_on_symbols(self) -> None:
        """Test that any symbol run splits tokens."""
        assert tokenize("don't stop", TokenizePolicy.NON_ALPHANUMERIC_RUN) == ["don", "t", "stop"]

    @pytest.mark.parametrize(
        "tokenizer",
        [TokenizePolicy.SEPARATOR_RUN, TokenizePolicy.NON_ALPHANUMERIC_RUN, TokenizePolicy.SPACE_SEPARATOR_RUN],
    )
    def test_empty_tokens_discarded(self, tokenizer: TokenizePolicy) -> None:
        """Test that consecutive separators do not produce empty tokens."""
        assert tokenize("a__b  --c", tokenizer) == ["a", "b", "c"]

    def test_space_separator_run_drops_other_whitespace(self) -> None:
        """Test that tabs and symbols are removed before splitting on spaces, underscores and hyphens."""
        assert tokenize("a\tb c_d!", TokenizePolicy.SPACE_SEPARATOR_RUN) == ["ab", "c", "d"]

    def test_whitespace_underscore_run_keeps_symbols(self) -> None:
        """Test that punctuation and hyphens stay inside tokens."""
        tokens = tokenize("user.Name  my-id__x", TokenizePolicy.WHITESPACE_UNDERSCORE_RUN)
        assert tokens == ["user.Name", "my-id", "x"]

    def test_whitespace_underscore_run_with_camel_split(self) -> None:
        """Test that camel boundaries become hyphens inside the kept tokens."""
        tokens = tokenize("myValue x", TokenizePolicy.WHITESPACE_UNDERSCORE_RUN, split_camel=True)
        assert tokens == ["my-Value", "x"]

    def test_split_camel_before_lowering(self) -> None:
        """Test that camel boundaries become separators when requested."""
        assert tokenize("helloWorld", TokenizePolicy.SEPARATOR_RUN) == ["helloWorld"]
        assert tokenize("helloWorld", TokenizePolicy.SEPARATOR_RUN, split_camel=True) == ["hello", "World"]

    def test_split_camel_boundaries(self) -> None:
        """Test that only lowercase to uppercase transitions get a hyphen."""
        assert split_camel_boundaries("HelloWorld") == "Hello-World"
        assert split_camel_boundaries("ABCdef") == "ABCdef"
        assert split_camel_boundaries("v2Api") == "v2Api"


class TestJoinTokens:
    """Test the recase and join stage."""

    def test_camel(self) -> None:
        """Test that camelCase capitalizes every token after the first."""
        assert join_tokens(["Robin", "HOod", "x1"], CaseStyle.CAMEL) == "robinHoodX1"

    def test_digits_unchanged(self) -> None:
        """Test that a token starting with a digit keeps it as is."""
        assert join_tokens(["animal", "001b"], CaseStyle.CAMEL) == "animal001b"

    def test_dot(self) -> None:
        """Test that dot.case lowercases and joins with dots."""
        assert join_tokens(["Robin", "Hood"], CaseStyle.DOT) == "robin.hood"

    def test_kebab(self) -> None:
        """Test that kebab-case lowercases and joins with hyphens."""
        assert join_tokens(["Robin", "Hood"], CaseStyle.KEBAB) == "robin-hood"

    @pytest.mark.parametrize("style", list(CaseStyle))
    def test_no_tokens(self, style: CaseStyle) -> None:
        """Test that no tokens give an empty string."""
        assert join_tokens([], style) == ""


class TestConvert:
    """Test the generic pipeline entry point."""

    def test_custom_combination(self) -> None:
        """Test a style and policy combination no preset uses."""
        result = convert("9 Robin  Hood", CaseStyle.KEBAB, policy=LENIENT_VALIDATION)
        assert result == "9-robin-hood"

    def test_defaults_are_strict(self) -> None:
        """Test that convert validates strictly by default."""
        with pytest.raises(LeadingDigitError):
            convert("9 lives", CaseStyle.DOT)

    def test_kebab_splits_camel_boundaries(self) -> None:
        """Test that the kebab style always splits camel boundaries."""
        assert convert("robinHood", CaseStyle.KEBAB) == "robin-hood"
        assert convert("robinHood", CaseStyle.DOT) == "robinhood"


class TestPresets:
    """Test the preset registry."""

    def test_names(self) -> None:
        """Test that every converter is registered."""
        assert set(PRESETS) == {"camel", "camel-strict", "camel-allow-blank", "kebab", "dot"}

    def test_preset_is_callable(self) -> None:
        """Test that a preset converts when called."""
        assert get_preset("dot")("Robin Hood") == "robin.hood"

    def test_unknown_preset(self) -> None:
        """Test that an unknown name lists the valid ones."""
        with pytest.raises(KeyError, match="camel-strict"):
            get_preset("snake")

    def test_presets_are_immutable(self) -> None:
        """Test that presets cannot be modified in place."""
        preset = get_preset("camel")
        with pytest.raises(AttributeError):
            preset.style = CaseStyle.DOT  # type: ignore[misc]
