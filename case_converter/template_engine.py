"""
Jinja2 filters for the case converters.

Case conversion is mostly needed while generating code or configuration
from templates, where free-form names have to become identifiers. This
module exposes every converter as a template filter and offers an
environment with them registered. Templates are rendered from strings only;
loading template files is left to the caller's own environment, which can
take the filters through ``register_filters``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from jinja2 import Environment

from case_converter.converter import (
    camel_case_allow_blank,
    camel_case_strict,
    dot_case,
    to_camel_case,
    to_kebab_case,
)

# Register filters that will be available in Jinja templates
FILTERS: dict[str, Callable[[object], str]] = {
    "camel_case": to_camel_case,
    "camel_case_strict": camel_case_strict,
    "camel_case_allow_blank": camel_case_allow_blank,
    "kebab_case": to_kebab_case,
    "dot_case": dot_case,
}


def register_filters(env: Environment) -> Environment:
    """Add the case filters to an existing environment and return it."""
    env.filters.update(FILTERS)
    return env


class CaseTemplateEngine:
    """Renders inline templates with the case filters registered."""

    def __init__(self) -> None:
        self.env = register_filters(Environment(trim_blocks=True, lstrip_blocks=True))

    def render_string(self, source: str, context: dict[str, Any]) -> str:
        """Render an inline template with the given context."""
        return self.env.from_string(source).render(**context)
