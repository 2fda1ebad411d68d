"""
Row templates.

A template is a plain string with `{field}` placeholders:

    template = create_template()
    template.set_template("Hello, {name}.")
    template.parse({"name": "world"})   # -> "Hello, world."
    template.parse({"oops": "world"})   # -> "Hello, {name}."

Only the "basic" engine ships. Other engines can be registered by name and
picked up by the reformatter without touching its code.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Protocol, Type

from .errors import ConfigurationError, TemplateDataError
from .rules import DEFAULT_TEMPLATE_ENGINE, PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN

logger = logging.getLogger(__name__)


class StringTemplate(Protocol):
    @property
    def template(self) -> str: ...

    def set_template(self, template: str) -> None: ...

    def parse(self, data: Mapping[str, str]) -> str: ...


class BasicStringTemplate:
    """
    Placeholder substitution by repeated str.replace.

    Rules:
    - Keys are applied in the mapping's iteration order.
    - Each key replaces every `{key}` across the whole current text, so a value
      that itself contains `{other}` can be picked up by a later key.
    - Placeholders without a matching key are left as-is.
    """

    def __init__(self, template: str = ""):
        self._template = ""
        self.set_template(template)

    @property
    def template(self) -> str:
        return self._template

    def set_template(self, template: str) -> None:
        if not isinstance(template, str):
            raise ConfigurationError("Template must be a string.")
        self._template = template

    def parse(self, data: Mapping[str, str]) -> str:
        parsed = self._template
        for key, value in data.items():
            if not isinstance(value, str):
                raise TemplateDataError(
                    f"Data passed to template parser must be strings; "
                    f"got {type(value).__name__} for {key!r}"
                )
            parsed = parsed.replace(f"{PLACEHOLDER_OPEN}{key}{PLACEHOLDER_CLOSE}", value)
        return parsed


_ENGINES: Dict[str, Type[StringTemplate]] = {
    DEFAULT_TEMPLATE_ENGINE: BasicStringTemplate,
}


def register_template_engine(name: str, engine: Type[StringTemplate]) -> None:
    if not isinstance(name, str) or not name:
        raise ConfigurationError("Template engine name must be a non-empty string.")
    if name in _ENGINES:
        logger.debug("replacing template engine %r", name)
    _ENGINES[name] = engine


def available_template_engines() -> List[str]:
    return sorted(_ENGINES)


def create_template(name: str = DEFAULT_TEMPLATE_ENGINE) -> StringTemplate:
    try:
        engine = _ENGINES[name]
    except KeyError:
        raise ConfigurationError(
            f'Unknown template engine "{name}". '
            f"Available: {', '.join(available_template_engines())}"
        ) from None
    return engine()
