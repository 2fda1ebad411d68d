"""
Core reformatting logic.

Use it like this:

    reformatter = Reformatter()
    reformatter.set_input_columns(["name", "species"])
    reformatter.set_row_template("{name} is a {species}.")
    reformatter.set_sort_by("name")           # optional
    reformatter.set_header("Some Facts:")     # optional
    reformatter.reformat("Rex, dog\nMike, person")
    # -> "Some Facts:\nMike is a person.\nRex is a dog."

or configure everything up front:

    Reformatter({
        "input_columns": ["name", "species"],
        "row_template": "{name} is a {species}.",
        "header": "Some Facts:",
        "sort_by": "name",
    })
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .errors import ConfigurationError, MalformedInputError
from .models import ReformatSettings
from .rules import DEFAULT_TEMPLATE_ENGINE, FIELD_DELIMITER, LINE_SEPARATOR
from .template import StringTemplate, create_template

logger = logging.getLogger(__name__)

Row = Dict[str, str]

# Applied in this order so sort_by is checked against the new columns.
_SETTING_KEYS = ("input_columns", "header", "row_template", "sort_by")


def _split_line(line: str) -> List[str]:
    return FIELD_DELIMITER.split(line)


def parse_rows(text: str, columns: Sequence[str]) -> List[Row]:
    """
    Turn raw input into one row per non-blank line.

    Rules:
    - Leading/trailing whitespace is stripped from the input and from each line.
    - Blank lines are skipped.
    - Every remaining line must split into exactly len(columns) fields.
    """
    if not isinstance(text, str):
        raise MalformedInputError(f"Input must be a string, not {type(text).__name__}.")

    rows: List[Row] = []
    for i, line in enumerate(text.strip().split(LINE_SEPARATOR)):
        line = line.strip()
        if not line:
            continue

        cells = _split_line(line)
        if len(cells) != len(columns):
            raise MalformedInputError(
                f"Your input data is malformed: line {i + 1} has {len(cells)} "
                f"field(s), expected {len(columns)}.",
                line=i + 1,
                expected=len(columns),
                found=len(cells),
            )
        rows.append(dict(zip(columns, cells)))

    return rows


def sort_rows(rows: List[Row], sort_by: Optional[str]) -> List[Row]:
    """Stable sort on one field; ties keep their input order."""
    if sort_by is None:
        return rows
    return sorted(rows, key=lambda row: row[sort_by])


class Reformatter:
    """Reformats each line of a comma-separated string through a row template."""

    def __init__(
        self,
        settings: Union[Mapping[str, Any], ReformatSettings, None] = None,
        *,
        engine: str = DEFAULT_TEMPLATE_ENGINE,
    ):
        self._engine = engine
        self._input_columns: Tuple[str, ...] = ()
        self._header: Optional[str] = None
        self._sort_by: Optional[str] = None
        self._row_template = create_template(engine)
        self._row_template_set = False

        if settings is not None:
            self.configure(settings)

    # --- configuration ---

    def configure(self, settings: Union[Mapping[str, Any], ReformatSettings]) -> None:
        """Apply every non-None setting; unknown keys are rejected."""
        if isinstance(settings, ReformatSettings):
            settings = settings.model_dump(include=set(ReformatSettings.model_fields))
        elif not isinstance(settings, Mapping):
            raise ConfigurationError("Settings must be a mapping or ReformatSettings.")

        unknown = sorted(str(key) for key in settings if key not in _SETTING_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown setting(s): {', '.join(unknown)}")

        if settings.get("input_columns") is not None:
            self.set_input_columns(settings["input_columns"])
        if settings.get("header") is not None:
            self.set_header(settings["header"])
        if settings.get("row_template") is not None:
            self.set_row_template(settings["row_template"])
        if settings.get("sort_by") is not None:
            self.set_sort_by(settings["sort_by"])

    def set_input_columns(self, columns: Sequence[str]) -> None:
        """Map the positional fields of each input line to template labels."""
        if isinstance(columns, str):
            raise ConfigurationError("Your columns must be a sequence of strings, not a string.")
        try:
            columns = tuple(columns)
        except TypeError:
            raise ConfigurationError("Your columns must be a sequence of strings.") from None
        for column in columns:
            if not isinstance(column, str):
                raise ConfigurationError("Your columns must be strings!")

        if self._sort_by is not None and self._sort_by not in columns:
            logger.warning("sort field %r is not among the new columns; sorting disabled", self._sort_by)
            self._sort_by = None

        self._input_columns = columns
        logger.debug("input columns set to %s", columns)

    def set_header(self, header: Optional[str] = None) -> None:
        """Set a line to print before the rows. Call without arguments to clear it."""
        if header is not None and not isinstance(header, str):
            raise ConfigurationError("Header should be a string.")
        self._header = header

    def set_row_template(self, template: str) -> None:
        self._row_template.set_template(template)
        self._row_template_set = True

    def set_sort_by(self, field: Optional[str] = None) -> None:
        """Sort rows by one of the input columns. Call without arguments to keep input order."""
        if field is None:
            self._sort_by = None
            return
        if not isinstance(field, str):
            raise ConfigurationError('"Sort by" field should be a string.')
        if field not in self._input_columns:
            raise ConfigurationError(
                f'The field "{field}" is not in the currently configured input columns.'
            )
        self._sort_by = field

    @property
    def input_columns(self) -> Tuple[str, ...]:
        return self._input_columns

    @property
    def header(self) -> Optional[str]:
        return self._header

    @property
    def row_template(self) -> Optional[str]:
        return self._row_template.template if self._row_template_set else None

    @property
    def sort_by(self) -> Optional[str]:
        return self._sort_by

    @property
    def settings(self) -> ReformatSettings:
        return ReformatSettings(
            input_columns=list(self._input_columns),
            header=self._header,
            row_template=self.row_template,
            sort_by=self._sort_by,
        )

    def copy(self) -> "Reformatter":
        """An independent Reformatter with the same configuration."""
        return Reformatter(self.settings, engine=self._engine)

    # --- reformatting ---

    def _snapshot(self) -> Tuple[Tuple[str, ...], Optional[str], Optional[str], StringTemplate]:
        columns, sort_by, header = self._input_columns, self._sort_by, self._header
        template_set, template_text = self._row_template_set, self._row_template.template

        if not columns:
            raise ConfigurationError("Cannot process CSV string without first setting input columns.")
        if not template_set:
            raise ConfigurationError("Cannot process CSV string without first setting a row template.")

        template = create_template(self._engine)
        template.set_template(template_text)
        return columns, sort_by, header, template

    @staticmethod
    def _render(rows: Sequence[Row], header: Optional[str], template: StringTemplate) -> str:
        lines: List[str] = []
        if header:
            lines.append(header)
        lines.extend(template.parse(row) for row in rows)
        return LINE_SEPARATOR.join(lines)

    def reformat_rows(self, text: str) -> List[Row]:
        """Parsed and, if configured, sorted rows of `text`."""
        columns, sort_by, _, _ = self._snapshot()
        return sort_rows(parse_rows(text, columns), sort_by)

    def render(self, rows: Sequence[Row]) -> str:
        """Header (if any) followed by one templated line per row, newline-joined."""
        _, _, header, template = self._snapshot()
        return self._render(rows, header, template)

    def reformat(self, text: str) -> str:
        """
        Render every row of `text` through the row template, header first.

        The configuration is read once when the call starts; changes made
        while the call runs apply to the next call.
        """
        columns, sort_by, header, template = self._snapshot()
        rows = sort_rows(parse_rows(text, columns), sort_by)
        logger.debug("reformatting %d row(s), sorted_by=%s", len(rows), sort_by)
        return self._render(rows, header, template)
