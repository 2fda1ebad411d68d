from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ReformatSettings(BaseModel):
    """Everything a Reformatter can be configured with."""

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    input_columns: List[str] = Field(default_factory=list, examples=[["greeting", "name"]])
    header: Optional[str] = Field(default=None, examples=["All Opportunities"])
    row_template: Optional[str] = Field(default=None, examples=["{greeting}, my name is {name}"])
    sort_by: Optional[str] = Field(default=None, examples=["name"])

    @model_validator(mode="after")
    def _sort_by_is_a_column(self) -> "ReformatSettings":
        if self.sort_by is not None and self.sort_by not in self.input_columns:
            raise ValueError(f'The field "{self.sort_by}" is not in the configured input columns.')
        return self


class ReformatRequest(ReformatSettings):
    input: str = Field(examples=["hi, mike\nhey, michael"])


class ReformatReport(BaseModel):
    rows: int = 0
    columns: int = 0
    sorted_by: Optional[str] = None
    header: Optional[str] = None
    sha256: str
    deterministic: bool = True


class ReformatResponse(BaseModel):
    output: str
    report: ReformatReport


class EnginesResponse(BaseModel):
    engines: List[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    ok: bool = True
