from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    enabled: bool = False
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


# ----------------- ALLOCATION METHODS ---------------------


class UnitsMethodModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["units"] = "units"
    verbose: bool = False


class SubsetsMethodModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["subsets"] = "subsets"
    verbose: bool = False


class PointsMethodModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["points"] = "points"
    verbose: bool = False


class PairsMethodModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["pairs"] = "pairs"
    verbose: bool = False


MethodUnion = Annotated[
    UnitsMethodModel | SubsetsMethodModel | PointsMethodModel | PairsMethodModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class RunModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    method: MethodUnion = Field(default_factory=UnitsMethodModel)
    present: list[str] | None = None  # participant codes; None means everyone
    log: LogModel = LogModel()

    @field_validator("present", mode="before")
    @classmethod
    def _split_codes(cls, v):
        # "abd" on the command line means ["A", "B", "D"]
        if isinstance(v, str):
            return list(v)
        return v

    @field_validator("present")
    @classmethod
    def _single_char_upper(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        for code in v:
            if len(code) != 1:
                raise ValueError(f"participant code {code!r} must be a single character")
        return [c.upper() for c in v]
