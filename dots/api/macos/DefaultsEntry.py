"""One `defaults write` entry."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

DefaultsType = Literal["bool", "int", "float", "string", "array"]


class DefaultsEntry(BaseModel):
    """A key written to the macOS preference store."""

    model_config = ConfigDict(extra="forbid")

    domain: str = Field(..., description="Preference domain, e.g. com.apple.dock or NSGlobalDomain")
    key: str = Field(..., description="Preference key")
    type: DefaultsType = Field(..., description="Value type flag passed to `defaults write`")
    value: bool | int | float | str | list[str | int] = Field(..., description="Value to write")
    current_host: bool = Field(False, description="Write to the -currentHost domain")

    @model_validator(mode="after")
    def _check_value_type(self) -> "DefaultsEntry":
        value = self.value
        if self.type == "bool":
            ok = isinstance(value, bool)
        elif self.type == "int":
            ok = isinstance(value, int) and not isinstance(value, bool)
        elif self.type == "float":
            ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        elif self.type == "string":
            ok = isinstance(value, str)
        else:
            ok = isinstance(value, list)
        if not ok:
            raise ValueError(f"{self.domain} {self.key}: value {value!r} does not match type {self.type!r}")
        return self
