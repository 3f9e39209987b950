"""Domain models for schemes and template descriptors."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr

COLOR_SLOTS: tuple[str, ...] = tuple(f"base0{digit}" for digit in "0123456789ABCDEF")


class Palette(BaseModel):
    """Contents of one scheme file."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    scheme: StrictStr = Field(..., description="Human readable scheme name")
    author: StrictStr = Field(..., description="Scheme author")
    base00: StrictStr
    base01: StrictStr
    base02: StrictStr
    base03: StrictStr
    base04: StrictStr
    base05: StrictStr
    base06: StrictStr
    base07: StrictStr
    base08: StrictStr
    base09: StrictStr
    base0A: StrictStr
    base0B: StrictStr
    base0C: StrictStr
    base0D: StrictStr
    base0E: StrictStr
    base0F: StrictStr


class Scheme(Palette):
    """A palette keyed by the base name of its source file."""

    name: StrictStr = Field(..., description="Scheme key derived from the file name")

    @property
    def display_name(self) -> str:
        return self.scheme

    @property
    def colors(self) -> dict[str, str]:
        return {slot: getattr(self, slot) for slot in COLOR_SLOTS}

    def bindings(self) -> dict[str, Any]:
        """Template variables: scheme metadata plus the sixteen color slots."""
        return {"scheme": self.scheme, "author": self.author, **self.colors}


class TemplateSpec(BaseModel):
    """One entry of the template configuration document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    extension: StrictStr = Field(..., description="Output file extension, no dot")
    output: Path = Field(..., description="Output directory")


class TemplateDescriptor(TemplateSpec):
    """A template configuration entry together with its name."""

    name: StrictStr = Field(..., description="Template name and source base name")
