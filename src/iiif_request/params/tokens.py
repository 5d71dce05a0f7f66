"""Quality and Format parameters: closed enumerations of tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from iiif_request.params.protocol import Parameter


class QualityName(str, Enum):
    """Image qualities a request may ask for."""

    default = "default"
    color = "color"
    gray = "gray"
    bitonal = "bitonal"


class FormatName(str, Enum):
    """Output formats a request may ask for."""

    jpg = "jpg"
    tif = "tif"
    png = "png"
    gif = "gif"
    jp2 = "jp2"
    pdf = "pdf"
    webp = "webp"


@dataclass(frozen=True)
class _TokenParameter(Parameter):
    """Parameter whose only valid values are the members of an enumeration."""

    choices: ClassVar[type[Enum]]

    raw_value: str

    @property
    def member(self) -> Enum | None:
        """The enumeration member named by the raw value, if any."""
        try:
            return self.choices(self.raw_value)
        except ValueError:
            return None

    @property
    def is_valid(self) -> bool:
        return self.member is not None

    def invalid_reason(self) -> str | None:
        if self.is_valid:
            return None
        allowed = ", ".join(member.value for member in self.choices)
        return f"expected one of: {allowed}"

    @property
    def canonical_value(self) -> str:
        return self.raw_value


@dataclass(frozen=True)
class Quality(_TokenParameter):
    kind: ClassVar[str] = "quality"
    choices: ClassVar[type[Enum]] = QualityName


@dataclass(frozen=True)
class Format(_TokenParameter):
    kind: ClassVar[str] = "format"
    choices: ClassVar[type[Enum]] = FormatName
