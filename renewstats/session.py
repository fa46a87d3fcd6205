"""
Persists the most recent query so it can be replayed on the next launch.

The settings file is a small XML document:

    <settings>
      <type>P</type>
      <selection>-1</selection>
      <min>20.0</min>
      <max>-1</max>
    </settings>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import InvalidRange, SessionDecodeFailure
from .models import ByCountry, ByPercentRange, BySourceType, QueryDescriptor, QueryKind
from .query import validate_percent_range

UNUSED = "-1"


@dataclass(frozen=True)
class SessionState:
    """The last query encoded as plain strings, with UNUSED in fields it does not need."""

    kind: str
    selection: str = UNUSED
    min: str = UNUSED
    max: str = UNUSED

    @classmethod
    def from_descriptor(cls, descriptor: QueryDescriptor) -> SessionState:
        if isinstance(descriptor, ByCountry):
            return cls(kind=QueryKind.COUNTRY.value, selection=descriptor.country_name)
        if isinstance(descriptor, BySourceType):
            return cls(kind=QueryKind.SOURCE.value, selection=descriptor.type_name)
        if isinstance(descriptor, ByPercentRange):
            return cls(
                kind=QueryKind.PERCENT.value,
                min=_encode_bound(descriptor.min),
                max=_encode_bound(descriptor.max),
            )
        raise TypeError(f"Unsupported query descriptor: {descriptor!r}")

    def to_descriptor(self) -> QueryDescriptor:
        """
        Decode the stored fields back into a query descriptor.

        Raises:
            SessionDecodeFailure: If the kind is unknown, a selection is missing,
                or the percent bounds are not a valid range.
        """
        try:
            kind = QueryKind(self.kind)
        except ValueError as e:
            raise SessionDecodeFailure(f"Unknown query type {self.kind!r}") from e

        if kind is QueryKind.PERCENT:
            min_percent = _decode_bound(self.min)
            max_percent = _decode_bound(self.max)
            try:
                validate_percent_range(min_percent, max_percent)
            except InvalidRange as e:
                raise SessionDecodeFailure(str(e)) from e
            return ByPercentRange(min=min_percent, max=max_percent)

        if not self.selection or self.selection == UNUSED:
            raise SessionDecodeFailure(f"Missing selection for query type {kind.value!r}")
        if kind is QueryKind.COUNTRY:
            return ByCountry(self.selection)
        return BySourceType(self.selection)


def _encode_bound(value: Optional[float]) -> str:
    return UNUSED if value is None else str(float(value))


def _decode_bound(text: str) -> Optional[float]:
    text = text.strip()
    if text == UNUSED:
        return None
    try:
        return float(text)
    except ValueError as e:
        raise SessionDecodeFailure(f"Invalid percent bound {text!r}") from e


def save_session(path: Path, descriptor: QueryDescriptor) -> Path:
    """Overwrite the settings file with the given query."""
    state = SessionState.from_descriptor(descriptor)

    root = ET.Element("settings")
    for tag, value in (
        ("type", state.kind),
        ("selection", state.selection),
        ("min", state.min),
        ("max", state.max),
    ):
        ET.SubElement(root, tag).text = value

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    ET.ElementTree(root).write(path, encoding="utf-8", xml_declaration=True)
    return path


def read_session_state(path: Path) -> SessionState:
    """
    Read the raw session fields from the settings file.

    Raises:
        SessionDecodeFailure: If the file is missing, unreadable, or not valid XML.
    """
    try:
        root = ET.parse(path).getroot()
    except (OSError, ET.ParseError, LookupError, ValueError) as e:
        raise SessionDecodeFailure(f"Could not read {path}: {e}") from e

    return SessionState(
        kind=root.findtext("type", default="").strip(),
        selection=root.findtext("selection", default=UNUSED),
        min=root.findtext("min", default=UNUSED),
        max=root.findtext("max", default=UNUSED),
    )


def load_session(path: Path) -> Optional[QueryDescriptor]:
    """
    Load the last query, or None if there is no usable prior session.

    Never raises for a missing or corrupt settings file.
    """
    try:
        return read_session_state(path).to_descriptor()
    except SessionDecodeFailure:
        return None
