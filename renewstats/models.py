"""
Data models for renewable electricity production records and report queries.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional, Union
from xml.etree.ElementTree import Element


class QueryKind(StrEnum):
    """Report modes, keyed by the command letter the user types."""

    COUNTRY = "C"
    SOURCE = "S"
    PERCENT = "P"


@dataclass(frozen=True)
class SourceRecord:
    """Production of a single renewable source type within one country."""

    type: str
    amount: str = ""
    percent_of_all: str = ""
    percent_of_renewables: str = ""

    @classmethod
    def from_element(cls, element: Element) -> SourceRecord:
        """Create a SourceRecord from a <source> element."""
        return cls(
            type=element.get("type", ""),
            amount=element.get("amount", ""),
            percent_of_all=element.get("percent-of-all", ""),
            percent_of_renewables=element.get("percent-of-renewables", ""),
        )


@dataclass(frozen=True)
class Totals:
    """Aggregate generation for one country across all sources."""

    all_sources: str = ""
    all_renewables: str = ""
    renewable_percent: str = ""

    @classmethod
    def from_element(cls, element: Optional[Element]) -> Totals:
        """Create Totals from a <totals> element, or empty totals if it is missing."""
        if element is None:
            return cls()
        return cls(
            all_sources=element.get("all-sources", ""),
            all_renewables=element.get("all-renewables", ""),
            renewable_percent=element.get("renewable-percent", ""),
        )

    @property
    def renewable_percent_value(self) -> Optional[float]:
        """The renewable percent as a number, or None when it is blank, malformed, or not finite."""
        try:
            value = float(self.renewable_percent)
        except ValueError:
            return None
        return value if math.isfinite(value) else None


@dataclass(frozen=True)
class Country:
    name: str
    units: str = ""
    sources: tuple[SourceRecord, ...] = ()
    totals: Totals = field(default_factory=Totals)

    @classmethod
    def from_element(cls, element: Element, units: str) -> Country:
        """Create a Country from a <country> element; units come from the document root."""
        return cls(
            name=element.get("name", ""),
            units=units,
            sources=tuple(SourceRecord.from_element(s) for s in element.iter("source")),
            totals=Totals.from_element(element.find("totals")),
        )


@dataclass(frozen=True)
class Dataset:
    """Renewable electricity production for every country in a given year."""

    year: str
    units: str
    countries: tuple[Country, ...] = ()

    @classmethod
    def from_element(cls, root: Element) -> Dataset:
        """Create a Dataset from the document root element."""
        units = root.get("units", "")
        return cls(
            year=root.get("year", ""),
            units=units,
            countries=tuple(Country.from_element(c, units) for c in root.iter("country")),
        )

    def country_names(self) -> list[str]:
        return [country.name for country in self.countries]

    def find_country(self, name: str) -> Optional[Country]:
        """Look up a country by exact (case-sensitive) name."""
        for country in self.countries:
            if country.name == name:
                return country
        return None


@dataclass(frozen=True)
class ByCountry:
    country_name: str


@dataclass(frozen=True)
class BySourceType:
    type_name: str


@dataclass(frozen=True)
class ByPercentRange:
    """Countries whose renewable percent falls in [min, max]; a missing bound is open."""

    min: Optional[float] = None
    max: Optional[float] = None


QueryDescriptor = Union[ByCountry, BySourceType, ByPercentRange]
