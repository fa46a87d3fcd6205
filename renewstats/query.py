"""
Query engine for renewable electricity reports.

These helpers operate on an already-loaded Dataset and do not handle
file access or presentation concerns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidRange, NoSourceTypesAvailable, NotFound
from .models import (
    ByCountry,
    ByPercentRange,
    BySourceType,
    Country,
    Dataset,
    QueryDescriptor,
    QueryKind,
)

ALL_COUNTRIES_TITLE = "Combined Renewables for All Countries"


@dataclass(frozen=True)
class ReportResult:
    """Rows and projection metadata produced by a single query."""

    kind: QueryKind
    title: str
    columns: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    match_count: int


class RenewableStats:
    """Encapsulates the three report queries over a loaded Dataset."""

    def __init__(self, dataset: Dataset):
        """
        Args:
            dataset: The loaded Dataset. It is never modified.
        """
        self.dataset = dataset

    def source_types(self) -> list[str]:
        """
        List the distinct source types in the dataset.

        Returns:
            Source type names in the order they are first seen.
        """
        seen: dict[str, None] = {}
        for country in self.dataset.countries:
            for source in country.sources:
                seen.setdefault(source.type, None)
        return list(seen)

    def by_country(self, country_name: str) -> ReportResult:
        """
        Report every source record of a single country.

        Raises:
            NotFound: If no country has exactly this name.
        """
        country = self.dataset.find_country(country_name)
        if country is None:
            raise NotFound(f"Country not found: {country_name!r}")

        rows = tuple(
            (s.type, s.amount, s.percent_of_all, s.percent_of_renewables)
            for s in country.sources
        )
        return ReportResult(
            kind=QueryKind.COUNTRY,
            title=f"Renewable Electricity Production in {country.name}",
            columns=(
                "Renewable Type",
                f"Amount ({self.dataset.units})",
                "% of Total",
                "% of Renewables",
            ),
            rows=rows,
            match_count=len(rows),
        )

    def by_source_type(self, type_name: str) -> ReportResult:
        """
        Report every country's production for one source type (case-sensitive).

        Raises:
            NoSourceTypesAvailable: If the dataset holds no source records at all.
        """
        if not any(country.sources for country in self.dataset.countries):
            raise NoSourceTypesAvailable("No renewable energy types found in the data.")

        rows = tuple(
            (country.name, s.amount, s.percent_of_all, s.percent_of_renewables)
            for country in self.dataset.countries
            for s in country.sources
            if s.type == type_name
        )
        return ReportResult(
            kind=QueryKind.SOURCE,
            title=f"{type_name[:1].upper()}{type_name[1:]} Electricity Production",
            columns=(
                "Country",
                f"Amount ({self.dataset.units})",
                "% of Total",
                "% of Renewables",
            ),
            rows=rows,
            match_count=len(rows),
        )

    def by_percent_range(
        self, min_percent: Optional[float] = None, max_percent: Optional[float] = None
    ) -> ReportResult:
        """
        Report country totals, filtered by renewable percent when a bound is given.

        Args:
            min_percent: Inclusive lower bound, or None for no lower bound.
            max_percent: Inclusive upper bound, or None for no upper bound.

        Returns:
            All countries when both bounds are None; otherwise only countries with
            a numeric renewable percent inside the bounds. Dataset order is kept.
        """
        if min_percent is None and max_percent is None:
            countries = list(self.dataset.countries)
            title = ALL_COUNTRIES_TITLE
        else:
            countries = [
                c for c in self.dataset.countries
                if self._in_range(c, min_percent, max_percent)
            ]
            if max_percent is None:
                title = f"Countries With Renewables at Least {min_percent:.2f}% of Electricity Generation"
            elif min_percent is None:
                title = f"Countries With Renewables up to {max_percent:.2f}% of Electricity Generation"
            else:
                title = (
                    f"Countries With Renewables at {min_percent:.2f}% to {max_percent:.2f}%"
                    " of Electricity Generation"
                )

        rows = tuple(
            (
                c.name,
                c.totals.all_sources,
                c.totals.all_renewables,
                c.totals.renewable_percent,
            )
            for c in countries
        )
        return ReportResult(
            kind=QueryKind.PERCENT,
            title=title,
            columns=(
                "Country",
                f"All Elec. ({self.dataset.units})",
                f"Renewable ({self.dataset.units})",
                "% Renewable",
            ),
            rows=rows,
            match_count=len(rows),
        )

    @staticmethod
    def _in_range(
        country: Country, min_percent: Optional[float], max_percent: Optional[float]
    ) -> bool:
        percent = country.totals.renewable_percent_value
        if percent is None:
            return False
        if min_percent is not None and percent < min_percent:
            return False
        if max_percent is not None and percent > max_percent:
            return False
        return True


def run_query(dataset: Dataset, descriptor: QueryDescriptor) -> ReportResult:
    """Run a single query descriptor against the dataset."""
    stats = RenewableStats(dataset)
    if isinstance(descriptor, ByCountry):
        return stats.by_country(descriptor.country_name)
    if isinstance(descriptor, BySourceType):
        return stats.by_source_type(descriptor.type_name)
    if isinstance(descriptor, ByPercentRange):
        return stats.by_percent_range(descriptor.min, descriptor.max)
    raise TypeError(f"Unsupported query descriptor: {descriptor!r}")


def source_types(dataset: Dataset) -> list[str]:
    return RenewableStats(dataset).source_types()


def validate_percent_range(min_percent: Optional[float], max_percent: Optional[float]) -> None:
    """
    Check percent bounds before they reach the query engine.

    Raises:
        InvalidRange: If a bound is outside 0-100 or min is greater than max.
    """
    if min_percent is not None and not 0 <= min_percent <= 100:
        raise InvalidRange("The minimum value must be between 0 and 100...")
    if max_percent is not None and not 0 <= max_percent <= 100:
        raise InvalidRange("The maximum value must be between 0 and 100...")
    if min_percent is not None and max_percent is not None and min_percent > max_percent:
        raise InvalidRange("The minimum value cannot be greater than the maximum value...")


def parse_percent_range(min_text: str, max_text: str) -> ByPercentRange:
    """
    Build a ByPercentRange from raw user input; blank input means no bound.

    Raises:
        InvalidRange: If either value is not a number or the range is invalid.
    """
    min_percent = _parse_bound(min_text, "minimum")
    max_percent = _parse_bound(max_text, "maximum")
    validate_percent_range(min_percent, max_percent)
    return ByPercentRange(min=min_percent, max=max_percent)


def _parse_bound(text: str, label: str) -> Optional[float]:
    text = (text or "").strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError as e:
        raise InvalidRange(f"Please enter a valid number for the {label} value...") from e
    # float() accepts "nan" and "inf"
    if value != value:
        raise InvalidRange(f"Please enter a valid number for the {label} value...")
    return value
