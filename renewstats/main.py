"""
Interactive console for renewable electricity reports.

Loads the dataset, replays the last report, then loops over the
C / S / P / X command prompt.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional

from .config import Config
from .errors import DataUnavailable, InvalidRange, NoSourceTypesAvailable, NotFound
from .load import load_dataset
from .models import ByCountry, BySourceType, Dataset, QueryDescriptor, QueryKind
from .query import parse_percent_range, run_query, source_types
from .report import format_menu, print_report
from .session import load_session, save_session

QUIT = "X"
COMMANDS = [kind.value for kind in QueryKind] + [QUIT]


class ReportConsole:
    """Runs queries chosen at the prompt and remembers the last one."""

    def __init__(
        self,
        dataset: Dataset,
        settings_path: Path,
        input_func: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.dataset = dataset
        self.settings_path = Path(settings_path)
        self.input = input_func or input

    def _read(self, prompt: str) -> str:
        try:
            return self.input(prompt)
        except EOFError:
            return QUIT

    def print_banner(self) -> None:
        heading = f"Renewable Electricity Production in {self.dataset.year}"
        print(heading)
        print("=" * len(heading))

    def replay_last_query(self) -> None:
        descriptor = load_session(self.settings_path)
        if descriptor is None:
            return
        print()
        print("Here is the final report you requested the last time you were here...")
        try:
            print_report(run_query(self.dataset, descriptor))
        except (NotFound, NoSourceTypesAvailable) as e:
            print(f"Could not replay the last report: {e}")

    def execute(self, descriptor: QueryDescriptor) -> bool:
        """Print the report for a descriptor and save it as the last query."""
        try:
            result = run_query(self.dataset, descriptor)
        except (NotFound, NoSourceTypesAvailable) as e:
            print(e)
            return False
        print_report(result)
        try:
            save_session(self.settings_path, descriptor)
        except OSError as e:
            print(f"Warning: Failed to save settings to {self.settings_path}: {e}", file=sys.stderr)
        return True

    def _choose(self, labels: list[str], prompt: str, error: str) -> Optional[str]:
        """Prompt until a valid 1-based menu number is entered; None if the user quits."""
        while True:
            answer = self._read(prompt)
            if answer == QUIT:
                return None
            try:
                index = int(answer)
            except ValueError:
                print(error)
                continue
            if 0 < index <= len(labels):
                return labels[index - 1]
            print(error)

    def select_country(self) -> Optional[QueryDescriptor]:
        names = self.dataset.country_names()
        print()
        for line in format_menu(names, per_line=2):
            print(line)
        print()
        name = self._choose(
            names,
            "Enter a country #: ",
            "Invalid Country Error: Please enter a valid country number...",
        )
        return ByCountry(name) if name is not None else None

    def select_source_type(self) -> Optional[QueryDescriptor]:
        types = source_types(self.dataset)
        if not types:
            print("No renewable energy types found in the data.")
            return None
        print()
        print("Select a renewable by number as shown below...")
        for line in format_menu(types, per_line=1):
            print(line)
        print()
        type_name = self._choose(
            types,
            "Enter a renewable #: ",
            "Invalid Renewable Error: Please enter a valid renewable number...",
        )
        return BySourceType(type_name) if type_name is not None else None

    def select_percent_range(self) -> Optional[QueryDescriptor]:
        while True:
            print()
            min_text = self._read("Enter the minimum % of renewables produced or press enter for no minimum: ")
            if min_text == QUIT:
                return None
            max_text = self._read("Enter the maximum % of renewables produced or press enter for no maximum: ")
            if max_text == QUIT:
                return None
            try:
                return parse_percent_range(min_text, max_text)
            except InvalidRange as e:
                print(f"Invalid Range Error: {e}")

    def run(self) -> None:
        self.print_banner()
        self.replay_last_query()

        selectors = {
            QueryKind.COUNTRY: self.select_country,
            QueryKind.SOURCE: self.select_source_type,
            QueryKind.PERCENT: self.select_percent_range,
        }
        while True:
            command = self._read(
                "\nEnter 'C' to select a country, 'S' to select a specific source, 'P' to select\n"
                "a % range of renewables production, or 'X' to quit: "
            ).strip().upper()
            if command not in COMMANDS:
                print("Invalid Command Error: Please enter a valid command...")
                continue
            if command == QUIT:
                print("\nShutting down program...")
                return

            descriptor = selectors[QueryKind(command)]()
            if descriptor is not None:
                self.execute(descriptor)


def main(data_path: Optional[Path] = None) -> int:
    """
    Main entrypoint for the interactive report console.

    Args:
        data_path: Dataset XML file; defaults to the configured RENEWSTATS_DATA_PATH.
    """
    config = Config.from_env()
    data_path = Path(data_path) if data_path else config.data_path

    try:
        dataset = load_dataset(data_path)
    except DataUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Please check the dataset path or set RENEWSTATS_DATA_PATH:", file=sys.stderr)
        print("  uv run python -m renewstats.main data/renewable-electricity.xml", file=sys.stderr)
        return 1

    ReportConsole(dataset, config.settings_path).run()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
