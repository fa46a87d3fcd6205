"""
Unit tests for loading the dataset XML.
"""

import tempfile
import unittest
from pathlib import Path

from renewstats.errors import DataUnavailable
from renewstats.load import load_dataset
from renewstats.models import SourceRecord, Totals

project_root = Path(__file__).parent.parent
sample_path = project_root / "tests/data" / "renewable-electricity.xml"


class TestLoadDataset(unittest.TestCase):
    """Test cases for parsing the dataset document."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def test_sample_dataset(self):
        dataset = load_dataset(sample_path)

        self.assertEqual(dataset.year, "2021")
        self.assertEqual(dataset.units, "GWh")
        self.assertEqual(len(dataset.countries), 7)
        self.assertEqual(dataset.countries[0].name, "Brazil")

        iceland = dataset.find_country("Iceland")
        self.assertEqual(iceland.units, "GWh")
        self.assertEqual(
            iceland.sources,
            (
                SourceRecord("hydro", "13234", "68.86", "68.86"),
                SourceRecord("geothermal", "5981", "31.12", "31.12"),
            ),
        )
        self.assertEqual(iceland.totals, Totals("19218", "19218", "100"))
        self.assertEqual(iceland.totals.renewable_percent_value, 100.0)

    def test_missing_fields_are_blank(self):
        atlantis = load_dataset(sample_path).find_country("Atlantis")

        self.assertEqual(atlantis.sources, ())
        self.assertEqual(atlantis.totals, Totals())
        self.assertIsNone(atlantis.totals.renewable_percent_value)

    def test_missing_file(self):
        with self.assertRaises(DataUnavailable):
            load_dataset(self.tmp_path / "missing.xml")

    def test_malformed_file(self):
        path = self.tmp_path / "broken.xml"
        path.write_text("<renewable-electricity><country name='X'>")
        with self.assertRaises(DataUnavailable):
            load_dataset(path)

    def test_unknown_encoding_declaration(self):
        path = self.tmp_path / "bogus-encoding.xml"
        path.write_bytes(b'<?xml version="1.0" encoding="bogus"?><renewable-electricity/>')
        with self.assertRaises(DataUnavailable):
            load_dataset(path)


if __name__ == "__main__":
    unittest.main()
