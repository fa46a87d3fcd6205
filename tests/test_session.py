"""
Unit tests for persisting and replaying the last query.
"""

import tempfile
import unittest
import xml.etree.ElementTree as ET
from pathlib import Path

from renewstats.errors import SessionDecodeFailure
from renewstats.models import ByCountry, ByPercentRange, BySourceType
from renewstats.session import SessionState, load_session, save_session


class TestSessionFile(unittest.TestCase):
    """Test cases for save_session / load_session."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "settings.xml"

    def tearDown(self):
        self.tmp.cleanup()

    def test_country_round_trip(self):
        save_session(self.path, ByCountry("Brazil"))
        self.assertEqual(load_session(self.path), ByCountry("Brazil"))

    def test_source_type_round_trip(self):
        save_session(self.path, BySourceType("geothermal"))
        self.assertEqual(load_session(self.path), BySourceType("geothermal"))

    def test_percent_range_round_trips(self):
        for descriptor in (
            ByPercentRange(),
            ByPercentRange(min=20, max=80),
            ByPercentRange(min=12.5),
            ByPercentRange(max=0),
        ):
            save_session(self.path, descriptor)
            self.assertEqual(load_session(self.path), descriptor)

    def test_file_layout_uses_sentinels(self):
        save_session(self.path, ByCountry("Brazil"))
        root = ET.parse(self.path).getroot()

        self.assertEqual(root.tag, "settings")
        self.assertEqual(root.findtext("type"), "C")
        self.assertEqual(root.findtext("selection"), "Brazil")
        self.assertEqual(root.findtext("min"), "-1")
        self.assertEqual(root.findtext("max"), "-1")

    def test_only_latest_query_is_kept(self):
        save_session(self.path, ByCountry("Brazil"))
        save_session(self.path, ByPercentRange(min=50))
        self.assertEqual(load_session(self.path), ByPercentRange(min=50.0))

    def test_missing_file_is_no_session(self):
        self.assertIsNone(load_session(self.path))

    def test_corrupted_file_is_no_session(self):
        save_session(self.path, ByCountry("Brazil"))
        self.path.write_text("<settings><type>C</type><selec")
        self.assertIsNone(load_session(self.path))

    def test_invalid_contents_are_no_session(self):
        for contents in (
            "<settings><type>Q</type></settings>",
            "<settings><type>C</type><selection>-1</selection></settings>",
            "<settings><type>S</type><selection></selection></settings>",
            "<settings><type>P</type><min>abc</min><max>-1</max></settings>",
            "<settings><type>P</type><min>90</min><max>10</max></settings>",
            "<settings><type>P</type><min>-1</min><max>150</max></settings>",
        ):
            self.path.write_text(contents)
            self.assertIsNone(load_session(self.path), contents)

    def test_unknown_encoding_declaration_is_no_session(self):
        self.path.write_bytes(b'<?xml version="1.0" encoding="bogus"?><settings/>')
        self.assertIsNone(load_session(self.path))


class TestSessionState(unittest.TestCase):
    """Test cases for encoding descriptors as session fields."""

    def test_percent_range_encoding(self):
        state = SessionState.from_descriptor(ByPercentRange(min=20))
        self.assertEqual(state, SessionState(kind="P", selection="-1", min="20.0", max="-1"))

    def test_decode_failure_raises(self):
        with self.assertRaises(SessionDecodeFailure):
            SessionState(kind="").to_descriptor()


if __name__ == "__main__":
    unittest.main()
