"""
Loads the renewable electricity dataset from disk.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import DataUnavailable
from .models import Dataset


def load_dataset(path: Path) -> Dataset:
    """
    Parse the renewable electricity XML document into a Dataset.

    Raises:
        DataUnavailable: If the file is missing, unreadable, or not well-formed XML.
    """
    path = Path(path)
    try:
        root = ET.parse(path).getroot()
    except OSError as e:
        raise DataUnavailable(f"Error reading XML file {path}: {e}") from e
    except (ET.ParseError, LookupError, ValueError) as e:
        # expat raises LookupError or ValueError for an unsupported encoding declaration
        raise DataUnavailable(f"Error parsing XML file {path}: {e}") from e

    return Dataset.from_element(root)
