"""
Busy-span source backed by a YAML or JSON file.
"""

import logging
from pathlib import Path
from typing import Any, List

import yaml

from ..domain.exceptions import BusyDataError
from ..domain.models import BusySpan

logger = logging.getLogger(__name__)


class FileBusySource:
    """
    Loads busy spans from a local file.

    The document is either a list of ``{start_time, end_time}`` mappings or
    a mapping whose ``busy`` key holds such a list. JSON is read through the
    YAML parser, which accepts it as-is.

    Example:
        busy:
          - start_time: "09:00"
            end_time: "10:30"
          - start_time: "22:00"
            end_time: "02:00"
    """

    def __init__(self, path: Path):
        """
        Initialize the source.

        Args:
            path: Path to the YAML/JSON file with busy spans
        """
        self.path = Path(path)

    def get_busy_spans(self) -> List[BusySpan]:
        """
        Read the file and return its busy spans.

        Entries missing an endpoint are kept with None, the engine skips them.

        Raises:
            BusyDataError: If the file is missing, unreadable or has the wrong shape
        """
        data = self._load_document()
        entries = data.get("busy") if isinstance(data, dict) else data

        if entries is None:
            return []

        if not isinstance(entries, list):
            raise BusyDataError(
                f"Expected a list of busy spans in {self.path}, got {type(entries).__name__}"
            )

        spans: List[BusySpan] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise BusyDataError(
                    f"Busy span #{index + 1} in {self.path} must be a mapping"
                )
            spans.append(BusySpan.from_mapping(entry))

        logger.debug("Loaded %d busy span(s) from %s", len(spans), self.path)
        return spans

    def _load_document(self) -> Any:
        if not self.path.exists():
            raise BusyDataError(f"Busy file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise BusyDataError(f"Invalid YAML/JSON in {self.path}: {exc}") from exc
        except OSError as exc:
            raise BusyDataError(f"Could not read {self.path}: {exc}") from exc
