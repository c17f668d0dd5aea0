"""
Tests for the file-backed busy-span source.
"""

import json

import pytest

from daytimeline.adapters.busy_file import FileBusySource
from daytimeline.domain.exceptions import BusyDataError
from daytimeline.domain.models import BusySpan


class TestFileBusySource:
    """Tests for FileBusySource."""

    def test_mapping_with_busy_key(self, tmp_path):
        """Test reading spans under a top-level busy key."""
        path = tmp_path / "busy.yaml"
        path.write_text(
            'busy:\n'
            '  - start_time: "09:00"\n'
            '    end_time: "10:30"\n'
            '  - start_time: "22:00"\n'
            '    end_time: "02:00"\n',
            encoding="utf-8",
        )

        spans = FileBusySource(path).get_busy_spans()

        assert spans == [BusySpan("09:00", "10:30"), BusySpan("22:00", "02:00")]

    def test_top_level_list(self, tmp_path):
        """Test reading a bare list of spans."""
        path = tmp_path / "busy.yaml"
        path.write_text('- {start_time: "07:00", end_time: "08:00"}\n', encoding="utf-8")

        assert FileBusySource(path).get_busy_spans() == [BusySpan("07:00", "08:00")]

    def test_json_with_camel_case_keys(self, tmp_path):
        """Test that JSON documents load through the same parser."""
        path = tmp_path / "busy.json"
        path.write_text(
            json.dumps({"busy": [{"startTime": "12:00", "endTime": "13:00"}]}),
            encoding="utf-8",
        )

        assert FileBusySource(path).get_busy_spans() == [BusySpan("12:00", "13:00")]

    def test_missing_endpoint_kept_as_none(self, tmp_path):
        """Test that incomplete entries are passed on for the engine to skip."""
        path = tmp_path / "busy.yaml"
        path.write_text('busy:\n  - start_time: "09:00"\n', encoding="utf-8")

        assert FileBusySource(path).get_busy_spans() == [BusySpan("09:00", None)]

    def test_unquoted_time_is_not_a_string(self, tmp_path):
        """Test that YAML's sexagesimal integers are kept raw, not taken as times."""
        path = tmp_path / "busy.yaml"
        path.write_text('busy:\n  - start_time: 10:30\n    end_time: "11:00"\n', encoding="utf-8")

        assert FileBusySource(path).get_busy_spans() == [BusySpan(630, "11:00")]

    @pytest.mark.parametrize("content", ["", "busy:\n", "busy: null\n"])
    def test_empty_documents(self, tmp_path, content):
        """Test that empty documents mean no busy spans."""
        path = tmp_path / "busy.yaml"
        path.write_text(content, encoding="utf-8")

        assert FileBusySource(path).get_busy_spans() == []

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises BusyDataError."""
        with pytest.raises(BusyDataError, match="not found"):
            FileBusySource(tmp_path / "nope.yaml").get_busy_spans()

    def test_invalid_yaml(self, tmp_path):
        """Test that a syntax error raises BusyDataError."""
        path = tmp_path / "busy.yaml"
        path.write_text("busy: [\n", encoding="utf-8")

        with pytest.raises(BusyDataError, match="Invalid YAML"):
            FileBusySource(path).get_busy_spans()

    def test_wrong_shape(self, tmp_path):
        """Test that non-list busy data raises BusyDataError."""
        path = tmp_path / "busy.yaml"
        path.write_text("busy: 5\n", encoding="utf-8")

        with pytest.raises(BusyDataError, match="Expected a list"):
            FileBusySource(path).get_busy_spans()

    def test_entry_not_a_mapping(self, tmp_path):
        """Test that list entries must be mappings."""
        path = tmp_path / "busy.yaml"
        path.write_text('busy:\n  - "09:00-10:00"\n', encoding="utf-8")

        with pytest.raises(BusyDataError, match="#1"):
            FileBusySource(path).get_busy_spans()
