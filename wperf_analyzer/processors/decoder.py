"""
Decoding of wperf JSON text into validated snapshots.
"""

import logging
from typing import Any, Dict, Iterator, Optional

import ijson
from pydantic import ValidationError

from ..core.errors import MalformedInputError, NumericParseError
from ..schemas import WperfStats

logger = logging.getLogger(__name__)


class SnapshotDecoder:
    """Turns count-shape JSON (or one timeline item) into a ``WperfStats``."""

    @staticmethod
    def _check_telemetry(snapshot: WperfStats, path: Optional[str]) -> None:
        # Telemetry numbers are strings on the wire; reject the file up front
        # rather than emitting a metric we cannot represent.
        for metric in snapshot.telemetry_metrics:
            try:
                metric.core_label()
                metric.parsed_value()
            except NumericParseError as e:
                raise NumericParseError(e.field, e.raw_value, path) from None

    def decode(self, json_text, path: Optional[str] = None) -> WperfStats:
        """
        Decode a count file.

        Args:
            json_text: JSON document (str or bytes) in the count shape
            path: Source path, used in error messages

        Returns:
            Validated snapshot; ``time_elapsed`` defaults to 0.0 when absent

        Raises:
            MalformedInputError: If required structure is missing or mistyped
            NumericParseError: If a telemetry core/value string is not numeric
        """
        try:
            snapshot = WperfStats.model_validate_json(json_text)
        except ValidationError as e:
            raise MalformedInputError(_summarize(e), path) from e

        self._check_telemetry(snapshot, path)

        if snapshot.time_elapsed is None:
            snapshot = snapshot.model_copy(update={"time_elapsed": 0.0})
        return snapshot

    def decode_item(self, item: Dict[str, Any], path: Optional[str] = None) -> WperfStats:
        """
        Decode one already-parsed timeline item. An absent ``time_elapsed``
        stays absent and contributes no elapsed time.
        """
        try:
            snapshot = WperfStats.model_validate(item)
        except ValidationError as e:
            raise MalformedInputError(_summarize(e), path) from e

        self._check_telemetry(snapshot, path)
        return snapshot

    def iter_timeline(self, stream, path: Optional[str] = None) -> Iterator[WperfStats]:
        """
        Stream the snapshots of a timeline file in array order.

        Args:
            stream: Binary file object positioned at the start of the document
            path: Source path, used in error messages
        """
        try:
            for item in ijson.items(stream, 'timeline.item', use_float=True):
                yield self.decode_item(item, path)
        except ijson.JSONError as e:
            raise MalformedInputError(f"Invalid JSON: {e}", path) from e

    @staticmethod
    def encode(snapshot: WperfStats) -> str:
        """Serialize a snapshot back to wperf JSON, omitting absent optional fields."""
        return snapshot.model_dump_json(by_alias=True, exclude_none=True)


def _summarize(error: ValidationError) -> str:
    """Condense a pydantic validation error into a single line."""
    problems = []
    for detail in error.errors():
        location = '.'.join(str(part) for part in detail.get('loc', ()))
        problems.append(f"{location or '<root>'}: {detail.get('msg')}")
    return '; '.join(problems) or str(error)
