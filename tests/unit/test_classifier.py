"""
Unit tests for wperf_analyzer.processors.classifier module.
"""
import pytest
from conftest import make_counter, make_snapshot
from wperf_analyzer.core.context import ProcessingContext
from wperf_analyzer.core.types import FileKind
from wperf_analyzer.processors.classifier import SchemaClassifier, validate_file
from wperf_analyzer.schemas import COUNT_SCHEMA, TIMELINE_SCHEMA


class CountingValidator:
    """Wraps validate_file and records every call."""

    def __init__(self):
        self.calls = []

    def __call__(self, path, schema_name):
        self.calls.append((path, schema_name))
        return validate_file(path, schema_name)


@pytest.fixture
def validator():
    return CountingValidator()


@pytest.fixture
def context():
    return ProcessingContext()


class TestValidateFile:
    """Tests for the validate_file() function."""

    def test_count_document(self, count_file):
        """A count document matches only the count schema."""
        assert validate_file(count_file, COUNT_SCHEMA) is True
        assert validate_file(count_file, TIMELINE_SCHEMA) is False

    def test_timeline_document(self, timeline_file):
        """A timeline document matches only the timeline schema."""
        assert validate_file(timeline_file, TIMELINE_SCHEMA) is True
        assert validate_file(timeline_file, COUNT_SCHEMA) is False

    def test_missing_file(self, tmp_path):
        """An unreadable file does not validate."""
        assert validate_file(str(tmp_path / "missing.json"), COUNT_SCHEMA) is False


class TestSchemaClassifier:
    """Tests for the SchemaClassifier class."""

    def test_classify_timeline(self, context, validator, timeline_file):
        """Timeline files are detected with the first validation."""
        classifier = SchemaClassifier(context, validator)
        assert classifier.classify(timeline_file) == FileKind.TIMELINE
        assert validator.calls == [(timeline_file, TIMELINE_SCHEMA)]

    def test_classify_count(self, context, validator, count_file):
        """Count files fall through the timeline check."""
        classifier = SchemaClassifier(context, validator)
        assert classifier.classify(count_file) == FileKind.COUNT
        assert validator.calls == [(count_file, TIMELINE_SCHEMA), (count_file, COUNT_SCHEMA)]

    def test_repeated_classification_uses_cache(self, context, validator, count_file):
        """Probing the same file twice does not validate it again."""
        classifier = SchemaClassifier(context, validator)

        first = classifier.classify(count_file)
        calls_after_first = len(validator.calls)
        second = classifier.classify(count_file)

        assert first == second == FileKind.COUNT
        assert len(validator.calls) == calls_after_first == 2

    def test_paths_recorded_once(self, context, count_file, timeline_file):
        """Accumulators have set semantics and keep first-seen order."""
        classifier = SchemaClassifier(context)
        for _ in range(3):
            classifier.classify(count_file)
            classifier.classify(timeline_file)

        assert list(context.count_paths) == [count_file]
        assert list(context.timeline_paths) == [timeline_file]

    def test_valid_json_without_sections_is_unsupported(self, context, write_json):
        """JSON lacking core, dsu and dmc is unsupported and not recorded."""
        path = write_json({"hello": "world"})
        classifier = SchemaClassifier(context)

        assert classifier.classify(path) == FileKind.UNSUPPORTED
        assert classifier.is_supported(path) is False
        assert not context.count_paths and not context.timeline_paths

    def test_invalid_json_is_unsupported(self, context, tmp_path):
        """Syntactically invalid JSON is unsupported, not an error."""
        path = tmp_path / "broken.json"
        path.write_text("{ this is not json")
        classifier = SchemaClassifier(context)
        assert classifier.classify(str(path)) == FileKind.UNSUPPORTED

    def test_mistyped_counter_is_unsupported(self, context, write_json):
        """A document with a string counter_value matches neither schema."""
        path = write_json(make_snapshot({0: [make_counter("CYCLES", "g", value="1")]}))
        assert SchemaClassifier(context).classify(path) == FileKind.UNSUPPORTED

    @pytest.mark.parametrize("elapsed", ["1.5", True])
    def test_mistyped_time_elapsed_is_unsupported(self, context, write_json, elapsed):
        """Timelines and count files with a non-numeric time_elapsed match no schema."""
        timeline = write_json({"timeline": [
            make_snapshot({0: [make_counter("CYCLES", "g")]}, time_elapsed=elapsed),
        ]})
        count = write_json(make_snapshot({0: [make_counter("CYCLES", "g")]}, time_elapsed=elapsed))
        classifier = SchemaClassifier(context)

        assert classifier.classify(timeline) == FileKind.UNSUPPORTED
        assert classifier.classify(count) == FileKind.UNSUPPORTED

    def test_unknown_counter_key_is_unsupported(self, context, write_json):
        """Counter entries with keys outside the wperf format match no schema."""
        path = write_json(make_snapshot({0: [make_counter("CYCLES", "g", bogus="x")]}))
        assert SchemaClassifier(context).classify(path) == FileKind.UNSUPPORTED

    def test_optional_counter_keys_are_supported(self, context, write_json):
        """multiplexed and scaled_value are part of the counter format."""
        path = write_json(make_snapshot({0: [
            make_counter("CYCLES", "g", multiplexed="2/6", scaled_value=300),
        ]}))
        assert SchemaClassifier(context).classify(path) == FileKind.COUNT

    def test_begin_run_clears_cache_and_paths(self, context, validator, count_file):
        """A new run sees neither the previous paths nor cached validations."""
        classifier = SchemaClassifier(context, validator)
        classifier.classify(count_file)

        timeline_paths, count_paths = context.begin_run()
        assert count_paths == [count_file]
        assert timeline_paths == []
        assert context.validation_cache == {}
        assert not context.count_paths

        classifier.classify(count_file)
        assert len(validator.calls) == 4
