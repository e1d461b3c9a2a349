"""
Schema-based classification of wperf JSON files.
"""

import logging
from typing import Callable, Optional

from pydantic import ValidationError

from ..core.context import ProcessingContext
from ..core.types import FileKind
from ..schemas import COUNT_SCHEMA, SCHEMAS, TIMELINE_SCHEMA

logger = logging.getLogger(__name__)

Validator = Callable[[str, str], bool]


def validate_file(path: str, schema_name: str) -> bool:
    """
    Check whether a file's content satisfies one of the wperf schemas.

    Args:
        path: Path to the JSON file
        schema_name: Key into ``SCHEMAS``

    Returns:
        True if the document parses and validates, False otherwise
    """
    model = SCHEMAS[schema_name]
    try:
        with open(path, 'rb') as f:
            model.model_validate_json(f.read())
    except ValidationError as e:
        logger.debug("%s does not match %s (%d problems)", path, schema_name, e.error_count())
        return False
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        return False
    return True


class SchemaClassifier:
    """
    Decides whether a file is a timeline, a count file, or unsupported.

    Validation results are cached per (path, schema) in the processing context,
    so probing the same file repeatedly within a run validates it only once.
    """

    def __init__(self, context: ProcessingContext, validator: Optional[Validator] = None):
        """
        Args:
            context: Run-scoped cache and path accumulators
            validator: Callable(path, schema_name) -> bool; defaults to ``validate_file``
        """
        self.context = context
        self.validator = validator or validate_file

    def _matches(self, path: str, schema_name: str) -> bool:
        cache_key = (path, schema_name)
        cache = self.context.validation_cache
        if cache_key not in cache:
            cache[cache_key] = self.validator(path, schema_name)
        return cache[cache_key]

    def classify(self, path: str) -> FileKind:
        """
        Classify a file and record it in the context's path accumulators.

        Args:
            path: Path to the candidate file

        Returns:
            FileKind.TIMELINE, FileKind.COUNT or FileKind.UNSUPPORTED
        """
        if self._matches(path, TIMELINE_SCHEMA):
            kind = FileKind.TIMELINE
        elif self._matches(path, COUNT_SCHEMA):
            kind = FileKind.COUNT
        else:
            logger.warning("Skipping %s: matches neither the timeline nor the count schema", path)
            return FileKind.UNSUPPORTED

        self.context.record(path, kind)
        return kind

    def is_supported(self, path: str) -> bool:
        return self.classify(path) != FileKind.UNSUPPORTED
