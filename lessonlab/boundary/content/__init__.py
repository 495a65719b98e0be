"""
Lesson content boundary: resolves lesson coordinates to lesson metadata.
"""

from lessonlab.boundary.content.asciidoc_store import (
    AsciidocLessonStore,
    parse_header_attributes,
)

__all__ = ["AsciidocLessonStore", "parse_header_attributes"]
