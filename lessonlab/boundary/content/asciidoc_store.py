"""
File-system lesson content store.

Resolves lesson coordinates to lesson metadata by reading the AsciiDoc
document header of ``lesson.adoc`` (and, for inherited attributes, the
enclosing ``module.adoc`` and ``course.adoc``).

Layout:
    <root>/<course>/course.adoc
    <root>/<course>/modules/<module>/module.adoc
    <root>/<course>/modules/<module>/lessons/<lesson>/lesson.adoc
    <root>/<course>/modules/<module>/lessons/<lesson>/verify.cypher  (optional)

Dependencies: pathlib, asyncio
System role: Lesson Content Resolver
"""

import asyncio
import logging
import re
from pathlib import Path

from lessonlab.core.exceptions import ContentNotFoundError
from lessonlab.models.lesson import LessonCoordinates, LessonMetadata

logger = logging.getLogger(__name__)

ATTRIBUTE_USECASE = "usecase"
ATTRIBUTE_VERIFY = "verify"
ATTRIBUTE_TYPE = "type"
ATTRIBUTE_ORDER = "order"

VERIFY_FILENAME = "verify.cypher"

_ATTRIBUTE_LINE = re.compile(r"^:(?P<name>[A-Za-z0-9_][A-Za-z0-9_-]*)(?P<unset>!)?:(?:\s*(?P<value>.*))?$")
_SLUG = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def parse_header_attributes(text: str) -> tuple[str | None, dict[str, str]]:
    """
    Read the document title and attribute entries from an AsciiDoc header.

    The header ends at the first blank line after it starts. Up to two
    lines directly below the title are the author and revision lines and
    are skipped. Values ending in `` \\`` continue on the next line. Unset
    entries (``:name!:``) remove a previously set attribute.

    Args:
        text: Full AsciiDoc document text

    Returns:
        tuple[str | None, dict[str, str]]: (title, attributes)
    """
    title: str | None = None
    attributes: dict[str, str] = {}
    started = False
    implicit_lines = 0
    pending: tuple[str, list[str]] | None = None

    for raw_line in text.splitlines():
        line = raw_line.rstrip()

        if pending is not None:
            name, parts = pending
            if line.endswith(" \\"):
                parts.append(line[:-2].strip())
                continue
            parts.append(line.strip())
            attributes[name] = "\n".join(parts)
            pending = None
            continue

        if not line:
            if started:
                break
            continue

        if line.startswith("//"):
            continue

        if line.startswith("= ") and title is None and not attributes:
            title = line[2:].strip()
            started = True
            continue

        match = _ATTRIBUTE_LINE.match(line)
        if match is None:
            if title is not None and not attributes and implicit_lines < 2:
                implicit_lines += 1
                continue
            break

        started = True
        name = match.group("name")
        if match.group("unset"):
            attributes.pop(name, None)
            continue

        value = match.group("value") or ""
        if value.endswith(" \\") or value == "\\":
            pending = (name, [value[:-1].rstrip()])
            continue
        attributes[name] = value.strip()

    if pending is not None:
        name, parts = pending
        attributes[name] = "\n".join(parts)

    return title, attributes


def _read_header(path: Path) -> tuple[str | None, dict[str, str]]:
    if not path.is_file():
        return None, {}
    return parse_header_attributes(path.read_text(encoding="utf-8"))


def _parse_order(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class AsciidocLessonStore:
    """Lesson content resolver backed by a directory of AsciiDoc courses."""

    def __init__(self, root_dir: Path | str) -> None:
        """
        Initialize store rooted at the courses directory.

        Args:
            root_dir: Directory containing one sub-directory per course
        """
        self.root_dir = Path(root_dir)

    def lesson_dir(self, coordinates: LessonCoordinates) -> Path:
        """Directory holding ``lesson.adoc`` for the given coordinates."""
        return (
            self.root_dir
            / coordinates.course
            / "modules"
            / coordinates.module
            / "lessons"
            / coordinates.lesson
        )

    async def resolve(self, course: str, module: str, lesson: str) -> LessonMetadata:
        """
        Resolve a lesson's verification metadata.

        Args:
            course: Course slug
            module: Module slug
            lesson: Lesson slug

        Returns:
            LessonMetadata: Title, type, order, use case and verification query

        Raises:
            ContentNotFoundError: If a slug is empty or malformed, or the lesson does not exist
        """
        for slug in (course, module, lesson):
            if not slug or not _SLUG.match(slug) or ".." in slug:
                raise ContentNotFoundError(course, module, lesson)

        coordinates = LessonCoordinates(course=course, module=module, lesson=lesson)
        return await asyncio.to_thread(self._resolve, coordinates)

    def _resolve(self, coordinates: LessonCoordinates) -> LessonMetadata:
        lesson_dir = self.lesson_dir(coordinates)
        lesson_file = lesson_dir / "lesson.adoc"

        if not lesson_file.is_file():
            logger.info(
                "Lesson not found in content store",
                extra={"lesson_path": coordinates.path},
            )
            raise ContentNotFoundError(
                coordinates.course, coordinates.module, coordinates.lesson
            )

        title, attributes = _read_header(lesson_file)

        verify = attributes.get(ATTRIBUTE_VERIFY) or None
        if verify is None:
            verify_file = lesson_dir / VERIFY_FILENAME
            if verify_file.is_file():
                verify = verify_file.read_text(encoding="utf-8").strip() or None

        usecase = attributes.get(ATTRIBUTE_USECASE) or None
        if usecase is None:
            usecase = self._inherited_usecase(coordinates)

        return LessonMetadata(
            coordinates=coordinates,
            title=title,
            type=attributes.get(ATTRIBUTE_TYPE),
            order=_parse_order(attributes.get(ATTRIBUTE_ORDER)),
            usecase=usecase,
            verify=verify,
        )

    def _inherited_usecase(self, coordinates: LessonCoordinates) -> str | None:
        course_dir = self.root_dir / coordinates.course
        for path in (
            course_dir / "modules" / coordinates.module / "module.adoc",
            course_dir / "course.adoc",
        ):
            _, attributes = _read_header(path)
            if attributes.get(ATTRIBUTE_USECASE):
                return attributes[ATTRIBUTE_USECASE]
        return None
