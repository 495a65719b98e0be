"""
Test suite for the AsciiDoc lesson content store.

System role: Verification of the lesson content resolver
"""

from pathlib import Path

import pytest

from lessonlab.boundary.content import AsciidocLessonStore, parse_header_attributes
from lessonlab.core.exceptions import ContentNotFoundError


@pytest.fixture
def store(content_root: Path) -> AsciidocLessonStore:
    """Provide store rooted at the sample course tree."""
    return AsciidocLessonStore(content_root)


class TestParseHeaderAttributes:
    """Test suite for parse_header_attributes()."""

    def test_should_read_title_and_attributes(self) -> None:
        title, attributes = parse_header_attributes(
            "= Create Nodes\n:type: challenge\n:usecase: movies\n\n:ignored: body\n"
        )

        assert title == "Create Nodes"
        assert attributes == {"type": "challenge", "usecase": "movies"}

    def test_should_join_continued_values(self) -> None:
        _, attributes = parse_header_attributes(
            "= Lesson\n"
            ":verify: MATCH (n:Person) \\\n"
            "RETURN count(n) > 0 AS outcome\n"
            ":type: challenge\n"
        )

        assert attributes["verify"] == "MATCH (n:Person)\nRETURN count(n) > 0 AS outcome"
        assert attributes["type"] == "challenge"

    def test_should_skip_comments_and_honour_unset(self) -> None:
        title, attributes = parse_header_attributes(
            "// generated\n= Lesson\n:usecase: movies\n:usecase!:\n:order: 2\n"
        )

        assert title == "Lesson"
        assert attributes == {"order": "2"}

    def test_should_stop_at_first_non_header_line(self) -> None:
        _, attributes = parse_header_attributes(":type: quiz\nSome paragraph\n:verify: RETURN 1\n")

        assert attributes == {"type": "quiz"}

    def test_should_accept_value_without_space_after_colon(self) -> None:
        _, attributes = parse_header_attributes("= Lesson\n:usecase:movies\n:order:3\n")

        assert attributes == {"usecase": "movies", "order": "3"}

    def test_should_skip_author_and_revision_lines(self) -> None:
        title, attributes = parse_header_attributes(
            "= Create Nodes\n"
            "Jane Learner <jane@example.com>\n"
            "v1.2, 2024-05-01\n"
            ":usecase: movies\n"
            ":verify: RETURN true AS outcome\n"
        )

        assert title == "Create Nodes"
        assert attributes == {"usecase": "movies", "verify": "RETURN true AS outcome"}

    def test_should_end_header_at_third_line_below_title(self) -> None:
        _, attributes = parse_header_attributes(
            "= Lesson\nAuthor Name\nv1.0\nSome paragraph\n:usecase: movies\n"
        )

        assert attributes == {}


class TestAsciidocLessonStoreResolve:
    """Test suite for AsciidocLessonStore.resolve()."""

    @pytest.mark.asyncio
    async def test_resolve_should_return_verify_and_usecase(
        self, store: AsciidocLessonStore, challenge_query: str
    ) -> None:
        metadata = await store.resolve("neo4j-fundamentals", "1-graph-thinking", "2-create-nodes")

        assert metadata.title == "Create Nodes"
        assert metadata.type == "challenge"
        assert metadata.order == 2
        assert metadata.usecase == "movies"
        assert metadata.verify == challenge_query
        assert metadata.coordinates.path == "neo4j-fundamentals/1-graph-thinking/2-create-nodes"

    @pytest.mark.asyncio
    async def test_resolve_should_read_verify_file_and_inherit_usecase(
        self, store: AsciidocLessonStore
    ) -> None:
        metadata = await store.resolve("neo4j-fundamentals", "1-graph-thinking", "3-merge")

        assert metadata.verify == "MATCH (m:Movie {title: 'Matrix'}) RETURN count(m) = 1 AS outcome"
        assert metadata.usecase == "movies"

    @pytest.mark.asyncio
    async def test_resolve_plain_lesson_should_have_no_verify(self, store: AsciidocLessonStore) -> None:
        metadata = await store.resolve("neo4j-fundamentals", "1-graph-thinking", "1-intro")

        assert metadata.verify is None
        assert metadata.usecase == "movies"

    @pytest.mark.asyncio
    async def test_resolve_without_usecase_anywhere_should_leave_it_empty(
        self, store: AsciidocLessonStore
    ) -> None:
        metadata = await store.resolve("other-course", "1-basics", "1-challenge")

        assert metadata.usecase is None
        assert metadata.verify == "RETURN true AS outcome"

    @pytest.mark.asyncio
    async def test_resolve_missing_lesson_should_raise(self, store: AsciidocLessonStore) -> None:
        with pytest.raises(ContentNotFoundError, match="neo4j-fundamentals/1-graph-thinking/9-missing"):
            await store.resolve("neo4j-fundamentals", "1-graph-thinking", "9-missing")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "course, module, lesson",
        [
            ("", "1-graph-thinking", "1-intro"),
            ("neo4j-fundamentals", "", "1-intro"),
            ("neo4j-fundamentals", "1-graph-thinking", ""),
            ("..", "1-graph-thinking", "1-intro"),
            ("neo4j-fundamentals", "../1-graph-thinking", "1-intro"),
        ],
    )
    async def test_resolve_invalid_slug_should_raise(
        self, store: AsciidocLessonStore, course: str, module: str, lesson: str
    ) -> None:
        with pytest.raises(ContentNotFoundError):
            await store.resolve(course, module, lesson)
