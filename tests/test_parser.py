"""Tests for parse_roadmap."""

import pytest

from app.roadmaps.parser import parse_roadmap
from app.roadmaps.schemas import ParsedSection, PlainItem, Resource, ResourceGroup, WeekEntry

from conftest import SAMPLE_ROADMAP

# =============================================================================
# Empty and headless input
# =============================================================================


class TestEmptyInput:
    @pytest.mark.parametrize("raw", ["", None])
    def test_empty_returns_no_sections(self, raw) -> None:
        assert parse_roadmap(raw) == []

    def test_text_without_headings_is_dropped(self) -> None:
        raw = "Intro paragraph\n\nWeek 1: Basics\n\n[Docs](https://docs.python.org)"
        assert parse_roadmap(raw) == []

    def test_preamble_before_first_heading_is_dropped(self) -> None:
        raw = "Here is your roadmap!\n\n# Python\n\nLearn syntax"
        sections = parse_roadmap(raw)

        assert len(sections) == 1
        assert sections[0].title == "Python"
        assert sections[0].items == [PlainItem(text="Learn syntax")]


# =============================================================================
# Headings
# =============================================================================


class TestHeadings:
    def test_heading_levels(self) -> None:
        raw = "# One\n\n## Two\n\n###### Six"
        assert [s.title for s in parse_roadmap(raw)] == ["One", "Two", "Six"]

    def test_seven_hashes_is_not_a_heading(self) -> None:
        raw = "# Top\n\n####### Not a heading"
        sections = parse_roadmap(raw)

        assert [s.title for s in sections] == ["Top"]
        assert sections[0].items == [PlainItem(text="Not a heading")]

    def test_hash_without_space_is_not_a_heading(self) -> None:
        raw = "# Top\n\n#hashtag"
        sections = parse_roadmap(raw)

        assert len(sections) == 1
        assert sections[0].items == [PlainItem(text="hashtag")]

    def test_heading_block_consumes_following_lines(self) -> None:
        raw = "## Stage 1\n**Objective:** fundamentals\n\nWeek 1: Setup"
        sections = parse_roadmap(raw)

        assert sections[0].title == "Stage 1"
        assert sections[0].items == [WeekEntry(label="Week 1", body="Setup")]

    def test_heading_inside_content_block_is_plain_text(self) -> None:
        raw = "# Top\n\nFirst line\n### Looks like a heading"
        sections = parse_roadmap(raw)

        assert len(sections) == 1
        assert sections[0].items == [
            PlainItem(text="First line"),
            PlainItem(text="Looks like a heading"),
        ]

    def test_empty_section_kept(self) -> None:
        sections = parse_roadmap("# A\n\n# B\n\nbody")

        assert sections[0] == ParsedSection(title="A", items=[])
        assert sections[1].items == [PlainItem(text="body")]


# =============================================================================
# Line classification
# =============================================================================


class TestLines:
    def test_week_then_plain(self) -> None:
        sections = parse_roadmap("# A\n\nWeek 1: Intro\nLearn basics")

        assert len(sections) == 1
        assert sections[0].title == "A"
        assert sections[0].items == [
            WeekEntry(label="Week 1", body="Intro"),
            PlainItem(text="Learn basics"),
        ]

    def test_week_case_insensitive_and_without_body(self) -> None:
        sections = parse_roadmap("# A\n\n- week 12:\nWEEK 3")

        assert sections[0].items == [
            WeekEntry(label="week 12", body=""),
            WeekEntry(label="WEEK 3", body=""),
        ]

    def test_week_followed_by_text_without_colon_is_plain(self) -> None:
        sections = parse_roadmap("# A\n\nWeek 1 is about setup")
        assert sections[0].items == [PlainItem(text="Week 1 is about setup")]

    def test_bold_week_marker(self) -> None:
        sections = parse_roadmap("# A\n\n**Week 2: Functions")
        assert sections[0].items == [WeekEntry(label="Week 2", body="Functions")]

    def test_bullet_markers_are_stripped(self) -> None:
        sections = parse_roadmap("# A\n\n- dash\n* star\n• dot\n  - nested")

        assert [item.text for item in sections[0].items] == ["dash", "star", "dot", "nested"]

    def test_numbered_items_keep_their_number(self) -> None:
        sections = parse_roadmap("# A\n\n1. First project")
        assert sections[0].items == [PlainItem(text="1. First project")]

    def test_rule_line_is_an_empty_item(self) -> None:
        sections = parse_roadmap("# A\n\nbefore\n---\n-\nafter")
        assert sections[0].items == [
            PlainItem(text="before"),
            PlainItem(text=""),
            PlainItem(text=""),
            PlainItem(text="after"),
        ]

    def test_rule_line_splits_resource_runs(self) -> None:
        items = parse_roadmap("# A\n\n[a](https://x.com)\n---\n[b](https://y.com)")[0].items

        assert [item.kind for item in items] == ["resources", "item", "resources"]
        assert items[1] == PlainItem(text="")
        assert [r.url for r in items[0].resources] == ["https://x.com"]
        assert [r.url for r in items[2].resources] == ["https://y.com"]

    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/",
            "https://www.youtube.com/@freecodecamp",
            "https://youtube.com/playlist?list=PL123",
        ],
    )
    def test_youtube_link_without_video_has_no_embed(self, url: str) -> None:
        (resource,) = parse_roadmap(f"# A\n\n[YT]({url})")[0].items[0].resources

        assert resource.is_video is True
        assert resource.video_id is None
        assert resource.embed_url is None

    def test_non_youtube_link(self) -> None:
        sections = parse_roadmap("# A\n\n[freeCodeCamp](https://freecodecamp.org/courses)")
        group = sections[0].items[0]

        assert isinstance(group, ResourceGroup)
        assert group.resources == [
            Resource(url="https://freecodecamp.org/courses", label="freeCodeCamp", description="", is_video=False)
        ]
        assert group.resources[0].embed_url is None

    def test_link_description(self) -> None:
        sections = parse_roadmap(
            "# A\n\n- [MDN](https://developer.mozilla.org) - reference docs\n"
            "- [Course](https://example.com/c) – free, video"
        )
        resources = sections[0].items[0].resources

        assert resources[0].description == "reference docs"
        assert resources[1].description == "free, video"

    def test_link_inside_sentence(self) -> None:
        sections = parse_roadmap("# A\n\nWatch [this talk](https://youtu.be/abc123) first")
        resource = sections[0].items[0].resources[0]

        assert resource.label == "this talk"
        assert resource.is_video is True
        assert resource.video_id == "abc123"

    def test_non_http_link_is_plain(self) -> None:
        sections = parse_roadmap("# A\n\n[local](file:///tmp/x)")
        assert sections[0].items == [PlainItem(text="[local](file:///tmp/x)")]


# =============================================================================
# Resource grouping
# =============================================================================


class TestResourceGrouping:
    def test_consecutive_videos_grouped_before_plain_item(self) -> None:
        raw = "# A\n\n[Video1](https://youtu.be/abc123)\n[Video2](https://youtu.be/xyz789)\n- Do the exercise"
        sections = parse_roadmap(raw)

        assert len(sections) == 1
        items = sections[0].items
        assert len(items) == 2

        group = items[0]
        assert isinstance(group, ResourceGroup)
        assert [r.video_id for r in group.resources] == ["abc123", "xyz789"]
        assert all(r.is_video for r in group.resources)
        assert items[1] == PlainItem(text="Do the exercise")

    def test_interrupted_run_is_not_reopened(self) -> None:
        raw = "# A\n\n[a](https://a.dev)\nbreak\n[b](https://b.dev)\n[c](https://c.dev)"
        items = parse_roadmap(raw)[0].items

        assert [item.kind for item in items] == ["resources", "item", "resources"]
        assert [r.label for r in items[0].resources] == ["a"]
        assert [r.label for r in items[2].resources] == ["b", "c"]

    def test_runs_do_not_span_blocks(self) -> None:
        raw = "# A\n\n[a](https://a.dev)\n\n[b](https://b.dev)"
        items = parse_roadmap(raw)[0].items

        assert [item.kind for item in items] == ["resources", "resources"]

    def test_items_are_only_the_three_variants(self) -> None:
        for section in parse_roadmap(SAMPLE_ROADMAP):
            for item in section.items:
                assert isinstance(item, (WeekEntry, ResourceGroup, PlainItem))


# =============================================================================
# Whole documents
# =============================================================================


class TestDocument:
    def test_sample_roadmap(self) -> None:
        sections = parse_roadmap(SAMPLE_ROADMAP)

        assert [s.title for s in sections] == [
            "Data Engineer Roadmap",
            "Stage 1: Foundation Building",
            "Final Stage: Portfolio Development",
        ]
        assert sections[0].items == []

        stage = sections[1].items
        assert stage[0] == WeekEntry(label="Week 1", body="SQL basics")
        assert stage[1] == WeekEntry(label="Week 2", body="Python for data")
        video, link = stage[2].resources
        assert video.video_id == "HXV3zeQKqGY"
        assert video.embed_url == "https://www.youtube.com/embed/HXV3zeQKqGY"
        assert video.description == "full course"
        assert link.is_video is False
        assert stage[3] == PlainItem(text="Practice joins every day")

        assert sections[2].items == [PlainItem(text="1. Build an ETL pipeline")]

    def test_windows_line_endings(self) -> None:
        raw = "# A\r\n\r\nWeek 1: Intro\r\nLearn basics"
        assert parse_roadmap(raw)[0].items == [
            WeekEntry(label="Week 1", body="Intro"),
            PlainItem(text="Learn basics"),
        ]

    def test_parse_is_repeatable(self) -> None:
        first = parse_roadmap(SAMPLE_ROADMAP)
        second = parse_roadmap(SAMPLE_ROADMAP)

        assert first == second
        assert first is not second

    def test_sections_serialize_with_kind_tags(self) -> None:
        dumped = parse_roadmap("# A\n\nWeek 1: Go\n[x](https://x.dev)\nplain")[0].model_dump()

        assert [item["kind"] for item in dumped["items"]] == ["week", "resources", "item"]
        assert ParsedSection.model_validate(dumped) == parse_roadmap("# A\n\nWeek 1: Go\n[x](https://x.dev)\nplain")[0]
