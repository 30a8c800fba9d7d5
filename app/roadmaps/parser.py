# app/roadmaps/parser.py
"""
Turn generated roadmap text into the section tree shown on the home page.

The text is split into blocks on blank lines. A block that starts with a
Markdown heading opens a new section; every other block is read line by line
into week entries, resource links and plain items, which are appended to the
most recently opened section. Blocks before the first heading are dropped.

Parsing never fails: anything that is not a heading, week marker or link is
kept as a plain item.
"""
import re
from typing import List, Tuple, Union

from app.roadmaps.links import is_youtube_url, youtube_video_id
from app.roadmaps.schemas import (
    ContentItem,
    ParsedSection,
    PlainItem,
    Resource,
    ResourceGroup,
    WeekEntry,
)

_BLOCK_SPLIT = re.compile(r"\n{2,}")
_HEADING_PATTERN = re.compile(r"^#{1,6}[ \t]+(\S.*)")
_BULLET_PREFIX = re.compile(r"^[-*•#\s]+")
_WEEK_PATTERN = re.compile(r"^(week\s+\d+)\s*(?::\s*(.*))?$", re.IGNORECASE)
_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\((https?://[^)\s]+)\)(?:\s*[-–—]\s*(.+))?")


def _parse_resource(match: re.Match) -> Resource:
    label, url, description = match.group(1), match.group(2), match.group(3)
    is_video = is_youtube_url(url)
    return Resource(
        url=url,
        label=label.strip(),
        description=(description or "").strip(),
        is_video=is_video,
        video_id=youtube_video_id(url) if is_video else None,
    )


def _parse_line(line: str) -> Union[WeekEntry, Resource, PlainItem]:
    # A rule or bare bullet leaves "" and still ends a resource run
    clean = _BULLET_PREFIX.sub("", line).strip()

    week = _WEEK_PATTERN.match(clean)
    if week:
        return WeekEntry(label=week.group(1), body=(week.group(2) or "").strip())

    link = _LINK_PATTERN.search(clean)
    if link:
        return _parse_resource(link)

    return PlainItem(text=clean)


def _group_resources(items: List[Union[WeekEntry, Resource, PlainItem]]) -> List[ContentItem]:
    """Collapse each run of consecutive resources into one ResourceGroup."""
    grouped: List[ContentItem] = []
    buffer: List[Resource] = []

    for item in items:
        if isinstance(item, Resource):
            buffer.append(item)
            continue
        if buffer:
            grouped.append(ResourceGroup(resources=buffer))
            buffer = []
        grouped.append(item)

    if buffer:
        grouped.append(ResourceGroup(resources=buffer))

    return grouped


def _parse_block(block: str) -> List[ContentItem]:
    items = []
    for line in block.split("\n"):
        if not line.strip():
            continue
        items.append(_parse_line(line))
    return _group_resources(items)


def parse_roadmap(raw_text: str | None) -> List[ParsedSection]:
    if not raw_text:
        return []

    text = raw_text.replace("\r\n", "\n")
    opened: List[Tuple[str, List[ContentItem]]] = []

    for block in _BLOCK_SPLIT.split(text):
        heading = _HEADING_PATTERN.match(block)
        if heading:
            opened.append((heading.group(1).strip(), []))
            continue

        # Content before the first heading has nowhere to go
        if not opened:
            continue

        opened[-1][1].extend(_parse_block(block))

    return [ParsedSection(title=title, items=items) for title, items in opened]
