## Pydantic schemas for the parsed roadmap display model
import uuid
from datetime import datetime
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

YOUTUBE_EMBED_BASE = "https://www.youtube.com/embed/"


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str
    label: str
    description: str = ""
    is_video: bool = False
    video_id: Optional[str] = None

    @property
    def embed_url(self) -> Optional[str]:
        if not self.is_video or not self.video_id:
            return None
        return YOUTUBE_EMBED_BASE + self.video_id


class WeekEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["week"] = "week"
    label: str
    body: str = ""


class ResourceGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["resources"] = "resources"
    resources: List[Resource] = Field(min_length=1)


class PlainItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["item"] = "item"
    text: str


ContentItem = Annotated[Union[WeekEntry, ResourceGroup, PlainItem], Field(discriminator="kind")]


class ParsedSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    items: List[ContentItem] = Field(default_factory=list)


class RoadmapSummary(BaseModel):
    """History list entry; the raw text is left out."""
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    topic: str
    is_premium: bool
    created_at: datetime


class RoadmapDocument(RoadmapSummary):
    roadmap: str
    sections: List[ParsedSection]
