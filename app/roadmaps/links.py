## Resource link helpers (YouTube detection + video id normalization)
from typing import Optional
from urllib.parse import urlsplit

YOUTUBE_HOSTS = ("youtube.com", "youtu.be")

# youtube.com paths whose second segment is a video id
VIDEO_PATHS = ("embed", "shorts", "live", "v")


def is_youtube_url(url: str) -> bool:
    host = (urlsplit(url).hostname or "").lower()
    return any(host == h or host.endswith("." + h) for h in YOUTUBE_HOSTS)


def youtube_video_id(url: str) -> Optional[str]:
    """
    Bare video id for embedding, or None when the URL names no video.

    watch URLs: text after ``v=`` up to the next ``&``.
    youtu.be/<id>, /embed/<id>, /shorts/<id>: the final path segment.
    Query string and fragment are not part of the segment. Channel pages
    (``/@name``), playlists and the bare site have no id.
    """
    if "watch?v=" in url:
        video_id = url.split("watch?v=", 1)[1].split("&", 1)[0].split("#", 1)[0]
        return video_id or None

    parts = urlsplit(url)
    segments = [s for s in parts.path.split("/") if s]
    host = (parts.hostname or "").lower()

    if host == "youtu.be" or host.endswith(".youtu.be"):
        return segments[-1] if segments else None
    if len(segments) >= 2 and segments[0] in VIDEO_PATHS:
        return segments[-1]
    return None
