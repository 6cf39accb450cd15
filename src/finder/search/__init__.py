"""Directory traversal, name matching and content scanning."""

from .content import is_text_eligible, scan_content
from .models import ContentHit, MatchKind, MatchRecord, NoticeKind, SearchSpec, WalkNotice
from .walker import NoticeSink, Walker, walk

__all__ = [
    "ContentHit",
    "MatchKind",
    "MatchRecord",
    "NoticeKind",
    "NoticeSink",
    "SearchSpec",
    "WalkNotice",
    "Walker",
    "is_text_eligible",
    "scan_content",
    "walk",
]
