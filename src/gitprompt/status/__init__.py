"""Status report parsing and summarization."""

from ._models import (
    FileStatusLine,
    HeaderLine,
    MalformedLine,
    RemoteCounts,
    StatusLine,
    StatusSummary,
)
from ._parser import DETACHED_BRANCH, HEADER_MARKER, parse_status_line
from ._summarizer import (
    ELLIPSIS,
    classify_file_status,
    scan_status,
    shorten_branch,
    summarize_status,
)

__all__ = [
    "DETACHED_BRANCH",
    "ELLIPSIS",
    "HEADER_MARKER",
    "FileStatusLine",
    "HeaderLine",
    "MalformedLine",
    "RemoteCounts",
    "StatusLine",
    "StatusSummary",
    "classify_file_status",
    "parse_status_line",
    "scan_status",
    "shorten_branch",
    "summarize_status",
]
