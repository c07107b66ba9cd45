"""Tokenizer for ``git status --porcelain --branch`` output.

Each line is turned into a typed token: a branch header, a file status line,
or a malformed line. Header grammar::

    ## <branch>[...<upstream>][ [ahead N][, ][behind M]]
    ## <branch>...<upstream> [gone]
    ## No commits yet on <branch>
    ## HEAD (no branch)
"""

from gitprompt.status._models import (
    FileStatusLine,
    HeaderLine,
    MalformedLine,
    StatusLine,
)

HEADER_MARKER = "## "
DETACHED_BRANCH = "HEAD"
UPSTREAM_SEPARATOR = "..."

_UNBORN_PREFIXES = ("No commits yet on ", "Initial commit on ")
_DETACHED_HEADER = "HEAD (no branch)"


def parse_status_line(line: str) -> StatusLine:
    """Classify a single status report line.

    Args:
        line: One line of porcelain status output, with or without its
            trailing newline.

    Returns:
        A HeaderLine, FileStatusLine or MalformedLine.
    """
    line = line.rstrip("\r\n")
    if line.startswith(HEADER_MARKER):
        return _parse_header(line, line[len(HEADER_MARKER) :])
    if len(line) >= 4 and line[2] == " " and line[:2].strip():  # noqa: PLR2004
        return FileStatusLine(index=line[0], worktree=line[1], path=line[3:])
    return MalformedLine(line)


def _parse_header(line: str, body: str) -> StatusLine:
    for prefix in _UNBORN_PREFIXES:
        if body.startswith(prefix):
            return _header_or_malformed(line, body[len(prefix) :].strip())

    if body == _DETACHED_HEADER:
        return HeaderLine(branch=DETACHED_BRANCH)

    annotation: str | None = None
    if body.endswith("]"):
        start = body.rfind(" [")
        if start == -1:
            return MalformedLine(line)
        annotation = body[start + 2 : -1]
        body = body[:start]

    branch, separator, upstream = body.partition(UPSTREAM_SEPARATOR)
    if separator and not upstream:
        return MalformedLine(line)

    if annotation is None:
        return _header_or_malformed(line, branch, upstream or None)
    if annotation == "gone":
        return _header_or_malformed(line, branch, upstream or None, gone=True)

    counts = _parse_counts(annotation)
    if counts is None:
        return MalformedLine(line)
    ahead, behind = counts
    return _header_or_malformed(
        line, branch, upstream or None, ahead=ahead, behind=behind
    )


def _header_or_malformed(
    line: str,
    branch: str,
    upstream: str | None = None,
    *,
    ahead: int | None = None,
    behind: int | None = None,
    gone: bool = False,
) -> StatusLine:
    if not branch or any(ch.isspace() for ch in branch):
        return MalformedLine(line)
    return HeaderLine(
        branch=branch, upstream=upstream, ahead=ahead, behind=behind, gone=gone
    )


def _parse_counts(annotation: str) -> tuple[int | None, int | None] | None:
    """Parse ``ahead N, behind M`` (either part optional).

    Returns:
        Tuple of (ahead, behind), or None if the annotation is not understood.
    """
    ahead: int | None = None
    behind: int | None = None
    for part in annotation.split(","):
        word, _, number = part.strip().partition(" ")
        if not (number.isascii() and number.isdigit()):
            return None
        if word == "ahead" and ahead is None:
            ahead = int(number)
        elif word == "behind" and behind is None:
            behind = int(number)
        else:
            return None
    return ahead, behind
