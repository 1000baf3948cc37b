"""Section lookup and insertion planning for markdown documents.

A section is a heading line plus everything after it up to the next heading
of the same or a higher level (fewer or equal `#`), or the end of the document.

Pure Python, no framework dependencies.
"""

import re
from typing import List, Optional

from quick_actions.ports.outbound import HeadingInfo

# A heading line as seen by the boundary scan: one or more '#' then whitespace
BOUNDARY_HEADING_RE = re.compile(r"^(#+)\s")

# ATX heading for the heading index: up to six '#', text, optional closing '#'s
ATX_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.*?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_RE = re.compile(r"^ {0,3}(`{3,}|~{3,})")

BEGINNING = "beginning"
END = "end"


def heading_level(heading: str) -> int:
    """Number of leading '#' characters; 1 when there are none."""
    match = re.match(r"^(#+)", heading)
    return len(match.group(1)) if match else 1


def find_section(lines: List[str], heading: str) -> int:
    """Index of the first line equal to `heading` after a right-trim, or -1."""
    for i, line in enumerate(lines):
        if line.rstrip() == heading:
            return i
    return -1


def insertion_index(lines: List[str], section_index: int, level: int, position: str) -> int:
    """Line index at which new text goes for the section at `section_index`."""
    if position == BEGINNING:
        return section_index + 1
    if position != END:
        raise ValueError(f"Invalid insert position: {position!r}")

    index = len(lines)
    for i in range(section_index + 1, len(lines)):
        match = BOUNDARY_HEADING_RE.match(lines[i])
        if match and len(match.group(1)) <= level:
            index = i
            break

    # Land right after the last non-blank line of the section
    while index > section_index + 1 and lines[index - 1].strip() == "":
        index -= 1
    return index


def insert_into_section(content: str, heading: str, position: str, text: str) -> Optional[str]:
    """Return `content` with `text` inserted as a new line in the section.

    Returns None when the heading is not in the document.
    """
    lines = content.split("\n")
    section_index = find_section(lines, heading)
    if section_index == -1:
        return None
    index = insertion_index(lines, section_index, heading_level(heading), position)
    lines.insert(index, text)
    return "\n".join(lines)


def parse_headings(content: str) -> List[HeadingInfo]:
    """Heading index of a document. Lines inside fenced code blocks are skipped."""
    headings: List[HeadingInfo] = []
    fence: Optional[str] = None
    for i, line in enumerate(content.split("\n")):
        fence_match = _FENCE_RE.match(line)
        if fence_match:
            marker = fence_match.group(1)
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue
        match = ATX_HEADING_RE.match(line)
        if match:
            headings.append(HeadingInfo(text=match.group(2), level=len(match.group(1)), line=i))
    return headings
