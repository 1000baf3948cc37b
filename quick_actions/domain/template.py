"""Template substitution and path helpers.

Pure Python, no framework dependencies.
"""

import re
from datetime import datetime
from typing import Dict

# {{name}} where name is one or more ASCII word characters
TEMPLATE_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)

_PATH_SEPARATORS_RE = re.compile(r"[/\\]")
_HEADING_MARKERS_RE = re.compile(r"^#+\s*")

DOCUMENT_EXTENSION = ".md"


def resolve_template(template: str, variables: Dict[str, str]) -> str:
    """Replace {{name}} tokens with their values.

    Unknown names are left as-is, braces included.
    """
    def _sub(match: "re.Match[str]") -> str:
        name = match.group(1)
        return variables[name] if name in variables else match.group(0)

    return TEMPLATE_RE.sub(_sub, template)


def resolve_path_template(template: str, variables: Dict[str, str]) -> str:
    """Like resolve_template, but substituted values cannot add path segments."""
    def _sub(match: "re.Match[str]") -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return _PATH_SEPARATORS_RE.sub("-", variables[name])

    return TEMPLATE_RE.sub(_sub, template)


def ensure_extension(path: str) -> str:
    """Append .md when the file name has no dot in it."""
    basename = path.split("/")[-1]
    if "." not in basename:
        return path + DOCUMENT_EXTENSION
    return path


def strip_heading_markers(heading: str) -> str:
    """'## Log' -> 'Log'."""
    return _HEADING_MARKERS_RE.sub("", heading.strip())


def builtin_vars(now: datetime) -> Dict[str, str]:
    return {
        "date": now.strftime("%Y-%m-%d"),
        "time": now.strftime("%H:%M"),
        "timestamp": now.strftime("%Y%m%d%H%M%S"),
    }
