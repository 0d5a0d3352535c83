"""Hugo front matter for notes that don't carry their own.

Notes in a vault are often plain markdown. Hugo needs at least a title and
a date to list a post, so when enabled the materializer runs notes through
``ensure_frontmatter`` before writing them to the posts directory.
"""

import datetime
from typing import Any, Callable, Dict, Optional

import inflection
import titlecase as tc
import yaml

FRONTMATTER_DELIMITER = "---"

Clock = Callable[[], datetime.datetime]


def _now() -> datetime.datetime:
    return datetime.datetime.now().astimezone()


def has_frontmatter(content: str) -> bool:
    """Check whether content opens with a closed YAML front matter block.

    The first line must be exactly ``---`` and a later line must close the
    block, so a leading thematic break or ``----`` doesn't count.
    """
    lines = content.lstrip("\ufeff").splitlines()
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return False
    return any(line.rstrip() == FRONTMATTER_DELIMITER for line in lines[1:])


def hugo_frontmatter(stem: str, author: Optional[str] = None, clock: Clock = _now) -> Dict[str, Any]:
    """Build Hugo front matter for a post named ``stem``.

    Args:
        stem: Post filename without extension
        author: Author name to include in frontmatter
        clock: Source of the post date

    Returns:
        Frontmatter dict with title, date, and slug and author when available
    """
    # Semicolons in titles break YAML parsing, replace with colons
    title = tc.titlecase(stem).replace(';', ':')
    result: Dict[str, Any] = {
        'title': title,
        'date': clock().isoformat(timespec='seconds'),
    }
    # parameterize drops non-ASCII names entirely
    slug = inflection.parameterize(stem)
    if slug:
        result['slug'] = slug
    if author:
        result['author'] = author
    return result


def render(frontmatter: Dict[str, Any], content: str) -> str:
    """Prefix content with a YAML front matter block."""
    frontmatter_str = yaml.dump(
        frontmatter,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=True,
    )
    return f"{FRONTMATTER_DELIMITER}\n{frontmatter_str}{FRONTMATTER_DELIMITER}\n{content}"


def ensure_frontmatter(
    data: bytes,
    stem: str,
    author: Optional[str] = None,
    clock: Clock = _now,
) -> bytes:
    """Return note bytes with Hugo front matter added if it has none.

    Notes that already have front matter are returned unchanged.
    """
    content = data.decode("utf-8")
    if has_frontmatter(content):
        return data
    return render(hugo_frontmatter(stem, author, clock), content).encode("utf-8")
