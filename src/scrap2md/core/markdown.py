"""
Purpose: Serialize a Scrap's comment tree to Markdown.
Constraints: Pure functions; pattern-based rewriting only, no Markdown parsing.

Two layouts are supported and they are not interchangeable:

- ``flat`` (default): every comment is a section under a bold
  ``**author (created_at)**`` header; top-level threads are separated by
  ``---``.
- ``quote``: replies are nested in blockquotes, one ``> `` per depth level,
  with no separators and no backlink unless an absolute URL is given.
"""

# Imports
import re
from typing import List, Optional, Sequence

from scrap2md.core.models import Comment, Scrap
from scrap2md.core.slug import is_absolute_url, relative_link

STYLES = ("flat", "quote")
SEPARATOR = "---"

# ![](https://x/img.png =200x)
_IMAGE_DIRECTIVE = re.compile(r"!\[\]\(\s*([^\s)]+)(?:\s+=(\d+)x)?\s*\)")


def _image_tag(match: "re.Match[str]") -> str:
    src, width = match.group(1), match.group(2)
    if width:
        return f'<img src="{src}" width="{width}">'
    return f'<img src="{src}">'


def rewrite_images(text: str) -> str:
    """Replace empty-alt image embeds with HTML ``<img>`` tags."""
    return _IMAGE_DIRECTIVE.sub(_image_tag, text)


def body_lines(text: str) -> List[str]:
    """Split on \\n only, dropping a trailing \\r per line and a final empty line."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def comment_header(comment: Comment) -> str:
    return f"**{comment.author} ({comment.created_at})**"


def _render_flat(comments: Sequence[Comment], skip_header: bool, out: List[str], top_level: bool) -> None:
    for index, comment in enumerate(comments):
        if not skip_header:
            out.append(f"{comment_header(comment)}\n\n")
        out.append(f"{rewrite_images(comment.body)}\n\n")
        _render_flat(comment.children, skip_header, out, top_level=False)
        if top_level and not skip_header and index < len(comments) - 1:
            out.append(f"{SEPARATOR}\n\n")


def _render_quoted(comments: Sequence[Comment], skip_header: bool, out: List[str], depth: int) -> None:
    prefix = "> " * depth
    for comment in comments:
        if not skip_header:
            out.append(f"{prefix}{comment_header(comment)}\n\n")
        for line in body_lines(rewrite_images(comment.body)):
            out.append(f"{prefix}{line}\n")
        out.append("\n")
        _render_quoted(comment.children, skip_header, out, depth + 1)


# Public API
def render_markdown(
    scrap: Scrap,
    url: Optional[str] = None,
    skip_header: bool = False,
    style: str = "flat",
) -> str:
    """Render ``scrap`` as a Markdown document.

    An absolute ``url`` adds a backlink under the title (platform-relative
    path as text, full URL as target); a bare slug adds none.
    ``skip_header`` drops the per-comment author lines and, in the flat
    layout, the separators between threads.
    """
    if style not in STYLES:
        raise ValueError(f"Unknown render style {style!r}; expected one of {STYLES}")

    out = [f"# {scrap.title}\n\n"]
    if url and is_absolute_url(url):
        out.append(f"[{relative_link(url)}]({url})\n\n")
    if style == "quote":
        _render_quoted(scrap.comments, skip_header, out, depth=0)
    else:
        _render_flat(scrap.comments, skip_header, out, top_level=True)
    return "".join(out)
