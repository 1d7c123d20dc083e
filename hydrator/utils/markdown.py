"""Markdown Renderer: converts a fragment's raw text into block-level HTML.

Handles a small fixed vocabulary: ``#`` to ``####`` headings, ``**bold**``
and ``*italic*``, single-marker list items and paragraphs separated by blank
lines. All lists render as ``<ul>``.

Rendering happens in two passes over an intermediate block sequence:
``scan_blocks`` turns lines into Heading / Paragraph / ListItem / RawHtml
blocks, then ``group_lists`` folds every run of adjacent ListItems into a
single ListBlock. A blank line emits no block, so two list runs separated
only by blank lines end up in one list.

Raw HTML characters are NOT escaped. Fragments are operator-authored and
trusted; do not feed end-user input through this renderer.
"""

import re
from dataclasses import dataclass

_HEADING_RE = re.compile(r"^(#{1,4}) (.*)$")
_BOLD_RE = re.compile(r"\*\*(.+?)\*\*")
_ITALIC_RE = re.compile(r"\*(.+?)\*")
_LIST_MARKER_RE = re.compile(r"^[\d.\-*+]\s")


@dataclass(frozen=True)
class Heading:
    level: int  # 1-4
    text: str


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class ListItem:
    text: str


@dataclass(frozen=True)
class RawHtml:
    text: str


@dataclass(frozen=True)
class ListBlock:
    items: tuple[str, ...]


Block = Heading | Paragraph | ListItem | RawHtml


def looks_like_html(text: str) -> bool:
    """Return True if the fragment is already HTML and must pass through untouched."""
    return text.strip().startswith("<") and ">" in text


def _emphasize(text: str) -> str:
    """Apply bold then italic. Bold first so ``**`` pairs are not split as italics."""
    text = _BOLD_RE.sub(r"<strong>\1</strong>", text)
    return _ITALIC_RE.sub(r"<em>\1</em>", text)


def scan_blocks(text: str) -> list[Block]:
    """First pass: scan lines into an ordered block sequence."""
    blocks: list[Block] = []
    paragraph: list[str] = []

    def _flush() -> None:
        if paragraph:
            blocks.append(Paragraph(" ".join(paragraph)))
            paragraph.clear()

    for raw_line in text.split("\n"):
        raw_line = raw_line.rstrip("\r")

        # Headings are anchored at column 0, before trimming
        heading = _HEADING_RE.match(raw_line)
        if heading:
            _flush()
            level = len(heading.group(1))
            blocks.append(Heading(level, _emphasize(heading.group(2).strip())))
            continue

        line = _emphasize(raw_line).strip()

        if _LIST_MARKER_RE.match(line):
            _flush()
            blocks.append(ListItem(_LIST_MARKER_RE.sub("", line, count=1)))
        elif not line:
            _flush()
        elif line.startswith(("<h", "<H")):
            _flush()
            blocks.append(RawHtml(line))
        else:
            paragraph.append(line)

    _flush()
    return blocks


def group_lists(blocks: list[Block]) -> list[Block | ListBlock]:
    """Second pass: merge each run of adjacent ListItems into one ListBlock."""
    grouped: list[Block | ListBlock] = []
    for block in blocks:
        if isinstance(block, ListItem):
            if grouped and isinstance(grouped[-1], ListBlock):
                grouped[-1] = ListBlock(grouped[-1].items + (block.text,))
            else:
                grouped.append(ListBlock((block.text,)))
        else:
            grouped.append(block)
    return grouped


def _render_block(block: Block | ListBlock) -> str:
    if isinstance(block, Heading):
        return f"<h{block.level}>{block.text}</h{block.level}>"
    if isinstance(block, Paragraph):
        return f"<p>{block.text}</p>"
    if isinstance(block, ListBlock):
        lines = ["<ul>"]
        lines.extend(f"<li>{item}</li>" for item in block.items)
        lines.append("</ul>")
        return "\n".join(lines)
    return block.text


def render_blocks(blocks: list[Block | ListBlock]) -> str:
    """Render a block sequence, grouping any loose ListItems first."""
    return "\n".join(_render_block(b) for b in group_lists(blocks))


def render(raw_text: str) -> str:
    """Convert a fragment's raw text to an HTML string.

    Input that already looks like HTML (trimmed text starts with ``<`` and
    contains ``>``) is returned unchanged with no markdown processing.
    """
    if looks_like_html(raw_text):
        return raw_text
    return render_blocks(scan_blocks(raw_text))
