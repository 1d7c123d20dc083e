"""Authoring guidance for fragment files, printed on request.

Mirrors the vocabulary handled by hydrator.utils.markdown; edit both together.
"""

_GUIDANCE_RULES = """\
Fragment formatting help for {target}:
- MARKDOWN: # ## ### #### at the start of a line for headers (level 1-4).
- **bold** and *italic* work anywhere in a line, headers included.
- Bullets: start a line with a single marker and a space: - item, * item, + item.
  Every list renders as bullets; blank lines between items keep one list.
- Paragraphs: consecutive lines are joined; a blank line starts a new paragraph.
- ADVANCED: paste HTML directly into the file. A fragment whose first \
character is '<' is inserted as-is with no markdown processing.
- Fragment content is inserted without escaping. Only operators should edit \
these files.\
"""


def load_guidance(fragment_id: str | None = None) -> str:
    """Return the authoring guidance, addressed to one fragment or to all of them."""
    return _GUIDANCE_RULES.format(target=fragment_id or "your content files")
