"""Fragment Preview: Streamlit UI for authoring and loading content fragments."""

import sys
from pathlib import Path

# Add project root to path so 'hydrator' package is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

import asyncio

import streamlit as st

from hydrator.config import get_config
from hydrator.fragments import FRAGMENT_TARGETS
from hydrator.main import hydrate
from hydrator.utils.guidance import load_guidance
from hydrator.utils.markdown import (
    Heading,
    ListBlock,
    Paragraph,
    group_lists,
    looks_like_html,
    render,
    scan_blocks,
)

st.set_page_config(page_title="Fragment Preview", layout="wide")
st.title("Fragment Preview")
st.markdown(
    "Type fragment text to see how it will look on the page, then run a loading "
    "pass to push every fragment in the content folder into the page."
)

st.divider()


# ---------------------------------------------------------------------------
# Helper renderers
# ---------------------------------------------------------------------------


def _render_block_table(raw_text: str) -> str:
    """Build a markdown table of the blocks the renderer produces."""
    if looks_like_html(raw_text):
        return "*Raw HTML: inserted as-is, no markdown processing.*"

    blocks = group_lists(scan_blocks(raw_text))
    if not blocks:
        return "*No blocks.*"

    lines = [
        "| # | Block | Content |",
        "|---|-------|---------|",
    ]
    for i, block in enumerate(blocks, 1):
        if isinstance(block, Heading):
            kind, content = f"Heading {block.level}", block.text
        elif isinstance(block, Paragraph):
            kind, content = "Paragraph", block.text
        elif isinstance(block, ListBlock):
            kind, content = f"List ({len(block.items)} items)", " / ".join(block.items)
        else:
            kind, content = "Raw HTML", block.text
        content = content.replace("|", "\\|")
        lines.append(f"| {i} | {kind} | `{content}` |")
    return "\n".join(lines)


def _render_status_table(status: dict) -> str:
    """Build a markdown table of every fragment and whether it loaded."""
    lines = [
        "| Fragment | Target | Loaded |",
        "|----------|--------|--------|",
    ]
    loaded = set(status["loaded"])
    for fragment_id, target_id in FRAGMENT_TARGETS.items():
        mark = "yes" if fragment_id in loaded else "-"
        lines.append(f"| `{fragment_id}` | `{target_id}` | {mark} |")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Live preview
# ---------------------------------------------------------------------------

raw_text = st.text_area(
    "Fragment text:",
    height=220,
    placeholder="# Heading\n\nSome **bold** and *italic* text.\n\n- first point\n- second point",
)

if raw_text.strip():
    html = render(raw_text)
    preview_col, source_col = st.columns(2)
    with preview_col:
        st.subheader("Preview")
        st.markdown(html, unsafe_allow_html=True)
    with source_col:
        st.subheader("HTML")
        st.code(html, language="html")

    with st.expander("Block sequence"):
        st.markdown(_render_block_table(raw_text))

with st.expander("Formatting help"):
    st.code(load_guidance(), language="text")

st.divider()

# ---------------------------------------------------------------------------
# Loading pass
# ---------------------------------------------------------------------------

config = get_config()
st.subheader("Load fragments")
st.caption(
    f"Page: `{config['page_path']}` · Content source: `{config['content_source']}` · "
    f"Output: `{config['output_path']}`"
)

if st.button("Run one loading pass", type="primary"):
    page_path = Path(config["page_path"])
    if not page_path.is_file():
        st.error(f"Page not found: {page_path}")
        st.stop()

    with st.spinner("Loading fragments..."):
        loader = asyncio.run(hydrate(page_path.read_text(encoding="utf-8"), once=True))

    status = loader.status()
    if status["loaded_count"] == status["total"]:
        st.success(f"All {status['total']} fragments loaded.")
    elif status["loaded_count"]:
        st.info(f"Loaded {status['loaded_count']}/{status['total']} fragments.")
    else:
        st.warning("No fragments loaded. Check the content source.")

    with st.expander("Fragments", expanded=True):
        st.markdown(_render_status_table(status))

    with st.expander("Diagnostics"):
        for event in loader.diagnostics.events:
            st.markdown(f"- **{event.kind}**: {event.message()}")
