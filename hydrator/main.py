"""Entry point: reads the page, polls fragments into it, writes the hydrated copy."""

import asyncio
import sys
from pathlib import Path

from hydrator.config import get_config
from hydrator.loader import FragmentLoader
from hydrator.page import PageBinder
from hydrator.polling import run_polling
from hydrator.sources import open_content_source
from hydrator.state import PollResult
from hydrator.utils.guidance import load_guidance
from hydrator.utils.validator import validate_page


def write_page(binder: PageBinder, output_path: Path) -> Path:
    """Write the current state of the page, creating parent directories."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(binder.html(), encoding="utf-8")
    return output_path


async def hydrate(page_html: str, once: bool = False) -> FragmentLoader:
    """Poll every fragment into the page until loading stops.

    The output page is rewritten after each pass that loaded something, so
    it fills in progressively while polling continues.
    """
    config = get_config()
    binder = PageBinder(
        validate_page(page_html),
        container_class=config.get("container_class", "content-file-preview"),
        notice_class=config.get("notice_class", "edit-notice"),
    )
    source = open_content_source(
        str(config["content_source"]), timeout=config.get("fetch_timeout_s")
    )
    output_path = Path(config["output_path"])
    interval_s = config.get("poll_interval_ms", 3000) / 1000

    loader = FragmentLoader(source, binder)

    def _on_pass(result: PollResult) -> None:
        if result.gained:
            path = write_page(binder, output_path)
            print(
                f"[hydrator] Pass {loader.state['passes']}: "
                f"+{result.gained} fragment(s), page written to {path}"
            )

    try:
        await run_polling(
            loader, interval_s, on_pass=_on_pass, max_passes=1 if once else None
        )
    finally:
        await source.aclose()
    return loader


def run(page_path: str, once: bool = False, show_status: bool = False) -> FragmentLoader:
    """Hydrate the page at ``page_path`` using the configured content source.

    Args:
        page_path: HTML page containing the placeholder elements.
        once: Run a single pass instead of polling.
        show_status: Print the loader status when done.
    """
    page_html = Path(page_path).read_text(encoding="utf-8")
    loader = asyncio.run(hydrate(page_html, once=once))

    if show_status:
        print(loader.format_status())
    return loader


def main() -> None:
    """CLI entry point: optional page path plus --once / --status / --guide."""
    args = sys.argv[1:]

    if "--guide" in args:
        print(load_guidance())
        return

    once = "--once" in args
    if once:
        args.remove("--once")
    show_status = "--status" in args
    if show_status:
        args.remove("--status")

    page_path = args[0] if args else get_config()["page_path"]
    run(page_path, once=once, show_status=show_status)


if __name__ == "__main__":
    main()
