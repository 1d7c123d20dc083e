"""Input validation: checks that the page to hydrate is a non-empty HTML string."""


def validate_page(page_html: str) -> str:
    """Validate that the page is a non-empty string.

    Returns the page unchanged on success.
    Raises ValueError if it is empty, whitespace-only or not a string.
    """
    if not isinstance(page_html, str) or not page_html.strip():
        raise ValueError("Page must be a non-empty HTML string.")
    return page_html
