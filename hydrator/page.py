"""Page binding: puts rendered fragments into their placeholder elements."""

from bs4 import BeautifulSoup, Tag

from hydrator.errors import UnmappedTarget


def _set_style(tag: Tag, prop: str, value: str) -> None:
    """Set one property in an inline ``style`` attribute, keeping the others."""
    declarations = {}
    for part in tag.get("style", "").split(";"):
        if ":" in part:
            name, _, val = part.partition(":")
            declarations[name.strip()] = val.strip()
    declarations[prop] = value
    tag["style"] = "; ".join(f"{k}: {v}" for k, v in declarations.items())


class PageBinder:
    """Wraps an HTML document and binds fragment HTML to elements by id.

    Binding replaces the element's children, then settles the enclosing
    placeholder container: its edit notice is hidden, its click-to-edit
    handler removed, and its tooltip names the fragment it now shows.
    """

    def __init__(
        self,
        html: str,
        container_class: str = "content-file-preview",
        notice_class: str = "edit-notice",
    ):
        self._soup = BeautifulSoup(html, "html.parser")
        self._container_class = container_class
        self._notice_class = notice_class

    def _target(self, target_id: str, fragment_id: str) -> Tag:
        target = self._soup.find(id=target_id)
        if target is None:
            raise UnmappedTarget(fragment_id, f"no element with id '{target_id}'")
        return target

    def bind(self, target_id: str, fragment_id: str, html: str) -> None:
        """Replace the target's content with ``html`` and settle its container."""
        target = self._target(target_id, fragment_id)
        target.clear()
        target.append(BeautifulSoup(html, "html.parser"))
        self._settle(target, fragment_id)

    def bind_plain(self, target_id: str, fragment_id: str) -> None:
        """Settle the target's container without touching its content (empty fragment)."""
        target = self._target(target_id, fragment_id)
        self._settle(target, fragment_id)

    def _settle(self, target: Tag, fragment_id: str) -> None:
        container = target.find_parent(class_=self._container_class)
        if container is None:
            return

        notice = container.find(class_=self._notice_class)
        if notice is not None:
            _set_style(notice, "display", "none")

        if "onclick" in container.attrs:
            del container["onclick"]
        _set_style(container, "cursor", "default")
        container["title"] = f"Content loaded from content/{fragment_id}"

    def html(self) -> str:
        return str(self._soup)
