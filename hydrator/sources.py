"""Content sources: where fragment bytes come from.

A source exposes ``async fetch(fragment_id) -> bytes`` and raises
FragmentNotFound or TransportError. Retrying is the loader's business (the
next pass), so sources never retry on their own.
"""

import asyncio
from pathlib import Path

import httpx

from hydrator.errors import FragmentNotFound, TransportError


class HttpContentSource:
    """Fetch fragments with GET ``{base_url}/{fragment_id}``."""

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def fetch(self, fragment_id: str) -> bytes:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

        url = f"{self._base_url}/{fragment_id}"
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise TransportError(fragment_id, str(exc) or exc.__class__.__name__) from exc

        if resp.status_code == 404:
            raise FragmentNotFound(fragment_id, f"404 from {url}")
        if not resp.is_success:
            raise TransportError(fragment_id, f"HTTP {resp.status_code} from {url}")
        return resp.content

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


class DirectoryContentSource:
    """Read fragments from files in a local directory."""

    def __init__(self, root: Path | str):
        self._root = Path(root)

    async def fetch(self, fragment_id: str) -> bytes:
        path = self._root / fragment_id
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError as exc:
            raise FragmentNotFound(fragment_id, f"no file at {path}") from exc
        except OSError as exc:
            raise TransportError(fragment_id, str(exc)) from exc

    async def aclose(self) -> None:
        return None


def open_content_source(
    location: str, timeout: float | None = None
) -> HttpContentSource | DirectoryContentSource:
    """Pick a source for a config value: http(s) URL or directory path."""
    if location.startswith(("http://", "https://")):
        return HttpContentSource(location, timeout=timeout)
    return DirectoryContentSource(location)
