"""Object storage access over the Django storage API."""

import posixpath
from urllib.parse import unquote

from django.core.files.base import ContentFile
from django.core.files.storage import Storage, storages


class ObjectStorage:
    """Key/value blob store with public URLs.

    Wraps a configured Django storage backend (``STORAGES[alias]``); keys
    are ``folder/filename`` paths and every key has a public URL under the
    backend's ``base_url``.
    """

    def __init__(self, storage: Storage | None = None, alias: str = "default") -> None:
        """Initialize the wrapper.

        Args:
            storage: Backend to use; resolved from ``STORAGES[alias]`` when None
            alias: Storage alias used when no backend is given
        """
        self._storage = storage
        self.alias = alias

    @property
    def backend(self) -> Storage:
        """The underlying Django storage backend."""
        if self._storage is None:
            return storages[self.alias]
        return self._storage

    def save(self, key: str, content: bytes) -> str:
        """Write ``content`` under ``key``; returns the key actually used."""
        return self.backend.save(key, ContentFile(content))

    def exists(self, key: str) -> bool:
        """Whether an object is stored under ``key``."""
        return self.backend.exists(key)

    def delete(self, key: str) -> None:
        """Remove the object stored under ``key``."""
        self.backend.delete(key)

    def url(self, key: str) -> str:
        """Public URL of ``key``."""
        return self.backend.url(key)

    def key_from_url(self, url: str) -> str | None:
        """Map a public URL back to its key.

        Returns None when the URL is not under this storage's base URL or
        does not name an object below it.
        """
        base_url = getattr(self.backend, "base_url", None) or ""
        if not base_url or not url.startswith(base_url):
            return None

        key = unquote(url[len(base_url) :].split("?", 1)[0]).lstrip("/")
        if not key or key.endswith("/"):
            return None
        normalized = posixpath.normpath(key)
        if normalized.startswith("..") or normalized != key:
            return None
        return key


object_storage = ObjectStorage()
