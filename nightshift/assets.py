"""Loaded images, kept by the name of the group they were loaded with."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path
from typing import Any, Optional

from .asset_paths import group_paths

Loader = Callable[[str], Any]
Releaser = Callable[[Any], None]


class AssetCache:
    """Loads groups of images on demand and releases them when asked.

    ``loader`` turns a path into an image; by default the file's bytes are
    read relative to ``root``. ``releaser``, if given, is called for every
    image that leaves the cache.
    """

    def __init__(
        self,
        root: str | Path = ".",
        loader: Optional[Loader] = None,
        releaser: Optional[Releaser] = None,
    ) -> None:
        self.root = Path(root)
        self._loader = loader if loader is not None else self._read_file
        self._releaser = releaser
        self._groups: dict[str, tuple[Any, ...]] = {}

    def _read_file(self, path: str) -> bytes:
        return (self.root / path).read_bytes()

    def _release(self, images: Iterable[Any]) -> None:
        if self._releaser is not None:
            for image in images:
                self._releaser(image)

    def load(self, name: str, paths: Optional[Iterable[str]] = None) -> tuple[Any, ...]:
        """Load ``paths`` (the known group ``name`` if omitted) under ``name``.

        The images are returned in path order. A group already loaded under
        that name is released and replaced. An empty list of paths loads
        nothing and leaves the name unloaded. If any image fails to load the
        error propagates and the images read so far are released.
        """
        path_list = tuple(group_paths(name) if paths is None else paths)
        if not path_list:
            return ()
        images: list[Any] = []
        try:
            for path in path_list:
                images.append(self._loader(path))
        except BaseException:
            self._release(images)
            raise
        self.unload(name)
        loaded = tuple(images)
        self._groups[name] = loaded
        return loaded

    def unload(self, name: str) -> bool:
        """Release the group ``name``; return False if it was not loaded."""
        images = self._groups.pop(name, None)
        if images is None:
            return False
        self._release(images)
        return True

    def is_loaded(self, name: str) -> bool:
        """Return True if a group is loaded under ``name``."""
        return name in self._groups

    def get(self, name: str) -> tuple[Any, ...]:
        """The images loaded under ``name``; KeyError if it is not loaded."""
        try:
            return self._groups[name]
        except KeyError:
            raise KeyError(f"image group not loaded: {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._groups

    def __iter__(self) -> Iterator[str]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)