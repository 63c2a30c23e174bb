"""Texture slots for sprites and game covers, with simple eviction."""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, Optional, Protocol

__all__ = ["StatusImage", "TextureImage", "TextureManager", "TextureLoader"]

_CLEAR_THRESHOLD = 64


class StatusImage(Enum):
    UNLOAD = 0
    LOADED = 1


class TextureLoader(Protocol):
    """Creates textures from a path or an image and releases them."""

    def load(self, source: Any) -> Optional[Any]:
        """Return a texture, or None when it could not be created."""
        ...

    def unload(self, texture: Any) -> None: ...


class TextureImage:
    """A texture slot that remembers whether it holds a loaded texture."""

    def __init__(self) -> None:
        self.status = StatusImage.UNLOAD
        self.texture: Optional[Any] = None
        self._loader: Optional[TextureLoader] = None

    def load(self, source: Any, loader: TextureLoader) -> None:
        """Replace the held texture with one made from ``source``."""
        self.unload()
        self._loader = loader
        self.texture = loader.load(source)
        if self.texture is not None:
            self.status = StatusImage.LOADED

    def unload(self) -> None:
        """Release the held texture, if any."""
        if self.texture is not None:
            if self._loader is not None:
                self._loader.unload(self.texture)
            self.status = StatusImage.UNLOAD
            self.texture = None


class TextureManager:
    """Named sprite textures plus full-size and mini covers keyed by game index."""

    def __init__(self, loader: TextureLoader) -> None:
        self.loader = loader
        self.sprites: dict[str, TextureImage] = {}
        self.covers: dict[int, TextureImage] = {}
        self.covers_mini: dict[int, TextureImage] = {}
        self.count_clear = 0

    def get_sprite(self, name: str) -> Optional[Any]:
        """The texture of a sprite; the slot is created empty if missing."""
        return self.sprites.setdefault(name, TextureImage()).texture

    def get_cover(self, cover_id: int) -> TextureImage:
        return self.covers.setdefault(cover_id, TextureImage())

    def get_cover_mini(self, cover_id: int) -> TextureImage:
        return self.covers_mini.setdefault(cover_id, TextureImage())

    def status_of(self, name: str) -> StatusImage:
        return self.sprites.setdefault(name, TextureImage()).status

    def set_sprite(self, key: str, source: Any) -> None:
        """Load a sprite unless one is already loaded under this key."""
        slot = self.sprites.setdefault(key, TextureImage())
        if slot.status is StatusImage.UNLOAD:
            slot.load(source, self.loader)

    def set_cover(self, key: int, source: Any) -> None:
        self._set_counted(self.get_cover(key), source)

    def set_cover_mini(self, key: int, source: Any) -> None:
        self._set_counted(self.get_cover_mini(key), source)

    def delete_sprite(self, keep: Iterable[int]) -> None:
        """After enough cover loads, mark covers outside ``keep`` for reloading."""
        if self.count_clear <= _CLEAR_THRESHOLD:
            return
        self.count_clear = 0
        kept = set(keep)
        for key in list(self.covers):
            if key not in kept:
                self.covers[key].status = StatusImage.UNLOAD
                self.get_cover_mini(key).status = StatusImage.UNLOAD

    def clear_covers(self) -> None:
        """Mark every cover for reloading."""
        for slot in (*self.covers.values(), *self.covers_mini.values()):
            slot.status = StatusImage.UNLOAD

    def end_play(self) -> None:
        """Release every texture and forget all slots."""
        for slot in (*self.sprites.values(), *self.covers.values(), *self.covers_mini.values()):
            slot.unload()
        self.sprites.clear()
        self.covers.clear()
        self.covers_mini.clear()

    def _set_counted(self, slot: TextureImage, source: Any) -> None:
        if slot.status is StatusImage.UNLOAD:
            self.count_clear += 1
            slot.load(source, self.loader)