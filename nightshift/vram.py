"""Static allocation of video memory for frame, depth and texture buffers."""

from __future__ import annotations

from enum import IntEnum

EDRAM_BASE = 0x04000000
"""Absolute address at which embedded video memory starts."""


class PixelFormat(IntEnum):
    """Pixel storage modes understood by the graphics unit."""

    PSM_5650 = 0
    PSM_5551 = 1
    PSM_4444 = 2
    PSM_8888 = 3
    PSM_T4 = 4
    PSM_T8 = 5
    PSM_T16 = 6
    PSM_T32 = 7
    PSM_DXT1 = 8
    PSM_DXT3 = 9
    PSM_DXT5 = 10


_BYTES_PER_PIXEL = {
    PixelFormat.PSM_T8: 1,
    PixelFormat.PSM_5650: 2,
    PixelFormat.PSM_5551: 2,
    PixelFormat.PSM_4444: 2,
    PixelFormat.PSM_T16: 2,
    PixelFormat.PSM_8888: 4,
    PixelFormat.PSM_T32: 4,
}


def memory_size(width: int, height: int, psm: PixelFormat | int) -> int:
    """Bytes needed for a ``width`` x ``height`` buffer in format ``psm``.

    Formats without a fixed size per pixel (the compressed ones, or any
    unknown code) need no memory and give 0.
    """
    if width < 0 or height < 0:
        raise ValueError("buffer dimensions must not be negative")
    try:
        fmt = PixelFormat(psm)
    except ValueError:
        return 0
    pixels = width * height
    if fmt is PixelFormat.PSM_T4:
        return pixels >> 1
    return _BYTES_PER_PIXEL.get(fmt, 0) * pixels


class VramAllocator:
    """Hands out consecutive regions of video memory that are never freed."""

    def __init__(self, base_address: int = EDRAM_BASE) -> None:
        self.base_address = base_address
        self.offset = 0

    def static_buffer(self, width: int, height: int, psm: PixelFormat | int) -> int:
        """Reserve a buffer and return its offset from the start of video memory."""
        result = self.offset
        self.offset += memory_size(width, height, psm)
        return result

    def static_texture(self, width: int, height: int, psm: PixelFormat | int) -> int:
        """Reserve a buffer and return its absolute address."""
        return self.base_address + self.static_buffer(width, height, psm)