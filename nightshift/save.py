"""Progress stored as four small files of space-separated binary bytes."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

NIGHT_FILE = "night.bin"
MODE1_FILE = "mode1.bin"
MODE2_FILE = "mode2.bin"
STAR_FILE = "star.bin"

_FILES = (NIGHT_FILE, MODE1_FILE, MODE2_FILE, STAR_FILE)


def encode_text(text: str) -> str:
    """Spell out ``text`` as eight-bit groups separated by single spaces."""
    return " ".join(format(byte, "08b") for byte in text.encode("ascii"))


def decode_text(bits: str) -> str:
    """Inverse of :func:`encode_text`; malformed groups raise ValueError."""
    groups = bits.split()
    for group in groups:
        if len(group) != 8 or set(group) - {"0", "1"}:
            raise ValueError(f"not an eight-bit group: {group!r}")
    return bytes(int(group, 2) for group in groups).decode("ascii")


_NIGHT_CODES = {encode_text(f"night {n}"): n for n in range(1, 6)}
_MODE_CODES = {encode_text("locked"): False, encode_text("unlocked"): True}
_STAR_CODES = {encode_text(f"star {n}"): n for n in range(4)}


@dataclass
class SaveData:
    """The player's progress as the game sees it."""

    night: int = 1
    mode1_unlocked: bool = False
    mode2_unlocked: bool = False
    stars: int = 0


class SaveStore:
    """Reads and writes progress in a save directory."""

    def __init__(self, directory: str | Path = "saves", data: SaveData | None = None) -> None:
        self.directory = Path(directory)
        self.data = data if data is not None else SaveData()
        self.loaded = False

    def _path(self, name: str) -> Path:
        return self.directory / name

    def _write(self, name: str, text: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self._path(name).write_text(encode_text(text) + "\n", encoding="ascii")

    def _first_line(self, name: str) -> str:
        try:
            with self._path(name).open(encoding="ascii", errors="replace") as handle:
                line = handle.readline()
        except OSError:
            return ""
        return line[:-1] if line.endswith("\n") else line

    def load(self) -> SaveData:
        """Read the save files into ``data``; recreate them if all are missing.

        Lines that are not recognised leave the matching value unchanged.
        On the seventh night the files are not read at all.
        """
        if not any(self._path(name).exists() for name in _FILES):
            self.clear()

        night, mode1, mode2, stars = (self._first_line(name) for name in _FILES)

        if self.data.night != 7:
            if night in _NIGHT_CODES:
                self.data.night = _NIGHT_CODES[night]
            if mode1 in _MODE_CODES:
                self.data.mode1_unlocked = _MODE_CODES[mode1]
            if mode2 in _MODE_CODES:
                self.data.mode2_unlocked = _MODE_CODES[mode2]
            if stars in _STAR_CODES:
                self.data.stars = _STAR_CODES[stars]
            self.loaded = True
        return self.data

    def save_progress(self, night: int) -> None:
        """Record that ``night`` was survived."""
        if 1 <= night <= 4:
            self._write(NIGHT_FILE, f"night {night + 1}")
        elif night == 5:
            self._write(MODE1_FILE, "unlocked")
            self._write(STAR_FILE, "star 1")
        elif night == 6:
            self._write(MODE2_FILE, "unlocked")
            self._write(STAR_FILE, "star 2")
        elif night == 7:
            self._write(STAR_FILE, "star 3")

    def clear(self) -> None:
        """Write a fresh save: night one, both extras locked, no stars."""
        self._write(NIGHT_FILE, "night 1")
        self._write(MODE1_FILE, "locked")
        self._write(MODE2_FILE, "locked")
        self._write(STAR_FILE, "star 0")