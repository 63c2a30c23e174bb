"""System and game lists read from gamelist XML files."""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from pathlib import Path

from .datetimes import DateTime

__all__ = ["CurrentList", "GameList", "SystemList", "GameListManager"]

_LEADING_INT = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")


class CurrentList(Enum):
    """Which list the manager is currently showing."""

    SYSTEM_LIST = 0
    GAME_LIST = 1


@total_ordering
@dataclass(eq=False)
class GameList:
    """One entry of a game list; entries compare by their position in the file."""

    map_index: int = -1
    path: str = ""
    name: str = ""
    desc: str = ""
    rating: str = ""
    developer: str = ""
    publisher: str = ""
    genre: str = ""
    players: str = ""
    hash: str = ""
    image: str = ""
    thumbnail: str = ""
    video: str = ""
    genre_id: str = ""
    favorite: bool = False
    play_count: int = 0
    executable: str = ""
    arguments: str = ""
    release_date: DateTime = field(default_factory=DateTime)
    last_played: DateTime = field(default_factory=DateTime)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameList):
            return NotImplemented
        return self.map_index == other.map_index

    def __lt__(self, other: GameList) -> bool:
        if not isinstance(other, GameList):
            return NotImplemented
        return self.map_index < other.map_index

    def __hash__(self) -> int:
        return hash(self.map_index)


@total_ordering
@dataclass(eq=False)
class SystemList:
    """One emulated system; entries compare by their position in the file."""

    map_index: int = -1
    executable: str = ""
    arguments: str = ""
    rom_path: str = ""
    system_name: str = ""
    system_label: str = ""
    image: str = ""
    screenshot: str = ""
    video: str = ""
    desc: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemList):
            return NotImplemented
        return self.map_index == other.map_index

    def __lt__(self, other: SystemList) -> bool:
        if not isinstance(other, SystemList):
            return NotImplemented
        return self.map_index < other.map_index

    def __hash__(self) -> int:
        return hash(self.map_index)


def _normalize_path(path: str) -> str:
    """Use the platform's separator throughout."""
    return path.replace("\\", os.sep).replace("/", os.sep)


def _read_root(path: Path) -> ET.Element | None:
    try:
        return ET.parse(path).getroot()
    except (OSError, ET.ParseError):
        return None


def _text(element: ET.Element, name: str) -> str | None:
    child = element.find(name)
    if child is None:
        return None
    return child.text


def _to_int(text: str | None) -> int:
    if text is None:
        return 0
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    value = int(digits, 16) if digits[:2].lower() == "0x" else int(digits)
    return -value if sign == "-" else value


def _to_bool(text: str | None) -> bool:
    if text is None:
        return False
    if _LEADING_INT.match(text):
        return _to_int(text) != 0
    return text.strip() in ("true", "True", "TRUE")


class GameListManager:
    """Holds the system list and the list shown for the current system."""

    def __init__(self, system_list_path: str | os.PathLike[str]) -> None:
        self.system_list_path = Path(system_list_path)
        self._current_list = CurrentList.SYSTEM_LIST
        self._system_id = 0
        self._game_id = 0
        self._games: list[GameList] = []
        self._systems: list[SystemList] = []

    @property
    def current_list(self) -> CurrentList:
        return self._current_list

    @property
    def game_id(self) -> int:
        return self._game_id

    @property
    def system_id(self) -> int:
        return self._system_id

    @property
    def games(self) -> list[GameList]:
        """The entries currently shown: systems or games."""
        return self._games

    @property
    def systems(self) -> list[SystemList]:
        return self._systems

    def initialize(self) -> None:
        """Read the system list and show it."""
        self.load_system_list()
        self.load_list()

    def load_list(self) -> None:
        """Fill the shown list according to the current mode."""
        if not self._systems:
            return
        if self._current_list is CurrentList.SYSTEM_LIST:
            self._load_systems_as_games()
        else:
            self._load_game_list()

    def load_system_list(self) -> None:
        """Append the systems read from the system list file, sorted by label."""
        root = _read_root(self.system_list_path)
        if root is None:
            return
        for index, element in enumerate(root.findall("system")):
            self._systems.append(
                SystemList(
                    map_index=index,
                    executable=_normalize_path(_text(element, "executable") or ""),
                    arguments=_normalize_path(_text(element, "arguments") or ""),
                    rom_path=_normalize_path(_text(element, "rompath") or ""),
                    system_name=_text(element, "systemname") or "",
                    system_label=_text(element, "systemlabel") or "",
                    image=_text(element, "image") or "",
                    screenshot=_text(element, "thumbnail") or "",
                    video=_text(element, "video") or "",
                    desc=_text(element, "desc") or "",
                )
            )
        self.sort_systems_by_name()

    def change_system_to_game_list(self) -> None:
        """Open the games of the selected system."""
        self._system_id = self._game_id
        self._game_id = 0
        self._current_list = CurrentList.GAME_LIST
        self.clear_game_list()
        self.load_list()

    def change_game_to_system_list(self) -> None:
        """Go back to the system list, selecting the system that was open."""
        self._game_id = self._system_id
        self._current_list = CurrentList.SYSTEM_LIST
        self.clear_game_list()
        self.load_list()

    def add_id(self, offset: int) -> None:
        """Move the selection by an offset, wrapping around the list."""
        size = len(self._games)
        self._game_id = (self._game_id + offset) % size if size else 0

    def change_id(self, new_id: int) -> None:
        """Select an entry, clamped to the list bounds."""
        self._game_id = max(0, min(new_id, len(self._games) - 1))

    def current_game(self) -> GameList | None:
        """The selected entry, or None when the list is empty."""
        return self._games[self._game_id] if self._games else None

    def game_at(self, index: int) -> GameList:
        return self._games[index]

    def current_system(self) -> SystemList:
        return self._systems[self._system_id]

    def clear_system_list(self) -> None:
        self._systems.clear()

    def clear_game_list(self) -> None:
        self._games.clear()

    def sort_games_by_name(self) -> None:
        self._games.sort(key=lambda game: game.name)

    def sort_systems_by_name(self) -> None:
        self._systems.sort(key=lambda system: system.system_label)

    def _load_game_list(self) -> None:
        system = self._systems[self._system_id]
        root = _read_root(Path(_normalize_path(system.rom_path + "/gamelist.xml")))
        if root is None:
            return
        for index, element in enumerate(root.findall("game")):

            def text(name: str) -> str:
                return _text(element, name) or ""

            def path_text(name: str) -> str:
                return _normalize_path(text(name))

            game = GameList(
                map_index=index,
                path=path_text("path"),
                name=text("name"),
                desc=text("desc"),
                rating=text("rating"),
                developer=text("developer"),
                publisher=text("publisher"),
                genre=text("genre"),
                players=text("players"),
                hash=text("hash"),
                image=path_text("image"),
                thumbnail=path_text("thumbnail"),
                video=path_text("video"),
                genre_id=text("genreid"),
                favorite=_to_bool(_text(element, "favorite")),
                play_count=_to_int(_text(element, "playcount")),
                executable=path_text("executable"),
                arguments=path_text("arguments"),
                release_date=DateTime.parse(text("releasedate")),
                last_played=DateTime.parse(text("lastplayed")),
            )
            self._replace_current_path(game)
            self._games.append(game)
        self.sort_games_by_name()

    def _load_systems_as_games(self) -> None:
        for system in self._systems:
            game = GameList(
                map_index=system.map_index,
                name=system.system_label,
                desc=system.desc,
                image=system.image,
                executable=system.executable,
                arguments=system.arguments,
            )
            self._replace_current_path(game)
            self._games.append(game)

    def _replace_current_path(self, game: GameList) -> None:
        """Resolve paths relative to the current system's rom directory."""
        dot_slash = "." + os.sep
        prefix = self._systems[self._system_id].rom_path + os.sep
        game.path = game.path.replace(dot_slash, prefix)
        game.image = game.image.replace(dot_slash, prefix)
        game.thumbnail = game.thumbnail.replace(dot_slash, prefix)
        game.video = game.video.replace(dot_slash, prefix)