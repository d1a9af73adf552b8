"""World list management.

Each configured server lives in its own properties file inside the worlds
folder, named ``NN_<name>.ini``. Worlds are numbered from 1 in file name
order; world 0 is reserved by the client for "no world selected".
"""

import os
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from . import properties
from .utils import get_logger

logger = get_logger("gameprefs.worlds")

DEFAULT_PORT = 43594
DEFAULT_SERVER_TYPE = 1
WORLD_FILE_COMMENT = "gameprefs world config"


def world_file_name(number: int, name: str) -> str:
    return f"{number:02d}_{name}.ini"


@dataclass
class World:
    name: str
    url: str = ""
    port: int = DEFAULT_PORT
    server_type: int = DEFAULT_SERVER_TYPE
    rsa_pub_key: str = ""
    rsa_exponent: str = ""
    hiscores_url: str = ""
    path: Optional[str] = None

    def to_props(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "url": self.url,
            "port": str(self.port),
            "servertype": str(self.server_type),
            "rsa_pub_key": self.rsa_pub_key,
            "rsa_exponent": self.rsa_exponent,
            "hiscores_url": self.hiscores_url,
        }

    @staticmethod
    def from_props(d: Dict[str, str], path: Optional[str] = None) -> "World":
        """Build a world from its file contents. ``port`` is required."""
        return World(
            name=d.get("name", ""),
            url=d.get("url", ""),
            port=int(d["port"]),
            server_type=int(d.get("servertype", str(DEFAULT_SERVER_TYPE))),
            rsa_pub_key=d.get("rsa_pub_key", ""),
            rsa_exponent=d.get("rsa_exponent", ""),
            hiscores_url=d.get("hiscores_url", ""),
            path=path,
        )


class WorldList:
    """The worlds configured in one folder, addressed by 1-based number."""

    def __init__(self, directory: str):
        self.directory = directory
        self._worlds: List[World] = []

    def __len__(self) -> int:
        return len(self._worlds)

    def __iter__(self) -> Iterator[World]:
        return iter(self._worlds)

    def __getitem__(self, number: int) -> World:
        if not 1 <= number <= len(self._worlds):
            raise IndexError(f"No world {number}; {len(self._worlds)} configured")
        return self._worlds[number - 1]

    def numbered(self) -> Iterator:
        return enumerate(self._worlds, start=1)

    def load(self) -> "WorldList":
        """Read every world file. An empty folder gets one blank world."""
        self._worlds = []
        try:
            names = sorted(os.listdir(self.directory))
        except OSError as e:
            logger.warning(f"Could not list worlds folder {self.directory}: {e}")
            names = []

        for fname in names:
            path = os.path.abspath(os.path.join(self.directory, fname))
            if os.path.isdir(path):
                continue
            try:
                world = World.from_props(properties.load_file(path), path=path)
            except (OSError, KeyError, ValueError) as e:
                logger.warning(f"Error loading world config for {path}: {e}")
                continue
            self._worlds.append(world)

        if not self._worlds:
            self.create_world()
        logger.debug(f"Loaded {len(self._worlds)} world(s) from {self.directory}")
        return self

    def create_world(self) -> World:
        """Append a blank world and write its file."""
        number = len(self._worlds) + 1
        world = World(name=f"World {number}")
        world.path = os.path.abspath(os.path.join(self.directory, world_file_name(number, world.name)))
        self._worlds.append(world)
        self._write(world)
        return world

    def save(self):
        """Rewrite every world file, renaming files whose world moved or was renamed."""
        for number, world in self.numbered():
            path = os.path.abspath(os.path.join(self.directory, world_file_name(number, world.name)))
            if not self._write(world, path):
                continue
            old_path = world.path
            world.path = path
            if old_path and old_path != path:
                try:
                    os.remove(old_path)
                except OSError as e:
                    logger.warning(f"Error deleting old file {number}: {old_path}: {e}")

    def remove_world(self, number: int) -> World:
        world = self[number]
        if world.path:
            try:
                os.remove(world.path)
                logger.info(f"Removed old file: {os.path.basename(world.path)}")
            except OSError as e:
                logger.warning(f"Error deleting old file: {world.path}: {e}")
        del self._worlds[number - 1]
        self.save()
        return world

    def _write(self, world: World, path: Optional[str] = None) -> bool:
        path = path or world.path
        try:
            properties.save_file(path, world.to_props(), WORLD_FILE_COMMENT)
            return True
        except OSError as e:
            logger.warning(f"Error saving world config for {path}: {e}")
            return False
