"""Client state stored in config.ini alongside the profile settings."""

from dataclasses import dataclass
from typing import Dict, Mapping

from .properties import prop_bool, prop_int


@dataclass
class ClientExtras:
    # World map window
    worldmap_show_icons: bool = True
    worldmap_show_labels: bool = True
    worldmap_show_scenery: bool = True
    worldmap_show_chunk_grid: bool = False
    worldmap_show_chunk_labelling: bool = False
    worldmap_show_other_floors: bool = True
    # XP bar
    pin_xp_bar: bool = False
    pinned_skill: int = -1  # -1 when no skill is pinned
    show_action_count: bool = True
    show_time_count: bool = True

    def to_props(self) -> Dict[str, str]:
        return {
            "worldmap_show_icons": _bool_text(self.worldmap_show_icons),
            "worldmap_show_labels": _bool_text(self.worldmap_show_labels),
            "worldmap_show_scenery": _bool_text(self.worldmap_show_scenery),
            "worldmap_show_chunk_grid": _bool_text(self.worldmap_show_chunk_grid),
            "worldmap_show_chunk_labelling": _bool_text(self.worldmap_show_chunk_labelling),
            "worldmap_show_other_floors": _bool_text(self.worldmap_show_other_floors),
            "pinXPBar": _bool_text(self.pin_xp_bar),
            "pinnedSkill": str(self.pinned_skill),
            "showActionCount": _bool_text(self.show_action_count),
            "showTimeCount": _bool_text(self.show_time_count),
        }

    @staticmethod
    def from_props(d: Mapping[str, str]) -> "ClientExtras":
        e = ClientExtras()
        e.worldmap_show_icons = prop_bool(d, "worldmap_show_icons", e.worldmap_show_icons)
        e.worldmap_show_labels = prop_bool(d, "worldmap_show_labels", e.worldmap_show_labels)
        e.worldmap_show_scenery = prop_bool(d, "worldmap_show_scenery", e.worldmap_show_scenery)
        e.worldmap_show_chunk_grid = prop_bool(d, "worldmap_show_chunk_grid", e.worldmap_show_chunk_grid)
        e.worldmap_show_chunk_labelling = prop_bool(d, "worldmap_show_chunk_labelling",
                                                    e.worldmap_show_chunk_labelling)
        e.worldmap_show_other_floors = prop_bool(d, "worldmap_show_other_floors", e.worldmap_show_other_floors)
        e.pin_xp_bar = prop_bool(d, "pinXPBar", e.pin_xp_bar)
        e.pinned_skill = prop_int(d, "pinnedSkill", e.pinned_skill)
        e.show_action_count = prop_bool(d, "showActionCount", e.show_action_count)
        e.show_time_count = prop_bool(d, "showTimeCount", e.show_time_count)
        return e


def _bool_text(value: bool) -> str:
    return "true" if value else "false"
