# src/gridsnake/ui.py
from dataclasses import dataclass
from enum import Flag, auto
from typing import Any, Callable, List, Optional

from .config import PRIMARY_BUTTON, SECONDARY_BUTTON


class Capability(Flag):
    NONE = 0
    DRAWABLE = auto()
    CLICKABLE = auto()


@dataclass
class Region:
    """
    A rectangle on screen plus the behaviour attached to it.
    What a region can do follows from which callbacks it carries.
    """
    x: float
    y: float
    width: float
    height: float
    draw: Optional[Callable[[Any], None]] = None   # draw(surface)
    on_primary: Optional[Callable[[], None]] = None
    on_secondary: Optional[Callable[[], None]] = None
    clickable: bool = False                        # swallow clicks without callbacks (popups)

    @property
    def capabilities(self) -> Capability:
        caps = Capability.NONE
        if self.draw is not None:
            caps |= Capability.DRAWABLE
        if self.clickable or self.on_primary is not None or self.on_secondary is not None:
            caps |= Capability.CLICKABLE
        return caps

    def contains(self, px: float, py: float) -> bool:
        # inclusive on every edge
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height

    def click(self, button: int) -> None:
        if button == PRIMARY_BUTTON and self.on_primary is not None:
            self.on_primary()
        elif button == SECONDARY_BUTTON and self.on_secondary is not None:
            self.on_secondary()


class RegionStack:
    """Regions in draw order: later regions are drawn on top and get clicks first."""

    def __init__(self):
        self.regions: List[Region] = []

    def push(self, region: Region) -> Region:
        self.regions.append(region)
        return region

    def clear(self) -> None:
        self.regions.clear()

    def draw_all(self, surface) -> None:
        for region in self.regions:
            if Capability.DRAWABLE in region.capabilities:
                region.draw(surface)

    def dispatch(self, px: float, py: float, button: int) -> bool:
        """
        Deliver a click to the topmost clickable region under the pointer.
        Returns True if some region consumed it.
        """
        for region in reversed(self.regions):
            if Capability.CLICKABLE in region.capabilities and region.contains(px, py):
                region.click(button)
                return True
        return False

    def __len__(self):
        return len(self.regions)
