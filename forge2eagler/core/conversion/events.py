"""Forge event type → EaglerForge event category resolution."""

from typing import Mapping, Optional, Tuple

from .mappings import DIRECT_EVENTS

# Substring → category, evaluated top to bottom after the exact table
# misses. First match wins: "RenderTickEvent" is a render event, and
# anything containing "ChatSent" already matched "Chat".
EVENT_PREDICATES: Tuple[Tuple[str, str], ...] = (
    ("Render", "render"),
    ("Tick", "tick"),
    ("Chat", "receivechatmessage"),
    ("Player", "tick"),
    ("World", "load"),
    ("Server", "serverstart"),
    ("Command", "processcommand"),
    ("InputEvent.KeyInputEvent", "frame"),
    ("RenderGameOverlay", "render"),
    ("PlayerTick", "tick"),
    ("ClientTick", "tick"),
    ("RenderWorld", "render"),
    ("ChatReceived", "receivechatmessage"),
    ("ChatSent", "sendchatmessage"),
    ("GuiScreen", "frame"),
    ("RenderHand", "render"),
    ("WorldLoad", "load"),
    ("ServerStart", "serverstart"),
    ("ServerStop", "serverstop"),
)

CUSTOM_PREFIX = "custom:"


class EventTypeResolver:
    """Maps a handler's parameter type name to an event category."""

    def __init__(
        self,
        direct: Optional[Mapping[str, str]] = None,
        predicates: Tuple[Tuple[str, str], ...] = EVENT_PREDICATES,
    ):
        self._direct = DIRECT_EVENTS if direct is None else direct
        self._predicates = predicates

    def resolve(self, event_type_name: str) -> str:
        """Return the category for ``event_type_name``. Never fails."""
        category = self._direct.get(event_type_name)
        if category is not None:
            return category

        for needle, category in self._predicates:
            if needle in event_type_name:
                return category

        return f"{CUSTOM_PREFIX}{event_type_name.lower()}"
