"""Active window title lookup for X11 desktops."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from Xlib import Xatom, error
from Xlib.display import Display

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TitleLookup:
    """A window property that may hold the window title, and its type."""

    property_name: str
    type_name: str


# Tried in order; the first property that decodes wins.
TITLE_LOOKUPS: tuple[TitleLookup, ...] = (
    TitleLookup("_NET_WM_NAME", "UTF8_STRING"),
    TitleLookup("WM_NAME", "STRING"),
)

# Read length in 32-bit units.
MAX_PROPERTY_LENGTH = 1024

_PROBE_ERRORS = (
    error.DisplayError,
    error.XError,
    error.ConnectionClosedError,
    OSError,
)


class X11TitleProbe:
    """Retrieves the title of the window holding input focus.

    Every call opens its own display connection and closes it before
    returning. Failures of any kind are reported as ``None``.
    """

    def __init__(
        self,
        display_factory: Callable[[], Display] = Display,
        lookups: tuple[TitleLookup, ...] = TITLE_LOOKUPS,
    ) -> None:
        self._display_factory = display_factory
        self._lookups = lookups

    def __call__(self) -> Optional[str]:
        return self.get_active_window_title()

    def get_active_window_title(self) -> Optional[str]:
        try:
            display = self._display_factory()
        except _PROBE_ERRORS as exc:
            logger.debug("Could not connect to the X display: %s", exc)
            return None

        try:
            return self._query(display)
        except _PROBE_ERRORS as exc:
            logger.debug("Active window query failed: %s", exc)
            return None
        finally:
            _close(display)

    def _query(self, display: Display) -> Optional[str]:
        root = display.screen().root
        active_atom = display.intern_atom("_NET_ACTIVE_WINDOW")
        reply = root.get_property(active_atom, Xatom.WINDOW, 0, 1)
        if reply is None or not reply.value:
            return None
        window_id = int(reply.value[0])
        if not window_id:
            return None

        window = display.create_resource_object("window", window_id)
        for lookup in self._lookups:
            title = _read_title(display, window, lookup)
            if title is not None:
                return title
        return None


def _read_title(display: Display, window, lookup: TitleLookup) -> Optional[str]:
    try:
        property_atom = display.intern_atom(lookup.property_name)
        type_atom = display.intern_atom(lookup.type_name)
        reply = window.get_property(property_atom, type_atom, 0, MAX_PROPERTY_LENGTH)
        if reply is None or reply.property_type != type_atom:
            return None
        return bytes(reply.value).decode("utf-8")
    except (error.XError, UnicodeDecodeError) as exc:
        logger.debug("Reading %s failed: %s", lookup.property_name, exc)
        return None


def _close(display: Display) -> None:
    try:
        display.close()
    except _PROBE_ERRORS as exc:
        logger.debug("Closing the X display failed: %s", exc)
