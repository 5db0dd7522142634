"""Define dataclasses mirroring the std_msgs message schemas."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Header:
    """Mirror of std_msgs/Header: the frame and time associated with a message."""

    frame_id: str = ""
    stamp_s: float = 0.0
    """Time stamp (seconds since the epoch)."""


@dataclass(frozen=True)
class ColorRGBA:
    """Mirror of std_msgs/ColorRGBA with channels in [0.0, 1.0]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
