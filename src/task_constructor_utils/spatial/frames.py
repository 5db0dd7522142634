"""Define core definitions for named coordinate frames."""

DEFAULT_FRAME = "world"
"""Name of the frame assumed when a pose doesn't specify its reference frame."""


def normalize_frame_id(frame_id: str) -> str:
    """Strip the leading slash that older transform trees prepend to frame names."""
    return frame_id[1:] if frame_id.startswith("/") else frame_id
