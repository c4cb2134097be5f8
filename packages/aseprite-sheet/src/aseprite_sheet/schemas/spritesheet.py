"""SpritesheetData root model for aseprite-sheet.

This module defines the root model of an Aseprite JSON export: the frames
collection plus the ``meta`` section. Use ``aseprite_sheet.parse`` to build it
from JSON text and ``aseprite_sheet.serialize`` to write it back.
"""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel

from aseprite_sheet.schemas.common import SHEET_MODEL_CONFIG
from aseprite_sheet.schemas.frame import ARRAY_LAYOUT, HASH_LAYOUT, Frame, Frames
from aseprite_sheet.schemas.frame_tag import FrameTag
from aseprite_sheet.schemas.metadata import Metadata


class SpritesheetData(BaseModel):
    """Root of a parsed Aseprite export.

    ``frames`` is a tuple of Frame when the export used the array layout and a
    read-only mapping of name -> Frame when it used the hash layout. Both keep
    document order.

    Attributes:
        frames: Frames collection (tuple or mapping, see above).
        meta: Sheet metadata.

    Example:
        >>> sheet = parse(Path("boonga.json").read_bytes())
        >>> sheet.layout
        'array'
        >>> [name for name, _ in sheet.iter_frames()]
        ['boonga 0.ase', 'boonga 1.ase']
    """

    model_config = SHEET_MODEL_CONFIG

    frames: Frames
    meta: Metadata

    @property
    def layout(self) -> str:
        """Frames layout: "array" or "hash"."""
        return ARRAY_LAYOUT if isinstance(self.frames, tuple) else HASH_LAYOUT

    @property
    def frame_count(self) -> int:
        """Number of frames in the sheet."""
        return len(self.frames)

    def iter_frames(self) -> Iterator[tuple[str, Frame]]:
        """Yield (name, frame) pairs in document order.

        In the array layout the name is the frame's filename; in the hash
        layout it is the key the frame was exported under.
        """
        if isinstance(self.frames, tuple):
            for frame in self.frames:
                yield frame.filename, frame
        else:
            yield from self.frames.items()

    def __hash__(self) -> int:
        # Hash-layout frames are a read-only mapping, which has no hash of its own
        return hash((self.layout, tuple(self.iter_frames()), self.meta))

    def get_frame(self, name: str) -> Frame:
        """Get a frame by name.

        Args:
            name: Frame filename (array layout) or key (hash layout).

        Returns:
            The first frame with that name.

        Raises:
            KeyError: If no frame has that name.
        """
        for frame_name, frame in self.iter_frames():
            if frame_name == name:
                return frame
        raise KeyError(
            f"Frame '{name}' not found. "
            f"Available frames: {[frame_name for frame_name, _ in self.iter_frames()]}"
        )

    def get_frame_tag(self, name: str) -> FrameTag:
        """Get a frame tag by name.

        Args:
            name: Tag name.

        Returns:
            The first tag with that name.

        Raises:
            KeyError: If tags were not exported or no tag has that name.
        """
        tags = self.meta.frame_tags or ()
        for tag in tags:
            if tag.name == name:
                return tag
        raise KeyError(
            f"Frame tag '{name}' not found. Available frame tags: {[tag.name for tag in tags]}"
        )

    def frames_for_tag(self, name: str) -> tuple[Frame, ...]:
        """Return the frames a tag spans, in ascending index order.

        Playback direction is not applied. A tag whose ``from`` exceeds its
        ``to`` spans no frames.

        Args:
            name: Tag name.

        Returns:
            Frames with indices ``from`` through ``to`` inclusive.

        Raises:
            KeyError: If the tag does not exist.
            IndexError: If the tag reaches past the last frame.
        """
        tag = self.get_frame_tag(name)
        ordered = [frame for _, frame in self.iter_frames()]
        if tag.from_ <= tag.to and tag.to >= len(ordered):
            raise IndexError(
                f"Frame tag '{name}' ends at frame {tag.to} "
                f"but the sheet has {len(ordered)} frames"
            )
        return tuple(ordered[index] for index in tag.frame_range)
