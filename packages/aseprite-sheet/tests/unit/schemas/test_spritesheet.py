"""Unit tests for SpritesheetData root model and its lookup helpers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest
from pydantic import ValidationError

from aseprite_sheet.schemas import SpritesheetData


def _frame(name: str, x: int) -> dict[str, Any]:
    return {
        "filename": name,
        "frame": {"x": x, "y": 0, "w": 8, "h": 8},
        "rotated": False,
        "trimmed": False,
        "spriteSourceSize": {"x": 0, "y": 0, "w": 8, "h": 8},
        "sourceSize": {"w": 8, "h": 8},
        "duration": 100,
    }


@pytest.fixture
def walk_document(single_frame_document: dict[str, Any]) -> dict[str, Any]:
    """Return a four-frame array document with a 'walk' tag over frames 1-3."""
    single_frame_document["frames"] = [_frame(f"walk {i}", i * 8) for i in range(4)]
    single_frame_document["meta"]["frameTags"] = [
        {"name": "walk", "from": 1, "to": 3, "direction": "forward"},
        {"name": "long", "from": 2, "to": 9, "direction": "forward"},
        {"name": "backwards", "from": 3, "to": 1, "direction": "reverse"},
    ]
    return single_frame_document


class TestSpritesheetDataLayout:
    """Tests for array/hash layout handling."""

    def test_array_layout(self, single_frame_document: dict[str, Any]) -> None:
        """An array at frames gives the array layout."""
        sheet = SpritesheetData.model_validate(single_frame_document)

        assert sheet.layout == "array"
        assert isinstance(sheet.frames, tuple)
        assert sheet.frame_count == 1

    def test_hash_layout(self, hash_document: dict[str, Any]) -> None:
        """An object at frames gives the hash layout."""
        sheet = SpritesheetData.model_validate(hash_document)

        assert sheet.layout == "hash"
        assert isinstance(sheet.frames, Mapping)
        assert sheet.frames["a.png"].filename == "a.png"

    def test_requires_meta(self, single_frame_document: dict[str, Any]) -> None:
        """meta is required."""
        del single_frame_document["meta"]

        with pytest.raises(ValidationError) as exc_info:
            SpritesheetData.model_validate(single_frame_document)

        assert "meta" in str(exc_info.value)

    def test_requires_frames(self, single_frame_document: dict[str, Any]) -> None:
        """frames is required."""
        del single_frame_document["frames"]

        with pytest.raises(ValidationError) as exc_info:
            SpritesheetData.model_validate(single_frame_document)

        assert "frames" in str(exc_info.value)

    def test_is_frozen(self, single_frame_document: dict[str, Any]) -> None:
        """SpritesheetData should be immutable (frozen)."""
        sheet = SpritesheetData.model_validate(single_frame_document)

        with pytest.raises(ValidationError):
            sheet.frames = ()  # type: ignore[misc]

    def test_hash_frames_are_read_only(self, hash_document: dict[str, Any]) -> None:
        """Hash-layout frames cannot be added, replaced or removed in place."""
        sheet = SpritesheetData.model_validate(hash_document)
        frame = sheet.frames["a.png"]  # type: ignore[call-overload]

        with pytest.raises(TypeError):
            sheet.frames["b.png"] = frame  # type: ignore[index]
        with pytest.raises(TypeError):
            del sheet.frames["a.png"]  # type: ignore[arg-type]

        assert sheet.frame_count == 1

    def test_hash_layout_unaffected_by_source_dict(self, hash_document: dict[str, Any]) -> None:
        """Mutating the input document after validation does not leak in."""
        sheet = SpritesheetData.model_validate(hash_document)
        hash_document["frames"]["b.png"] = hash_document["frames"]["a.png"]

        assert sheet.frame_count == 1

    def test_hashable_in_both_layouts(
        self, single_frame_document: dict[str, Any], hash_document: dict[str, Any]
    ) -> None:
        """Sheets hash consistently with equality for either layout."""
        array_sheet = SpritesheetData.model_validate(single_frame_document)
        hash_sheet = SpritesheetData.model_validate(hash_document)

        assert hash(hash_sheet) == hash(SpritesheetData.model_validate(hash_document))
        assert hash(array_sheet) == hash(
            SpritesheetData.model_validate(single_frame_document)
        )
        assert len({array_sheet, hash_sheet}) == 2

    def test_hash_frames_dump_as_dict(self, hash_document: dict[str, Any]) -> None:
        """model_dump writes hash-layout frames back as a plain dict."""
        dumped = SpritesheetData.model_validate(hash_document).model_dump()

        assert type(dumped["frames"]) is dict
        assert dumped["frames"]["a.png"]["duration"] == 100


class TestSpritesheetDataFrames:
    """Tests for frame iteration and lookup."""

    def test_iter_frames_array(self, walk_document: dict[str, Any]) -> None:
        """iter_frames yields filenames in export order."""
        sheet = SpritesheetData.model_validate(walk_document)

        assert [name for name, _ in sheet.iter_frames()] == [
            "walk 0",
            "walk 1",
            "walk 2",
            "walk 3",
        ]

    def test_iter_frames_hash_uses_keys(self, single_frame_document: dict[str, Any]) -> None:
        """iter_frames yields hash keys in document order."""
        single_frame_document["frames"] = {
            "b": _frame("explicit-b", 0),
            "a": _frame("explicit-a", 8),
        }
        sheet = SpritesheetData.model_validate(single_frame_document)

        assert [name for name, _ in sheet.iter_frames()] == ["b", "a"]

    def test_get_frame(self, walk_document: dict[str, Any]) -> None:
        """get_frame finds a frame by name."""
        sheet = SpritesheetData.model_validate(walk_document)
        assert sheet.get_frame("walk 2").frame.x == 16

    def test_get_frame_missing(self, walk_document: dict[str, Any]) -> None:
        """get_frame raises KeyError listing available frames."""
        sheet = SpritesheetData.model_validate(walk_document)

        with pytest.raises(KeyError) as exc_info:
            sheet.get_frame("run 0")

        assert "run 0" in str(exc_info.value)
        assert "walk 0" in str(exc_info.value)


class TestSpritesheetDataTags:
    """Tests for frame tag lookup."""

    def test_get_frame_tag(self, walk_document: dict[str, Any]) -> None:
        """get_frame_tag finds a tag by name."""
        sheet = SpritesheetData.model_validate(walk_document)
        tag = sheet.get_frame_tag("walk")

        assert (tag.from_, tag.to) == (1, 3)

    def test_get_frame_tag_without_tags(self, single_frame_document: dict[str, Any]) -> None:
        """get_frame_tag raises KeyError when tags were not exported."""
        sheet = SpritesheetData.model_validate(single_frame_document)

        with pytest.raises(KeyError):
            sheet.get_frame_tag("walk")

    def test_frames_for_tag(self, walk_document: dict[str, Any]) -> None:
        """frames_for_tag returns the inclusive frame range."""
        sheet = SpritesheetData.model_validate(walk_document)
        frames = sheet.frames_for_tag("walk")

        assert [frame.filename for frame in frames] == ["walk 1", "walk 2", "walk 3"]

    def test_frames_for_tag_hash_layout(self, walk_document: dict[str, Any]) -> None:
        """frames_for_tag indexes hash frames in document order."""
        walk_document["frames"] = {
            frame["filename"]: frame for frame in walk_document["frames"]
        }
        sheet = SpritesheetData.model_validate(walk_document)

        assert [f.filename for f in sheet.frames_for_tag("walk")] == [
            "walk 1",
            "walk 2",
            "walk 3",
        ]

    def test_frames_for_tag_past_end(self, walk_document: dict[str, Any]) -> None:
        """A tag reaching past the last frame raises IndexError."""
        sheet = SpritesheetData.model_validate(walk_document)

        with pytest.raises(IndexError) as exc_info:
            sheet.frames_for_tag("long")

        assert "long" in str(exc_info.value)

    def test_frames_for_reversed_tag(self, walk_document: dict[str, Any]) -> None:
        """A tag with from > to spans no frames."""
        sheet = SpritesheetData.model_validate(walk_document)
        assert sheet.frames_for_tag("backwards") == ()
