"""Rated tutorials in video and text form."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Tutorial", "VideoTutorial", "TextTutorial"]


@dataclass
class Tutorial:
    """A titled tutorial with a rating out of five stars."""

    title: str
    rating: float

    def describe(self) -> str:
        """Return a description; a plain tutorial has none."""
        return ""


@dataclass
class VideoTutorial(Tutorial):
    """A video tutorial with a length in minutes."""

    length: float

    def describe(self) -> str:
        """Return title, rating and length, one per line."""
        return (
            f"this is an amazing video with title {self.title}\n"
            f"Ratings: {self.rating:g} out of 5 stars\n"
            f"length of this video is: {self.length:g} minutes\n"
        )


@dataclass
class TextTutorial(Tutorial):
    """A text tutorial with a word count; it keeps the plain description."""

    words: int