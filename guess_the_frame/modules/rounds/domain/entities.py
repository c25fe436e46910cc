"""Round domain entities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Round:
    """One guessing round: the answer title and a fully-qualified backdrop URL."""

    title: str
    image_path: str
