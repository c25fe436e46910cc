"""Round API schemas."""

from pydantic import BaseModel, Field

from guess_the_frame.modules.rounds.domain.entities import Round


class RoundResponse(BaseModel):
    """One guessing round."""

    title: str = Field(..., description="Correct movie title")
    path: str = Field(..., description="Fully-qualified backdrop image URL")

    @classmethod
    def from_round(cls, round_: Round) -> "RoundResponse":
        return cls(title=round_.title, path=round_.image_path)
