"""Answer API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CheckAnswerResponse(BaseModel):
    """Verdict for one guess."""

    model_config = ConfigDict(populate_by_name=True)

    user_get_mark: bool = Field(
        ..., alias="userGetMark", description="Whether the guess scores"
    )
