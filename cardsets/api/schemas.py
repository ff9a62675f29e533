"""Pydantic schemas for API request/response models."""

from pydantic import BaseModel, Field

# --- Sets ---


class SetCreateRequest(BaseModel):
    title: str
    description: str = ""
    private: bool = False
    creator: str | None = None


class SetSummaryResponse(BaseModel):
    """Public listing entry for a set."""

    id: str
    title: str
    description: str
    cards: int


class SetResponse(BaseModel):
    """Every stored field of a set."""

    model_config = {"from_attributes": True}

    id: str
    title: str
    description: str
    private: bool
    creator: str | None
    cards: int


class DeleteResponse(BaseModel):
    success: bool


# --- Favorites ---


class FavoriteCreateRequest(BaseModel):
    user: str
    set: str


class FavoriteResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    user: str
    set: str


class FavoriteSetResponse(BaseModel):
    """A favorite link with its set expanded; ``set`` is null if the set is gone."""

    id: str
    set: SetResponse | None


# --- Cards ---


class CardCreateRequest(BaseModel):
    set: str
    question: str
    answer: str


class CardResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    set: str
    question: str
    answer: str


class StudyCardResponse(BaseModel):
    """A card as drawn for a study round."""

    question: str
    answer: str


# --- Learnings ---


class LearningCreateRequest(BaseModel):
    """Session outcome. Counts accept numeric strings and are coerced to ints."""

    user: str
    set: str
    cards_total: int = Field(ge=0)
    cards_correct: int = Field(ge=0)
    cards_wrong: int = Field(ge=0)


class LearningResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    user: str
    set: str
    cards_total: int
    cards_correct: int
    cards_wrong: int
    score: float | None  # null when cards_total is 0


class LearningWithSetResponse(BaseModel):
    """A learning record with the referenced set expanded inline."""

    id: str
    user: str
    set: SetResponse | None
    cards_total: int
    cards_correct: int
    cards_wrong: int
    score: float | None
