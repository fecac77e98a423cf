from pydantic import BaseModel, ConfigDict, Field


class ModerateRequest(BaseModel):
    ng_word: str = Field(..., min_length=1, max_length=255)


class ModerateResponse(BaseModel):
    word_id: int


class NGWord(BaseModel):
    id: int
    user_id: int
    livestream_id: int
    word: str
    created_at: int

    model_config = ConfigDict(from_attributes=True)
