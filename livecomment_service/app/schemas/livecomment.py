from pydantic import BaseModel, Field
from app.schemas.livestream import Livestream
from app.schemas.user import User


class PostLivecommentRequest(BaseModel):
    comment: str = Field(..., max_length=255)
    tip: int = 0


class Livecomment(BaseModel):
    id: int
    user: User
    livestream: Livestream
    comment: str
    tip: int
    created_at: int


class LivecommentReport(BaseModel):
    id: int
    reporter: User
    livecomment: Livecomment
    created_at: int
