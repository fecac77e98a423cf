from pydantic import BaseModel, ConfigDict
from app.schemas.user import User


class Tag(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class Livestream(BaseModel):
    id: int
    owner: User
    title: str
    description: str
    playlist_url: str
    thumbnail_url: str
    tags: list[Tag]
    start_at: int
    end_at: int
