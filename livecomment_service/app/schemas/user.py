from pydantic import BaseModel, ConfigDict


class Theme(BaseModel):
    id: int
    dark_mode: bool


class User(BaseModel):
    id: int
    name: str
    display_name: str | None
    description: str | None
    theme: Theme
    icon_hash: str

    model_config = ConfigDict(from_attributes=True)
