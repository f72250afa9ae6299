from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils import validators


class CinemaBase(BaseModel):
    name: str = Field(min_length=1, max_length=100)

    _normalize_name = field_validator("name", mode="before")(
        validators.trailing_spaces_remover,
    )


class CinemaUpdate(CinemaBase):
    pass


class CinemaComplete(CinemaBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
