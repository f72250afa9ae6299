from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.utils import validators


class FilmeBase(BaseModel):
    title: str = Field(min_length=1, max_length=50)
    genre: str = Field(min_length=1, max_length=50)
    duration: int = Field(gt=0, le=600, description="Duration in minutes")
    cinema_id: int | None = None

    _normalize_title = field_validator("title", mode="before")(
        validators.trailing_spaces_remover,
    )
    _normalize_genre = field_validator("genre", mode="before")(
        validators.trailing_spaces_remover,
    )


class FilmeUpdate(FilmeBase):
    pass


class FilmeComplete(FilmeBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
