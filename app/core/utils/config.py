import tomllib
from functools import cached_property
from pathlib import Path
from typing import ClassVar

from pydantic import computed_field, model_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from app.types.exceptions import DotenvInvalidVariableError, DotenvMissingVariableError


class Settings(BaseSettings):
    """
    Settings for the Filmes API
    The class is based on a configuration file: `/config.yaml`.

    All undefined variables will be populated from:
    1. An environment variable
    2. A yaml config.yaml file
    3. The dotenv .env file

    See [Pydantic Settings documentation](https://docs.pydantic.dev/latest/concepts/pydantic_settings/#dotenv-env-support) for more information.
    See [FastAPI settings](https://fastapi.tiangolo.com/advanced/settings/) article for best practices with settings.

    To access these settings, the `get_settings` dependency should be used.
    """

    # By default, the settings are loaded from the `config.yaml` or `.env` file but this behaviour can be overridden using
    # `_env_file` and `_yaml_file` parameter during instantiation
    # Ex: `Settings(_env_file=".env.dev", _yaml_file="config.dev.yaml")`
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="config.yaml",
        case_sensitive=False,
        extra="ignore",
    )

    # Pydantic does not support overriding the yaml file path using the `_yaml_file` parameter
    # as it does for the `_env_file` parameter.
    # See https://github.com/pydantic/pydantic-settings/issues/259
    # We thus override the `_yaml_file` manually during the class instantiation
    _yaml_file: ClassVar[str]

    def __init__(self, _yaml_file, _env_file, **kwargs):
        Settings._yaml_file = _yaml_file
        super().__init__(_env_file=_env_file, **kwargs)

    # The order of the returned sources define their precedence:
    # parameters passed an initialization arguments will have
    # precedence over environment variables, yaml file and dotenv
    # See https://docs.pydantic.dev/latest/concepts/pydantic_settings/#important-notes
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=cls._yaml_file),
            dotenv_settings,
        )

    ########################
    # Filmes API settings  #
    ########################

    # By default, only production's records are logged
    LOG_DEBUG_MESSAGES: bool = False

    # Origins for the CORS middleware. `["http://localhost"]` can be used for development.
    # See https://fastapi.tiangolo.com/tutorial/cors/
    # It should begin with 'http://' or 'https:// and should never end with a '/'
    CORS_ORIGINS: list[str]

    ############################
    # PostgreSQL configuration #
    ############################
    # If set, the application use a SQLite database instead of PostgreSQL, for testing or development purposes (if possible Postgresql should be used instead)
    SQLITE_DB: str | None = None
    POSTGRES_HOST: str = ""
    POSTGRES_USER: str = ""
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = ""
    DATABASE_DEBUG: bool = False  # If True, the database will log all queries
    USE_FACTORIES: bool = (
        False  # If True, the database will be populated with demo cinemas and movies
    )

    #############################
    # pyproject.toml parameters #
    #############################

    @computed_field  # type: ignore[prop-decorator]
    @cached_property
    def FILMES_VERSION(cls) -> str:
        with Path("pyproject.toml").open("rb") as pyproject_binary:
            pyproject = tomllib.load(pyproject_binary)
        return str(pyproject["project"]["version"])

    #######################################
    #          Fields validation          #
    #######################################

    @model_validator(mode="after")
    def check_cors_origins(self) -> "Settings":
        for origin in self.CORS_ORIGINS:
            if origin.endswith("/"):
                raise DotenvInvalidVariableError(  # noqa: TRY003
                    f"CORS origin {origin} should not end with a trailing slash",
                )
        return self

    @model_validator(mode="after")
    def check_database_settings(self) -> "Settings":
        """
        All fields are optional, but the dotenv should configure SQLITE_DB or a Postgres database
        """
        if not (
            self.SQLITE_DB
            or (
                self.POSTGRES_HOST
                and self.POSTGRES_USER
                and self.POSTGRES_PASSWORD
                and self.POSTGRES_DB
            )
        ):
            raise DotenvMissingVariableError(  # noqa: TRY003
                "Either SQLITE_DB or POSTGRES_HOST, POSTGRES_USER, POSTGRES_PASSWORD and POSTGRES_DB",
            )

        return self

    @model_validator(mode="after")
    def init_cached_property(self) -> "Settings":
        """
        Cached property are not computed during the instantiation of the class, but when they are accessed for the first time.
        By calling them in this validator, we force their initialization during the instantiation of the class.
        This allow them to raise error on startup if they are not correctly configured instead of creating an error on runtime.
        """
        self.FILMES_VERSION  # noqa: B018

        return self


def construct_prod_settings() -> Settings:
    """
    Return the production settings
    """
    return Settings(_env_file=".env", _yaml_file="config.yaml")
