from pathlib import Path

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wine_pathmap.constants import DEFAULT_PREFIX_NAME
from wine_pathmap.mapping.errors import PrefixNotFoundError


def _default_prefix() -> Path | None:
    try:
        return Path.home() / DEFAULT_PREFIX_NAME
    except RuntimeError:
        return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WINEPATHMAP_",
        extra="ignore",
        populate_by_name=True,
    )

    prefix: Path = Field(
        default=Path(""),
        validation_alias=AliasChoices("WINEPATHMAP_PREFIX", "WINEPREFIX"),
    )
    host: str = "127.0.0.1"
    port: int = 8426
    log_level: str = "INFO"

    @model_validator(mode="after")
    def _resolve_prefix(self) -> "Settings":
        if self.prefix == Path(""):
            self.prefix = _default_prefix() or Path("")
        else:
            self.prefix = self.prefix.expanduser()
        return self


settings = Settings()


def resolve_prefix(explicit: str | Path | None = None) -> Path:
    """Return *explicit* if given, else the configured prefix.

    ``settings`` reads the environment once, at import.  A ``WINEPREFIX``
    exported later in the same process is not seen here; pass it as
    *explicit* or build a fresh ``Settings()`` instead.
    """
    if explicit:
        return Path(explicit).expanduser()
    if settings.prefix == Path(""):
        raise PrefixNotFoundError()
    return settings.prefix
