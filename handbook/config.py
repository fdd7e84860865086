"""Runtime settings, overridable through ``HANDBOOK_*`` environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Server configuration.

    Relative paths are resolved against the working directory, e.g.
    ``HANDBOOK_CONTENT_DIR=docs`` serves ``./docs/*.md``.
    """

    model_config = SettingsConfigDict(env_prefix="HANDBOOK_")

    content_dir: Path = Field(default=Path("markdown"), description="Directory of content files")
    content_extension: str = Field(default=".md", description="Content file name suffix")
    index_file: str = Field(default="index.md", description="Content file served at /")
    templates_dir: Path = Field(
        default=PACKAGE_DIR / "templates", description="Jinja2 page templates"
    )
    static_dir: Path = Field(default=Path("static"), description="Assets served at /static")
    base_url: str = Field(default="http://localhost:8080", description="Public site URL")
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
