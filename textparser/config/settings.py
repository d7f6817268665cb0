from pydantic import field_validator
from pydantic_settings import BaseSettings

from ..core.models.template import MatchMode


class Settings(BaseSettings):

    # Templates
    templates_path: str = "./templates"
    template_encoding: str = "utf-8"
    match_mode: MatchMode = MatchMode.WHOLE_TEXT
    find_matching_template: bool = True
    strict_placeholders: bool = False
    match_timeout: float = 5.0

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    class Config:
        env_file = ".env"
        env_prefix = "TEXTPARSER_"
        extra = "ignore"


settings = Settings()
