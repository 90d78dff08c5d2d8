from pydantic import Field
from pydantic_settings import BaseSettings


class CommandSetSettings(BaseSettings):
    command_prefix: str = Field(default="!", description="Command prefix")
    help_on_signature_not_found: bool = Field(
        default=False,
        description="Send the command help when no signature matches",
    )
    dev_ids: list[int] = Field(default=[], description="User ids allowed to run dev commands")
    localization_file: str | None = Field(default=None, description="Path to a localization JSON file")
    commands_directory: str = Field(default="commands", description="Directory scanned for command modules")
    log_level: str = Field(default="INFO", description="Logging level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = CommandSetSettings()
