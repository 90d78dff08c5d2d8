"""Localization strings used to build help.

Every field has an English default so a partial JSON file only needs to
override what it translates.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ParsableLocalization(BaseModel):
    name: str | None = None
    description: str | None = None


class RestLocalization(BaseModel):
    name: str
    description: str = ""


class CommandLocalization(BaseModel):
    description: str | None = None
    rest: RestLocalization | None = None
    args: dict[str, ParsableLocalization] = Field(default_factory=dict)
    flags: dict[str, ParsableLocalization] = Field(default_factory=dict)
    subs: dict[str, CommandLocalization] = Field(default_factory=dict)


class HelpTagsLocalization(BaseModel):
    dev_only: str = "dev only"
    guild_only: str = "server only"


class HelpLocalization(BaseModel):
    command_not_found: str = "Command not found."
    usage: str = "Usage"
    arg_usage_hint: str = "`<argument>` is required, `[argument]` is optional."
    arguments: str = "Arguments"
    flags: str = "Flags"
    rest_type_name: str = "...{type}"
    sub_commands: str = "Sub Commands"
    aliases: str = "Aliases"
    examples: str = "Examples"
    tags: HelpTagsLocalization = Field(default_factory=HelpTagsLocalization)


def _default_type_names() -> dict[str, str]:
    return {
        "string": "text",
        "integer": "integer",
        "float": "number",
        "boolean": "boolean",
        "user": "user",
        "channel": "channel",
        "role": "role",
        "mentionable": "user or role",
    }


class Localization(BaseModel):
    type_names: dict[str, str] = Field(default_factory=_default_type_names)
    help: HelpLocalization = Field(default_factory=HelpLocalization)
    commands: dict[str, CommandLocalization] = Field(default_factory=dict)

    @classmethod
    def from_file(cls, path: str | Path) -> Localization:
        """Load a localization from a JSON file."""
        path = Path(path)
        localization = cls.model_validate_json(path.read_text(encoding="utf-8"))
        logger.info(f"Loaded localization from {path}")
        return localization

    def type_name(self, key: str) -> str:
        return self.type_names.get(key, key)

    def for_command(self, path: list[str]) -> CommandLocalization:
        """Find the localization of a command from its path of names."""
        if not path:
            return CommandLocalization()

        current = self.commands.get(path[0])
        for name in path[1:]:
            if current is None:
                break
            current = current.subs.get(name)
        return current or CommandLocalization()
