"""Help data and rendering."""

from .embed import default_help, embed_help, text_help
from .raw_help import (
    ArgumentRawHelp,
    CommandRawHelp,
    FlagRawHelp,
    RestRawHelp,
    SignatureRawHelp,
    command_raw_help,
)

__all__ = [
    "ArgumentRawHelp",
    "CommandRawHelp",
    "FlagRawHelp",
    "RestRawHelp",
    "SignatureRawHelp",
    "command_raw_help",
    "default_help",
    "embed_help",
    "text_help",
]
