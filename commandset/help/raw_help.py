"""Structured help data for a command.

The data is built from the command definition and a localization, and is
rendered elsewhere (see :mod:`commandset.help.embed`).
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..definitions import ArgDefinition, FlagDefinition, RestDefinition
from ..localization import CommandLocalization, Localization
from ..parsers.factory import ArgumentParserFactory

if TYPE_CHECKING:
    from ..core.command import Command
    from ..core.signature import Signature


@dataclass
class ArgumentRawHelp:
    arg: ArgDefinition
    name: str
    localized_name: str
    description: str
    type_names: list[str]
    usage_string: str


@dataclass
class FlagRawHelp:
    flag: FlagDefinition
    name: str
    localized_name: str
    description: str
    type_names: list[str]
    long_usage_string: str
    short_usage_string: str | None


@dataclass
class RestRawHelp:
    rest: RestDefinition
    name: str
    description: str
    type_names: list[str]
    usage_string: str


@dataclass
class SignatureRawHelp:
    signature: "Signature"
    usage_string: str
    args: list[ArgumentRawHelp] = field(default_factory=list)
    flags: list[FlagRawHelp] = field(default_factory=list)
    rest: RestRawHelp | None = None


@dataclass
class CommandRawHelp:
    command: "Command"
    full_name: str
    description: str
    aliases: list[str]
    tags: list[str]
    examples: list[str]
    signatures: list[SignatureRawHelp]
    subs: list["CommandRawHelp"]


def _type_names(arg_type: Any, localization: Localization) -> list[str]:
    return [localization.type_name(key) for key in ArgumentParserFactory.type_keys(arg_type)]


def arg_raw_help(arg: ArgDefinition, localization: CommandLocalization, root: Localization) -> ArgumentRawHelp:
    arg_localization = localization.args.get(arg.name)
    localized_name = (arg_localization and arg_localization.name) or arg.name
    description = (arg_localization and arg_localization.description) or arg.description

    if arg.optional:
        default = f" = {arg.default}" if arg.default is not None else ""
        usage_string = f"[{localized_name}{default}]"
    else:
        usage_string = f"<{localized_name}>"

    return ArgumentRawHelp(
        arg=arg,
        name=arg.name,
        localized_name=localized_name,
        description=description,
        type_names=_type_names(arg.arg_type, root),
        usage_string=usage_string,
    )


def flag_raw_help(flag: FlagDefinition, localization: CommandLocalization, root: Localization) -> FlagRawHelp:
    flag_localization = localization.flags.get(flag.name)
    return FlagRawHelp(
        flag=flag,
        name=flag.name,
        localized_name=(flag_localization and flag_localization.name) or flag.name,
        description=(flag_localization and flag_localization.description) or flag.description,
        type_names=_type_names(flag.arg_type, root),
        long_usage_string=f"--{flag.name}",
        short_usage_string=f"-{flag.shortcut}" if flag.shortcut else None,
    )


def rest_raw_help(rest: RestDefinition, localization: CommandLocalization, root: Localization) -> RestRawHelp:
    name = localization.rest.name if localization.rest else rest.name
    description = localization.rest.description if localization.rest else rest.description
    type_names = _type_names(rest.arg_type, root) if rest.arg_type is not None else [root.type_name("string")]
    return RestRawHelp(
        rest=rest,
        name=name,
        description=description,
        type_names=type_names,
        usage_string=f"[...{name}]",
    )


def signature_raw_help(
    signature: "Signature",
    full_name: str,
    localization: CommandLocalization,
    root: Localization,
) -> SignatureRawHelp:
    args = [arg_raw_help(a, localization, root) for a in signature.args]
    flags = [flag_raw_help(f, localization, root) for f in signature.flags]
    rest = rest_raw_help(signature.rest, localization, root) if signature.rest else None

    parts = [full_name]
    parts.extend(a.usage_string for a in args)
    if rest:
        parts.append(rest.usage_string)

    return SignatureRawHelp(
        signature=signature,
        usage_string=" ".join(parts),
        args=args,
        flags=flags,
        rest=rest,
    )


def command_raw_help(command: "Command", localization: Localization | None = None) -> CommandRawHelp:
    """Build the help data of a command and, recursively, of its sub commands."""
    localization = localization or Localization()
    path = [cmd.name for cmd in command.get_parents()]
    command_localization = localization.for_command(path)
    full_name = command.full_name

    tags = []
    if command.dev_only:
        tags.append(localization.help.tags.dev_only)
    if command.guild_only:
        tags.append(localization.help.tags.guild_only)

    return CommandRawHelp(
        command=command,
        full_name=full_name,
        description=command_localization.description or command.description,
        aliases=command.aliases,
        tags=tags,
        examples=command.examples,
        signatures=[
            signature_raw_help(s, full_name, command_localization, localization)
            for s in command.signatures
        ],
        subs=[command_raw_help(sub, localization) for sub in command.visible_subs()],
    )
