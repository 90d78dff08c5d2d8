"""Help rendering."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

import hikari

from ..localization import Localization
from .raw_help import CommandRawHelp, SignatureRawHelp, command_raw_help

if TYPE_CHECKING:
    from ..core.command import Command
    from ..core.options import ParseOptions

logger = logging.getLogger(__name__)


def _shows_usage(raw: CommandRawHelp) -> bool:
    # A single signature without arguments has nothing worth showing.
    if not raw.signatures:
        return False
    return not (len(raw.signatures) == 1 and raw.signatures[0].signature.arg_count == 0)


def _arguments_text(signature: SignatureRawHelp, localization: Localization) -> str:
    lines = []
    for arg in signature.args:
        line = f"`{arg.localized_name}` *{' | '.join(arg.type_names)}*"
        if arg.description:
            line += f"\n⮩  {arg.description}"
        lines.append(line)

    if signature.rest:
        rest_type = localization.help.rest_type_name.format(type=" | ".join(signature.rest.type_names))
        line = f"`{signature.rest.name}` *{rest_type}*"
        if signature.rest.description:
            line += f"\n⮩  {signature.rest.description}"
        lines.append(line)
    return "\n".join(lines)


def _flags_text(signature: SignatureRawHelp) -> str:
    lines = []
    for flag in signature.flags:
        line = f"`{flag.long_usage_string}`"
        if flag.short_usage_string:
            line += f" `{flag.short_usage_string}`"
        line += f" *{' | '.join(flag.type_names)}*"
        if flag.description:
            line += f"\n⮩  {flag.description}"
        lines.append(line)
    return "\n".join(lines)


def embed_help(
    command: "Command",
    prefix: str = "",
    localization: Localization | None = None,
    visible_subs: Iterable["Command"] | None = None,
) -> hikari.Embed:
    """Render the help of a command as an embed."""
    localization = localization or Localization()
    raw = command_raw_help(command, localization)

    description = raw.description or "---"
    if raw.tags:
        description += "\n\n" + " ".join(f"`{t}`" for t in raw.tags)

    embed = hikari.Embed(title=prefix + raw.full_name, description=description)

    if _shows_usage(raw):
        for signature in raw.signatures:
            usage = f"**`{prefix}{signature.usage_string}`**"
            if signature.args:
                usage += f"\n\n{localization.help.arg_usage_hint}"
            embed.add_field(localization.help.usage, usage)

            arguments = _arguments_text(signature, localization)
            if arguments:
                embed.add_field(localization.help.arguments, arguments, inline=True)

            flags = _flags_text(signature)
            if flags:
                embed.add_field(localization.help.flags, flags, inline=True)

    subs = raw.subs
    if visible_subs is not None:
        allowed = set(map(id, visible_subs))
        subs = [s for s in subs if id(s.command) in allowed]
    if subs:
        embed.add_field(
            localization.help.sub_commands,
            "\n".join(f"**{s.command.name}** {s.description}".rstrip() for s in subs),
        )

    if raw.aliases:
        embed.add_field(localization.help.aliases, " ".join(f"`{a}`" for a in raw.aliases))

    if raw.examples:
        embed.add_field(localization.help.examples, "\n".join(f"`{e}`" for e in raw.examples))

    return embed


def text_help(command: "Command", prefix: str = "", localization: Localization | None = None) -> str:
    """Render the help of a command as plain text."""
    localization = localization or Localization()
    raw = command_raw_help(command, localization)

    lines = [prefix + raw.full_name]
    if raw.description:
        lines.append(raw.description)
    if raw.tags:
        lines.append(" ".join(f"[{t}]" for t in raw.tags))

    if raw.signatures:
        lines.append("")
        lines.append(f"{localization.help.usage}:")
        for signature in raw.signatures:
            lines.append(f"  {prefix}{signature.usage_string}")
            for arg in signature.args:
                detail = f"    {arg.localized_name} ({' | '.join(arg.type_names)})"
                lines.append(f"{detail} {arg.description}".rstrip())
            for flag in signature.flags:
                names = flag.long_usage_string
                if flag.short_usage_string:
                    names += f", {flag.short_usage_string}"
                lines.append(f"    {names} ({' | '.join(flag.type_names)}) {flag.description}".rstrip())

    if raw.subs:
        lines.append("")
        lines.append(f"{localization.help.sub_commands}:")
        lines.extend(f"  {s.command.name} {s.description}".rstrip() for s in raw.subs)

    if raw.aliases:
        lines.append("")
        lines.append(f"{localization.help.aliases}: {', '.join(raw.aliases)}")

    return "\n".join(lines)


async def default_help(command: "Command", message: Any, options: "ParseOptions") -> None:
    """Send the help of a command back through the message that called it."""
    visible = []
    for sub in command.visible_subs():
        if await sub.check_permissions(message, options) is None:
            visible.append(sub)

    embed = embed_help(command, options.prefix, options.localization, visible)
    logger.debug(f"Sending help for {command.full_name}")
    await message.respond(embed=embed)
