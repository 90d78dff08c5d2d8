"""Tests for help data and rendering."""

import hikari
import pytest

from commandset.core.command import Command
from commandset.core.options import ParseOptions
from commandset.definitions import ArgDefinition, FlagDefinition, RestDefinition
from commandset.help import command_raw_help, default_help, embed_help, text_help
from commandset.localization import Localization


def noop(ctx):
    return None


def build_roll():
    return (
        Command("roll", "Roll dice", aliases=["r"])
        .example("!roll 2", "!roll 3 20 --loud")
        .signature(
            noop,
            ArgDefinition("count", hikari.OptionType.INTEGER, "Number of dice"),
            ArgDefinition("sides", hikari.OptionType.INTEGER, optional=True, default=6),
            flags=[FlagDefinition("loud", description="Shout the result", shortcut="l")],
        )
        .signature(noop, rest=RestDefinition("words", "Free text"))
    )


class TestRawHelp:
    """Test building help data."""

    def test_usage_strings(self):
        """Test required, optional and rest usage markers."""
        raw = command_raw_help(build_roll())

        usages = [s.usage_string for s in raw.signatures]
        assert usages == ["roll <count> [sides = 6]", "roll [...words]"]

    def test_argument_details(self):
        """Test argument and flag entries."""
        raw = command_raw_help(build_roll())
        signature = raw.signatures[0]

        assert [a.name for a in signature.args] == ["count", "sides"]
        assert signature.args[0].type_names == ["integer"]
        assert signature.args[0].description == "Number of dice"
        assert signature.flags[0].long_usage_string == "--loud"
        assert signature.flags[0].short_usage_string == "-l"
        assert signature.flags[0].type_names == ["boolean"]

    def test_untyped_rest_is_text(self):
        """Test an untyped rest is described as text."""
        rest = command_raw_help(build_roll()).signatures[1].rest

        assert rest.name == "words"
        assert rest.type_names == ["text"]

    def test_union_type_names(self):
        """Test a union lists each member type."""
        cmd = Command("ban").signature(
            noop, ArgDefinition("target", [hikari.OptionType.USER, hikari.OptionType.ROLE])
        )

        raw = command_raw_help(cmd)

        assert raw.signatures[0].args[0].type_names == ["user", "role"]

    def test_metadata(self):
        """Test aliases, examples and tags."""
        cmd = Command("reload", aliases=["rl"]).dev().guild().example("!reload")

        raw = command_raw_help(cmd)

        assert raw.full_name == "reload"
        assert raw.aliases == ["rl"]
        assert raw.examples == ["!reload"]
        assert raw.tags == ["dev only", "server only"]

    def test_sub_commands(self):
        """Test sub commands are described recursively."""
        parent = Command("config").sub(Command("show", "Show settings"))

        raw = command_raw_help(parent)

        assert [s.full_name for s in raw.subs] == ["config show"]
        assert raw.subs[0].description == "Show settings"

    def test_ignored_sub_commands_are_hidden(self):
        """Test ignored sub commands are left out of the help."""
        reset = Command("reset")
        parent = Command("config").sub(Command("hidden").ignore()).sub(reset).sub(Command("show"))
        reset.ignore()

        raw = command_raw_help(parent)

        assert [s.full_name for s in raw.subs] == ["config show"]

    def test_localization_overrides(self):
        """Test localized names and descriptions replace the defaults."""
        localization = Localization.model_validate(
            {
                "type_names": {"integer": "entier"},
                "help": {"tags": {"guild_only": "serveur"}},
                "commands": {
                    "roll": {
                        "description": "Lancer des dés",
                        "args": {"count": {"name": "nombre", "description": "Nombre de dés"}},
                        "flags": {"loud": {"description": "Crier"}},
                        "rest": {"name": "mots"},
                    }
                },
            }
        )
        cmd = build_roll().guild()

        raw = command_raw_help(cmd, localization)
        count = raw.signatures[0].args[0]

        assert raw.description == "Lancer des dés"
        assert raw.tags == ["serveur"]
        assert count.localized_name == "nombre"
        assert count.name == "count"
        assert count.description == "Nombre de dés"
        assert count.type_names == ["entier"]
        assert raw.signatures[0].usage_string == "roll <nombre> [sides = 6]"
        assert raw.signatures[0].flags[0].description == "Crier"
        assert raw.signatures[1].usage_string == "roll [...mots]"


class TestEmbedHelp:
    """Test the embed rendering."""

    def test_fields(self):
        """Test title, usage, argument and metadata fields."""
        embed = embed_help(build_roll(), prefix="!")

        assert embed.title == "!roll"
        assert embed.description == "Roll dice"
        names = [f.name for f in embed.fields]
        assert names == ["Usage", "Arguments", "Flags", "Usage", "Arguments", "Aliases", "Examples"]
        assert embed.fields[0].value.startswith("**`!roll <count> [sides = 6]`**")
        assert embed.fields[0].value.endswith("`<argument>` is required, `[argument]` is optional.")
        assert "`count` *integer*\n⮩  Number of dice" in embed.fields[1].value
        assert embed.fields[1].is_inline
        assert "`--loud` `-l` *boolean*" in embed.fields[2].value
        assert embed.fields[3].value == "**`!roll [...words]`**"
        assert "`words` *...text*" in embed.fields[4].value
        assert embed.fields[5].value == "`r`"

    def test_localized_field_titles(self):
        """Test the localized titles and hint are used."""
        localization = Localization.model_validate(
            {
                "help": {
                    "usage": "Utilisation",
                    "arguments": "Paramètres",
                    "flags": "Options",
                    "arg_usage_hint": "`<x>` requis",
                }
            }
        )

        embed = embed_help(build_roll(), prefix="!", localization=localization)

        names = [f.name for f in embed.fields]
        assert names[:3] == ["Utilisation", "Paramètres", "Options"]
        assert embed.fields[0].value.endswith("\n\n`<x>` requis")

    def test_no_usage_for_single_empty_signature(self):
        """Test a lone signature without arguments is not shown."""
        embed = embed_help(Command("ping", "Pong").signature(noop), prefix="!")

        assert embed.fields == []

    def test_empty_description(self):
        """Test a placeholder is used without description."""
        assert embed_help(Command("ping")).description == "---"

    def test_visible_subs(self):
        """Test only the visible sub commands are listed."""
        shown = Command("show", "Show settings")
        hidden = Command("reset")
        parent = Command("config").sub(shown).sub(hidden)

        embed = embed_help(parent, visible_subs=[shown])

        assert embed.fields[0].name == "Sub Commands"
        assert embed.fields[0].value == "**show** Show settings"


class TestTextHelp:
    """Test the plain text rendering."""

    def test_text(self):
        """Test the text layout."""
        text = text_help(build_roll(), prefix="!")
        lines = text.splitlines()

        assert lines[0] == "!roll"
        assert lines[1] == "Roll dice"
        assert "  !roll <count> [sides = 6]" in lines
        assert "    count (integer) Number of dice" in lines
        assert "    --loud, -l (boolean) Shout the result" in lines
        assert lines[-1] == "Aliases: r"


class TestDefaultHelp:
    """Test the help sent when no signature matches."""

    @pytest.mark.asyncio
    async def test_responds_with_embed(self, mock_message, parse_options):
        """Test the embed is sent through the message."""
        await default_help(build_roll(), mock_message, parse_options)

        mock_message.respond.assert_awaited_once()
        embed = mock_message.respond.await_args.kwargs["embed"]
        assert embed.title == "!roll"

    @pytest.mark.asyncio
    async def test_hides_restricted_subs(self, mock_message):
        """Test sub commands the invoker cannot use are hidden."""
        parent = Command("admin").sub(Command("reload").dev()).sub(Command("status"))

        await default_help(parent, mock_message, ParseOptions(prefix="!"))

        embed = mock_message.respond.await_args.kwargs["embed"]
        assert embed.fields[0].value == "**status**"


    @pytest.mark.asyncio
    async def test_sent_on_signature_not_found(self, mock_message):
        """Test a command without a matching signature falls back to the default help."""
        cmd = Command("double").signature(noop, ArgDefinition("n", hikari.OptionType.INTEGER))
        await cmd.init()

        await cmd.execute(
            ["x"],
            options=ParseOptions(prefix="!", help_on_signature_not_found=True),
            message=mock_message,
        )

        embed = mock_message.respond.await_args.kwargs["embed"]
        assert embed.title == "!double"
