"""Chat command grammar.

Parsing is pure: it turns message text into one of the command variants
below and never touches storage. The interpreter decides what to do with it.

Grammar (after the `madlib` prefix, only when the bot is addressed):
    create <name> <format...>
    delete <name>
    add <field> <value...>
    remove <field> <value>
    list
Anything else after the prefix is a request for help.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

DEFAULT_PREFIX = 'madlib'

HELP_TEXT = (
    "Address me and use the command madlib with the following:\n"
    "\t`create <madlib name> <format>` - make a new madlib\n"
    "\t`delete <madlib name>` - remove a madlib\n"
    "\t`add <field> <value>` - add a format field value\n"
    "\t`remove <field> <value>` - remove a format field value\n"
    "\t`list` - list all current madlibs\n"
    "Format is a string with a field represented as `{field}`"
)


@dataclass(frozen=True)
class CreateMadlib:
    name: str
    format: str


@dataclass(frozen=True)
class DeleteMadlib:
    name: str


@dataclass(frozen=True)
class AddField:
    field: str
    value: str


@dataclass(frozen=True)
class RemoveField:
    field: str
    value: str


@dataclass(frozen=True)
class ListMadlibs:
    pass


@dataclass(frozen=True)
class ShowHelp:
    pass


@dataclass(frozen=True)
class Unhandled:
    """The message is not a madlib command; other handlers may take it."""


Command = Union[CreateMadlib, DeleteMadlib, AddField, RemoveField, ListMadlibs, ShowHelp, Unhandled]


def parse_command(text: str, *, addressed: bool, prefix: str = DEFAULT_PREFIX) -> Command:
    """Parse a chat message into a command.

    Args:
        text: Raw message body.
        addressed: Whether the message was directed at the bot.
        prefix: Leading token that marks a madlib command.

    Returns:
        The parsed command. Unhandled when the message is not addressed, does
        not start with the prefix, or has nothing after it. ShowHelp when the
        arguments do not fit any subcommand.
    """
    words = text.split()
    if not addressed or len(words) < 2 or words[0].lower() != prefix.lower():
        return Unhandled()

    sub, args = words[1].lower(), words[2:]

    if sub == 'create' and len(args) >= 2:
        return CreateMadlib(name=args[0], format=' '.join(args[1:]))
    if sub == 'delete' and len(args) == 1:
        return DeleteMadlib(name=args[0])
    if sub == 'add' and len(args) >= 2:
        return AddField(field=args[0], value=' '.join(args[1:]))
    # Single-word values only; `add` accepts more, so multi-word values can be
    # added but not removed through chat.
    if sub == 'remove' and len(args) == 2:
        return RemoveField(field=args[0], value=args[1])
    if sub == 'list' and not args:
        return ListMadlibs()
    return ShowHelp()
