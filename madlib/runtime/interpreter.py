"""Command interpreter: passive trigger, then command dispatch.

One message in, zero or more replies out. Storage failures stop here and
become a fixed apology; only the renderer's own "error: ..." text ever shows
a backend message to the chat.
"""

from __future__ import annotations

from madlib.core.errors import DuplicateNameError, StorageError
from madlib.domain.fields import FieldRepositoryProtocol
from madlib.domain.templates import TemplateRepositoryProtocol
from madlib.observability.tracing import EventLogger, log_event, new_trace_id
from .commands import (
    DEFAULT_PREFIX,
    HELP_TEXT,
    AddField,
    Command,
    CreateMadlib,
    DeleteMadlib,
    ListMadlibs,
    RemoveField,
    ShowHelp,
    Unhandled,
    parse_command,
)
from .messages import HandleResult, Message, Reply
from .renderer import MadlibRenderer

LOOKUP_FAILED = 'There was a problem.'
COMMAND_FAILED = 'Something went horribly wrong.'


class CommandInterpreter:
    """Route a chat message to the madlib stores and build the replies."""

    def __init__(
        self,
        *,
        templates: TemplateRepositoryProtocol,
        fields: FieldRepositoryProtocol,
        renderer: MadlibRenderer | None = None,
        logger: EventLogger = log_event,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        self._templates = templates
        self._fields = fields
        self._log = logger
        self._renderer = renderer or MadlibRenderer(logger=logger)
        self._prefix = prefix

    def handle(self, message: Message, *, trace_id: str | None = None) -> HandleResult:
        trace_id = trace_id or new_trace_id()
        channel = message.channel

        # Passive trigger: the whole message is a madlib name.
        try:
            template = self._templates.lookup(message.text.strip().lower())
        except StorageError as exc:
            self._log('madlib.storage.error', trace_id=trace_id, operation='lookup', error=str(exc))
            return HandleResult(consumed=True, replies=[Reply(channel, LOOKUP_FAILED)])

        if template is not None:
            self._log('madlib.command.dispatched', trace_id=trace_id, command='render', name=template.name)
            text = self._renderer.render(template.format, self._fields, trace_id=trace_id)
            return HandleResult(consumed=True, replies=[Reply(channel, text)])

        command = parse_command(message.text, addressed=message.is_addressed, prefix=self._prefix)
        if isinstance(command, Unhandled):
            return HandleResult(consumed=False)

        self._log('madlib.command.dispatched', trace_id=trace_id, command=type(command).__name__)
        try:
            text = self._execute(command, trace_id=trace_id)
        except DuplicateNameError as exc:
            self._log('madlib.storage.error', trace_id=trace_id, operation='create', error=str(exc))
            text = f'A madlib named {exc.name} already exists.'
        except StorageError as exc:
            self._log('madlib.storage.error', trace_id=trace_id, operation=type(command).__name__, error=str(exc))
            text = COMMAND_FAILED

        return HandleResult(consumed=True, replies=[Reply(channel, text)])

    def _execute(self, command: Command, *, trace_id: str) -> str:
        if isinstance(command, CreateMadlib):
            template = self._templates.create(command.name, command.format)
            # Not atomic with the insert: a concurrent delete can win.
            if template is None:
                return COMMAND_FAILED
            return self._renderer.render(template.format, self._fields, trace_id=trace_id)

        if isinstance(command, DeleteMadlib):
            self._templates.delete(command.name)
            return 'Deleted.'

        if isinstance(command, AddField):
            self._fields.add_field(command.field, command.value)
            return 'Added.'

        if isinstance(command, RemoveField):
            self._fields.remove_field(command.field, command.value)
            return 'Removed.'

        if isinstance(command, ListMadlibs):
            return ', '.join(self._templates.list())

        if isinstance(command, ShowHelp):
            return HELP_TEXT

        raise TypeError(f'Unsupported command: {command!r}')
