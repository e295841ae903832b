"""Madlib plugin: the object a chat bot host wires in.

The host gives us a database engine and a way to send replies. We create the
tables, then handle one message at a time, each inside its own session.
"""

from __future__ import annotations

from sqlalchemy.engine import Engine

from madlib.db.connection import build_session_factory, init_schema
from madlib.domain.fields import FieldRepository
from madlib.domain.templates import TemplateRepository
from madlib.observability.tracing import EventLogger, log_event, new_trace_id
from madlib.runtime.commands import DEFAULT_PREFIX, HELP_TEXT
from madlib.runtime.interpreter import CommandInterpreter
from madlib.runtime.messages import HandleResult, Message, ReplySender
from madlib.runtime.renderer import MadlibRenderer


class MadlibPlugin:
    """Chat handler for madlib commands and passive triggers."""

    def __init__(
        self,
        *,
        engine: Engine,
        send_reply: ReplySender,
        logger: EventLogger = log_event,
        prefix: str = DEFAULT_PREFIX,
    ) -> None:
        """
        Raises:
            SchemaInitError: If the tables cannot be created.
        """
        init_schema(engine)
        self._sessions = build_session_factory(engine)
        self._send_reply = send_reply
        self._log = logger
        self._renderer = MadlibRenderer(logger=logger)
        self._prefix = prefix
        self._log('madlib.schema.ready', trace_id=new_trace_id(), url=str(engine.url))

    @property
    def session_factory(self):
        return self._sessions

    def interpret(self, message: Message) -> HandleResult:
        """Handle a message without sending anything."""
        trace_id = new_trace_id()
        self._log(
            'madlib.message.received',
            trace_id=trace_id,
            channel=message.channel,
            is_addressed=message.is_addressed,
        )
        with self._sessions() as db:
            interpreter = CommandInterpreter(
                templates=TemplateRepository(db),
                fields=FieldRepository(db),
                renderer=self._renderer,
                logger=self._log,
                prefix=self._prefix,
            )
            return interpreter.handle(message, trace_id=trace_id)

    def message(self, message: Message) -> bool:
        """Handle a message and send its replies.

        Returns:
            True if the message was consumed.
        """
        result = self.interpret(message)
        for reply in result.replies:
            self._send_reply(reply.channel, reply.text)
        return result.consumed

    def help(self, channel: str) -> None:
        self._send_reply(channel, HELP_TEXT)
