from __future__ import annotations

import pytest
from sqlalchemy import inspect

from madlib.core.errors import SchemaInitError
from madlib.db.connection import build_engine
from madlib.plugin import MadlibPlugin
from madlib.runtime.commands import HELP_TEXT
from madlib.runtime.messages import Message


def test_plugin_creates_tables(plugin, engine) -> None:
    tables = set(inspect(engine).get_table_names())

    assert {"madlib", "madlib_fields"} <= tables


def test_plugin_schema_creation_is_idempotent(plugin, engine, sender, logger) -> None:
    plugin.message(Message(text="madlib create foo x", channel="#a", is_addressed=True))

    MadlibPlugin(engine=engine, send_reply=sender, logger=logger)

    assert plugin.message(Message(text="foo", channel="#a")) is True
    assert sender.texts[-1] == "x"


def test_plugin_sends_replies_to_message_channel(plugin, sender) -> None:
    # Act
    consumed = plugin.message(Message(text="madlib add name World", channel="#general", is_addressed=True))

    # Assert
    assert consumed is True
    assert sender.sent == [("#general", "Added.")]


def test_plugin_passes_on_unrelated_messages(plugin, sender) -> None:
    assert plugin.message(Message(text="good morning", channel="#general", is_addressed=True)) is False
    assert sender.sent == []


def test_plugin_full_scenario(plugin, sender) -> None:
    plugin.message(Message(text="madlib create Greet Hello {name}!", channel="#a", is_addressed=True))
    plugin.message(Message(text="madlib add name World", channel="#a", is_addressed=True))
    plugin.message(Message(text="greet", channel="#b", is_addressed=False))

    assert sender.sent == [
        ("#a", "Hello {name}!"),
        ("#a", "Added."),
        ("#b", "Hello World!"),
    ]


def test_plugin_help(plugin, sender) -> None:
    plugin.help("#a")

    assert sender.sent == [("#a", HELP_TEXT)]


def test_plugin_logs_message_trace(plugin, logger) -> None:
    plugin.message(Message(text="madlib list", channel="#a", is_addressed=True))

    received = [e for e in logger.events if e["event"] == "madlib.message.received"]
    dispatched = [e for e in logger.events if e["event"] == "madlib.command.dispatched"]
    assert received[0]["trace_id"] == dispatched[0]["trace_id"]
    assert dispatched[0]["command"] == "ListMadlibs"


def test_plugin_fails_fast_when_schema_cannot_be_created(tmp_path, sender, logger) -> None:
    engine = build_engine(f"sqlite:///{tmp_path / 'missing' / 'madlib.db'}")

    with pytest.raises(SchemaInitError):
        MadlibPlugin(engine=engine, send_reply=sender, logger=logger)

    assert "madlib.schema.ready" not in logger.names()
