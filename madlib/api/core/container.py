# --------------------------------
# DI container
# --------------------------------
from functools import lru_cache

from madlib.config import settings
from madlib.db.connection import build_engine
from madlib.plugin import MadlibPlugin


def _discard_reply(channel: str, text: str) -> None:
    # HTTP callers get replies in the response body instead.
    pass


class Container:
    def __init__(self, plugin: MadlibPlugin | None = None):
        self._plugin = plugin or MadlibPlugin(
            engine=build_engine(settings.database_url),
            send_reply=_discard_reply,
            prefix=settings.command_prefix,
        )

    @property
    def plugin(self) -> MadlibPlugin:
        return self._plugin


@lru_cache
def get_container():
    return Container()
