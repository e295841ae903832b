"""Madlib renderer (random placeholder substitution).

Rendering is kept apart from the command handling so:
- it can be tested against a fake field store
- the passive trigger and `create` share one code path
"""

from __future__ import annotations

import re

from madlib.core.errors import StorageError
from madlib.domain.fields import FieldRepositoryProtocol
from madlib.observability.tracing import EventLogger, Span, log_event, new_trace_id

_PLACEHOLDER = re.compile(r'\{([^}]+)\}')


def extract_placeholders(format: str) -> set[str]:
    """Distinct field names referenced as `{name}` in a format string."""
    return set(_PLACEHOLDER.findall(format))


class MadlibRenderer:
    """Fill a madlib format with values drawn from the field store."""

    def __init__(self, *, logger: EventLogger = log_event) -> None:
        self._log = logger

    def render(
        self,
        format: str,
        field_store: FieldRepositoryProtocol,
        *,
        trace_id: str | None = None,
    ) -> str:
        """Render a madlib format.

        Every distinct placeholder gets one draw, so repeated placeholders
        share a value. Placeholders whose field has no values stay in the
        output as written.

        Args:
            format: Format string containing {field} placeholders.
            field_store: Source of the random field values.
            trace_id: Trace of the message being handled, if any.

        Returns:
            Rendered text, or "error: <message>" when the field store fails.
        """
        trace_id = trace_id or new_trace_id()
        fields = extract_placeholders(format)
        if not fields:
            return format

        span = Span(name='madlib.render', trace_id=trace_id, attributes={'fields': sorted(fields)})
        try:
            values = field_store.sample_one(fields)
        except StorageError as exc:
            self._log('madlib.render.error', trace_id=trace_id, error=str(exc))
            return f'error: {exc}'

        def _substitute(match: re.Match[str]) -> str:
            return values.get(match.group(1), match.group(0))

        out = _PLACEHOLDER.sub(_substitute, format)

        span.attributes['unresolved'] = sorted(fields - values.keys())
        span.end()
        self._log('madlib.render.done', trace_id=trace_id, span=span)
        return out
