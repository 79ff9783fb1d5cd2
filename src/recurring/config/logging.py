"""Opt-in structlog rendering for recurring's log events.

The library logs through stdlib ``logging`` under the ``recurring`` logger
and never touches the root logger. Domain modules emit short event names
(``recurrence_created``, ``occurrence_rejected``, ...) with their details in
``extra=``; the formatter built here lifts those details into event keys and
renders each record as a console line or a JSON object.

Two output modes:
- Human (default): key=value console lines
- JSON (log_json): one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

PACKAGE_LOGGER = "recurring"
HANDLER_NAME = "recurring.structlog"

_DOMAIN_PREFIX = f"{PACKAGE_LOGGER}.domain."


def add_component(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> EventDict:
    """Tag events from ``recurring.domain.<module>`` with ``component=<module>``."""
    name = event_dict.get("logger", "")
    if name.startswith(_DOMAIN_PREFIX):
        event_dict["component"] = name[len(_DOMAIN_PREFIX) :]
    return event_dict


def build_formatter(*, log_json: bool = False, colors: bool = False) -> logging.Formatter:
    """Return a stdlib formatter that renders records through structlog."""
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.ExtraAdder(),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_component,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=colors)

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Route ``recurring`` log events to *stream* (stderr by default).

    Replaces the handler installed by a previous call; handlers added to the
    ``recurring`` logger by anyone else are left in place. Events stop
    propagating to the root logger so they are rendered once.

    Args:
        verbose: Emit DEBUG events (construction, seeding, rejection,
            overflow, exhaustion). When False, only WARNING+.
        log_json: Use the JSON renderer instead of the console renderer.
        stream: Output stream for the handler.

    Returns:
        The installed handler.
    """
    out = sys.stderr if stream is None else stream

    handler = logging.StreamHandler(out)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(build_formatter(log_json=log_json, colors=out.isatty()))

    pkg = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in pkg.handlers if h.get_name() == HANDLER_NAME]:
        pkg.removeHandler(existing)
        existing.close()
    pkg.addHandler(handler)
    pkg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg.propagate = False
    return handler
