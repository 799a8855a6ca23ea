"""Line-oriented command scripts that drive an Emitter.

Example script::

    # greet once, then keep logging
    on greet hello
    once greet first
    emit greet world
    off greet hello
    emit greet again
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Iterable, TextIO

from emitter.lib.errors import EmitterError
from emitter.lib.events import Emitter


class ScriptError(ValueError):
    """Raised for a script line that cannot be parsed."""


def check_echo_template(template) -> str:
    """Return the template as a str, or raise ScriptError if it cannot be formatted.

    Only the {listener} and {payload} fields are available.
    """
    template = str(template)
    try:
        template.format(listener="listener", payload="payload")
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ScriptError(f"invalid echo template {template!r}: {e!r}") from e
    return template


class ScriptRunner:
    """Executes on/once/off/emit/clear/events commands against an Emitter.

    Listeners are named "echo" listeners that print each payload they receive.
    A name always maps to the same callable, so `off` can remove what `on` added.
    """

    def __init__(
        self,
        emitter: Emitter,
        out: TextIO | None = None,
        echo_template: str = "{listener}: {payload}",
        strict: bool = False,
    ) -> None:
        self.emitter = emitter
        self.out = out if out is not None else sys.stdout
        self.echo_template = check_echo_template(echo_template)
        self.strict = strict
        self._echo_listeners: dict[str, Callable] = {}
        self._commands = {
            "on": self._cmd_on,
            "once": self._cmd_once,
            "off": self._cmd_off,
            "emit": self._cmd_emit,
            "clear": self._cmd_clear,
            "events": self._cmd_events,
        }

    def echo_listener(self, name: str) -> Callable:
        """Get the echo listener for a name, creating it on first use."""
        if name not in self._echo_listeners:

            def echo(payload):
                print(self.echo_template.format(listener=name, payload=payload), file=self.out)

            echo.__qualname__ = f"echo[{name}]"
            self._echo_listeners[name] = echo
        return self._echo_listeners[name]

    def run(self, lines: Iterable[str]) -> int:
        """Run every command in `lines`. Returns the number of errors."""
        errors = 0
        for lineno, line in enumerate(lines, start=1):
            try:
                self.execute(line)
            except (EmitterError, ScriptError) as e:
                errors += 1
                logging.debug(f"Script line {lineno} failed: {e}")
                print(f"error: line {lineno}: {e}", file=self.out)
                if self.strict:
                    break
        return errors

    def execute(self, line: str) -> None:
        """Execute a single script line. Blank lines and # comments are ignored."""
        line = line.strip()
        if not line or line.startswith("#"):
            return

        command, _, rest = line.partition(" ")
        handler = self._commands.get(command)
        if handler is None:
            raise ScriptError(f"unknown command '{command}'")
        handler(rest.strip())

    def _event_and_name(self, command: str, rest: str) -> tuple[str, str]:
        parts = rest.split()
        if len(parts) != 2:
            raise ScriptError(f"usage: {command} <event> <listener>")
        return parts[0], parts[1]

    def _cmd_on(self, rest: str) -> None:
        event_name, name = self._event_and_name("on", rest)
        self.emitter.on(event_name, self.echo_listener(name))

    def _cmd_once(self, rest: str) -> None:
        event_name, name = self._event_and_name("once", rest)
        self.emitter.once(event_name, self.echo_listener(name))

    def _cmd_off(self, rest: str) -> None:
        event_name, name = self._event_and_name("off", rest)
        self.emitter.off(event_name, self.echo_listener(name))

    def _cmd_emit(self, rest: str) -> None:
        if not rest:
            raise ScriptError("usage: emit <event> [payload]")
        event_name, _, payload = rest.partition(" ")
        self.emitter.emit(event_name, payload.strip() or None)

    def _cmd_clear(self, rest: str) -> None:
        self.emitter.clear(rest or None)

    def _cmd_events(self, rest: str) -> None:
        for event_name in self.emitter.event_names():
            print(f"{event_name} ({self.emitter.listener_count(event_name)})", file=self.out)
