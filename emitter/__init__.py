from emitter.lib.errors import EmitterError, EventNotRegistered, ListenerNotFound
from emitter.lib.events import Emitter
from emitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Emitter.__name__,
    EmitterError.__name__,
    EventNotRegistered.__name__,
    ListenerNotFound.__name__,
]
