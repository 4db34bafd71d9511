"""Exception types raised by termglyph."""


class TermglyphError(Exception):
    """Base class for termglyph errors."""


class SetupError(TermglyphError):
    """The raw terminal session could not be acquired."""


class SessionError(TermglyphError):
    """A terminal session was used out of order."""


class GameError(TermglyphError):
    """The game loop stopped because of a terminal I/O failure.

    The underlying cause is only available as ``__cause__``.
    """
