"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class ToolError(InterfaceError):
    """A tool call failed; the message is returned to the host as an error result."""

    pass
