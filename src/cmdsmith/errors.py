"""Error types raised by the cmdsmith pipeline.

Library code raises these; only the CLI layer turns them into messages and
exit codes.
"""


class CmdsmithError(Exception):
    """Base class for every classified cmdsmith failure."""


class NotConfiguredError(CmdsmithError):
    """No configuration is available; running setup fixes it."""


class InvalidConfigError(CmdsmithError):
    """A config file exists but does not hold a usable configuration."""


class TransportError(CmdsmithError):
    """The completion service could not be reached."""


class UpstreamError(CmdsmithError):
    """The completion service answered, but not with a usable completion."""

    hint = "check your API key or try again later"


class PersistenceError(CmdsmithError):
    """Local state (config or history) could not be read or written."""
