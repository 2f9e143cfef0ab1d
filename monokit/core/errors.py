"""Error taxonomy for monokit commands.

Every error here is terminal for the current command and maps to exit code 1
in the CLI layer. Non-fatal conditions (missing scan roots, failing hooks) are
reported as warnings instead of being raised.
"""


class MonokitError(Exception):
    """Base class for all monokit errors."""


class ValidationError(MonokitError):
    """Missing or malformed unit name or flag."""


class ConflictError(MonokitError):
    """Scaffold target directory already exists."""


class ConfigError(MonokitError):
    """Workspace configuration is unusable (no globs, no modules, bad file)."""


class NotFoundError(MonokitError):
    """A required file or directory does not exist."""


class ScaffoldError(MonokitError):
    """A stub failed to render (nothing written) or a file write failed."""
