# What it does: Defines the exceptions raised by the rvc core so the commands can report them consistently
# What data structure it uses: A small class hierarchy rooted at RvcError


class RvcError(Exception):
    """Base class for every error raised by rvc itself."""


# Precondition errors

class InvalidPathError(RvcError):
    pass


class RepositoryExistsError(RvcError):
    pass


class NotARepositoryError(RvcError):
    pass


class RevisionError(RvcError):
    pass


class ConfigError(RvcError):
    pass


class NoChangesError(RvcError):
    """Raised by commit construction when the working tree matches the checkout."""

    def __init__(self, message="nothing to commit, working tree clean"):
        super().__init__(message)


class CorruptLogError(RvcError):
    """The commit log cannot be replayed (a file mod points at a missing file or line)."""


class WalkDepthError(RvcError):
    pass


class UnsupportedFileError(RvcError):
    pass


class NotSupportedError(RvcError):
    def __init__(self, command):
        super().__init__(f"'{command}' is not supported yet")
        self.command = command
