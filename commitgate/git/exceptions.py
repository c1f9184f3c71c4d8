"""Git-related exception classes.

Contains all exception classes for git operations:
- GitError: Base exception for git-related errors
- NotARepositoryError: Raised outside of a git repository
- NoChangesError: Raised when there is nothing to report
- NothingStagedError: Raised when committing with an empty index
- CommitFailedError: Raised when git itself rejects the commit
- MissingMessageError: Raised when committing without a message
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class NotARepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class NoChangesError(GitError):
    """Raised when neither the index nor the working tree has changes."""

    pass


class NothingStagedError(GitError):
    """Raised when there are no staged changes to commit."""

    pass


class CommitFailedError(GitError):
    """Raised when `git commit` was attempted and failed."""

    def __init__(self, message: str, returncode: int = 1):
        super().__init__(message)
        self.returncode = returncode


class MissingMessageError(ValueError):
    """Raised when a commit is requested without a message."""

    pass
