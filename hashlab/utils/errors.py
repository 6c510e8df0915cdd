"""Error types shared by the hash analyzers and their line sources."""

from pathlib import Path


class HashLabError(Exception):
    """Base class for errors that abort a single operation."""


class SourceNotFound(HashLabError):
    """The input file does not exist."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"File '{self.path}' not found.")


class SourceReadFailure(HashLabError):
    """The input file exists but could not be read."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Error reading file '{self.path}': {reason}")


class EmptyInputSet(HashLabError):
    """No usable (non-blank) lines were supplied to an analyzer."""

    def __init__(self, analysis: str):
        self.analysis = analysis
        super().__init__(f"{analysis}: no data (input contains no non-blank lines)")
