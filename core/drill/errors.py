"""
Error kinds raised by the drill core.
"""


class DrillError(Exception):
    """Base class for drill errors."""


class CatalogLoadError(DrillError):
    """The word catalog could not be fetched or parsed. Fatal for the run."""


class PersistedStateCorrupt(DrillError):
    """The persisted blob is unparseable or structurally invalid."""
