"""Package metadata (DESCRIPTION) and changelog (NEWS.md) maintenance."""

from .description import DescriptionFile
from .updater import UpdateResult, update_package_meta
from .versions import FixedVersionChooser, PromptVersionChooser, bump_version

__all__ = [
    "DescriptionFile",
    "FixedVersionChooser",
    "PromptVersionChooser",
    "UpdateResult",
    "bump_version",
    "update_package_meta",
]
