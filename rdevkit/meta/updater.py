"""Version/date bump of DESCRIPTION together with a NEWS.md entry."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import RdevkitConfig, load_config
from ..errors import DescriptionError
from ..logging import get_logger, notify
from ..models import ChangelogEntry
from .description import DescriptionFile
from .news import commit_message, ensure_changelog, prepend_entry, read_changelog
from .project import check_is_project
from .versions import PromptVersionChooser, VersionChooser

logger = get_logger("meta")


@dataclass
class UpdateResult:
    """Outcome of a completed metadata update."""

    version: str
    date: str
    description_path: Path
    changelog_path: Path
    entry: ChangelogEntry
    commit_message: str


def update_package_meta(
    fixtures: Sequence[str],
    *,
    root: str | Path = ".",
    chooser: VersionChooser | None = None,
    today: Callable[[], date] = date.today,
    config: RdevkitConfig | None = None,
) -> Optional[UpdateResult]:
    """Bump the package version and date, then prepend a NEWS.md entry.

    Returns ``None`` without touching any file other than creating a missing
    NEWS.md when the operator does not pick a version.
    """
    project_root = check_is_project(root)
    if config is None:
        config = load_config(project_root)
    chooser = chooser or PromptVersionChooser()

    news_path = project_root / config.meta.changelog
    if ensure_changelog(news_path):
        notify(logger, "info", "%s file does not exist, creating it ...", news_path.name)
    existing_news = read_changelog(news_path)

    description_path = project_root / config.meta.description
    description = DescriptionFile.read(description_path)
    current_version = description.version
    if not current_version:
        raise DescriptionError(f"{description_path.name} has no Version field")

    new_version = chooser.choose(current_version)
    if new_version is None:
        notify(logger, "info", "OK try again later ...")
        return None

    release_date = today().isoformat()
    description.date = release_date
    notify(logger, "success", "Date field in %s set to %s", description_path.name, release_date)
    description.version = new_version
    notify(logger, "success", "Version field in %s set to %s", description_path.name, new_version)
    description.write(description_path)

    entry = ChangelogEntry(
        package_name=description.package or project_root.name,
        version=new_version,
        date=release_date,
        fixtures=list(fixtures),
    )
    prepend_entry(news_path, entry, existing_news)
    message = commit_message(entry.fixtures)

    notify(logger, "success", "Writing into %s", news_path.name)
    notify(logger, "caution", "Please run devtools::check() before pushing")
    notify(logger, "caution", "Please create a merge request and avoid pushing directly to production")
    notify(logger, "info", "If you want, you can copy your fixture text and use it as a commit message (see below)")
    notify(logger, "info", "%s", message)

    return UpdateResult(
        version=new_version,
        date=release_date,
        description_path=description_path,
        changelog_path=news_path,
        entry=entry,
        commit_message=message,
    )


__all__ = ["UpdateResult", "update_package_meta"]
