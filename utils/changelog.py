# Insert release notes above the latest version header of CHANGELOG.md.

from __future__ import annotations


from configs.settings import CHANGELOG_PATH
from utils.audit import audit_log

VERSION_HEADER = "## "


class ChangelogError(ValueError):
    pass


def write_tag_action_changes(formatted_changes: str, path: str | None = None) -> None:
    """
    Put `formatted_changes` right before the first "## " header and rewrite the file.
    The file is not touched when no header is found.
    """
    path = path or CHANGELOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = f.read()

    idx = data.find(VERSION_HEADER)
    if idx == -1:
        raise ChangelogError(f"Could not find latest version header '{VERSION_HEADER}'")
    data = data[:idx] + formatted_changes + data[idx:]

    with open(path, "w", encoding="utf-8") as f:
        f.write(data)
    audit_log(event="changelog_update", path=path, inserted_at=idx, size=len(formatted_changes))
