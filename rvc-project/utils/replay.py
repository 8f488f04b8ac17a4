# What it does: Rebuilds a checkout by replaying the commit log from the first commit (the Replay Engine)
# How it does: A left fold over commits[0..index]. Each step starts from the previous mapping and applies the commit's created files, then its deletions, then its file mods. A fresh dictionary is built on every call
# What data structure it uses: Dictionary (path -> content), List (the commit log)

import logging

from .errors import CorruptLogError, RevisionError

logger = logging.getLogger(__name__)


def apply_commit(files, commit): # Returns a new mapping with one commit applied to files
    files = dict(files)
    _apply_in_place(files, commit)
    return files


def _apply_in_place(files, commit):
    for path, content in commit.created.items():
        files[path] = content

    for path in commit.deleted:
        files.pop(path, None)

    for filemod in commit.filemods:
        if filemod.path not in files:
            raise CorruptLogError(f"commit '{commit.name}' modifies '{filemod.path}', which does not exist at that point")
        files[filemod.path] = filemod.apply(files[filemod.path])


def replay(commits, index=None):
    """
    Returns the mapping of path -> content as of revision `index`
    (inclusive). index=None means the latest revision.
    """
    if index is None:
        index = len(commits) - 1
        if index < 0:
            return {}

    if not 0 <= index < len(commits):
        raise RevisionError(f"no revision {index} (the log has {len(commits)} commit(s))")

    files = {}
    for commit in commits[:index + 1]:
        _apply_in_place(files, commit)

    logger.debug("replayed %d commit(s): %d file(s)", index + 1, len(files))
    return files
