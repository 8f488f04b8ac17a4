# What it does: Lists every regular file below a directory (the Tree Walker)
# How it does: Recursive descent with os.scandir. Symlinked directories are followed. The (st_dev, st_ino) identities of the directories on the current path are kept, so a symlink pointing back up the tree is not entered again, while a symlink to a sibling directory is walked like any other directory. Depth is bounded by max_depth
# What data structure it uses: Set (of absolute file paths, and of the directory identities on the current path)

import logging
import os

from .errors import WalkDepthError

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def walk_tree(root, max_depth=DEFAULT_MAX_DEPTH):
    """
    Returns the set of absolute paths of all regular files under root,
    or None if root is not a directory.
    """
    if not os.path.isdir(root):
        return None

    root = os.path.abspath(root)
    files = set()
    _walk(root, 0, max_depth, files, set())
    logger.debug("walked %s: %d file(s)", root, len(files))
    return files


def _walk(path, depth, max_depth, files, ancestors):
    if depth > max_depth:
        raise WalkDepthError(f"directory nesting below '{path}' exceeds the maximum depth of {max_depth}")

    stats = os.stat(path)
    identity = (stats.st_dev, stats.st_ino)
    if identity in ancestors:
        logger.debug("skipping %s, it loops back to one of its parents", path)
        return

    ancestors.add(identity)
    try:
        with os.scandir(path) as entries:
            for entry in entries:
                if entry.is_dir():  # follows symlinks
                    _walk(entry.path, depth + 1, max_depth, files, ancestors)
                elif entry.is_file():
                    files.add(entry.path)
                # broken symlinks, fifos and sockets are not tracked
    finally:
        ancestors.discard(identity)
