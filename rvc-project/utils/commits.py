# What it does: Defines the Commit record and builds one by comparing the last checkout with the working tree (the Diff Engine)
# How it does: It walks the tree, splits the paths into added / deleted / possibly modified with set arithmetic, reads the added files whole and line-diffs the possibly modified ones against the checkout. Files whose diff is empty are unchanged and dropped
# What data structure it uses: Set (path classification), Dictionary (created files, path -> content), List (of FileMod)

import logging
import os
import time
from dataclasses import dataclass, field

from . import diff as diff_utils
from .errors import ConfigError, InvalidPathError, NoChangesError, UnsupportedFileError
from .ignore import get_ignored_patterns, is_ignored, is_metadata
from .patch import FileMod
from .walker import DEFAULT_MAX_DEPTH, walk_tree

logger = logging.getLogger(__name__)


@dataclass
class Commit:
    name: str
    timestamp: int
    created: dict = field(default_factory=dict)  # path -> full content
    deleted: set = field(default_factory=set)
    filemods: list = field(default_factory=list)

    def is_empty(self):
        return not self.created and not self.deleted and not self.filemods

    def to_dict(self):
        return {
            'name': self.name,
            'timestamp': self.timestamp,
            'created': dict(self.created),
            'deleted': sorted(self.deleted),
            'filemods': [filemod.to_dict() for filemod in self.filemods],
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data['name'],
            timestamp=int(data['timestamp']),
            created=dict(data.get('created', {})),
            deleted=set(data.get('deleted', [])),
            filemods=[FileMod.from_dict(filemod) for filemod in data.get('filemods', [])],
        )


def to_rel_path(repo_root, abs_path): # Paths are stored relative to the root with '/' separators
    return os.path.relpath(abs_path, repo_root).replace(os.sep, '/')


def load_file(path, encoding='utf-8'):
    """
    Reads a tracked file as text. Line endings are kept as they are on
    disk; non-empty content is given a trailing newline if it lacks one.
    """
    try:
        with open(path, 'r', encoding=encoding, newline='') as f:
            content = f.read()
    except UnicodeDecodeError:
        raise UnsupportedFileError(f"'{path}' is not a {encoding} text file")
    except LookupError:
        raise ConfigError(f"unknown encoding '{encoding}'")

    if content and not content.endswith('\n'):
        content += '\n'
    return content


def build_commit(name, repo_root, checkout, max_depth=DEFAULT_MAX_DEPTH, encoding='utf-8', allow_empty=False):
    """
    Compares checkout (path -> content) against the files under repo_root
    and returns the Commit that turns one into the other.

    Raises NoChangesError when nothing changed, unless allow_empty is set.
    """
    walked = walk_tree(repo_root, max_depth)
    if walked is None:
        raise InvalidPathError(f"'{repo_root}' is not a directory")

    ignore_patterns = get_ignored_patterns(repo_root)
    current_paths = set()
    for abs_path in walked:
        rel_path = to_rel_path(repo_root, abs_path)
        if not is_ignored(rel_path, ignore_patterns):
            current_paths.add(rel_path)
    prior_paths = set(path for path in checkout if not is_metadata(path))

    states = diff_utils.compare_states(prior_paths, current_paths)

    created = {}
    for path in states['added']:
        created[path] = load_file(os.path.join(repo_root, path), encoding)

    deleted = set(path for path in states['deleted'] if path not in created)

    filemods = []
    for path in states['common']:
        current = load_file(os.path.join(repo_root, path), encoding)
        filemod = FileMod.from_contents(path, checkout[path], current)
        if not filemod.is_empty():
            filemods.append(filemod)

    logger.debug(
        "commit '%s': %d created, %d deleted, %d modified",
        name, len(created), len(deleted), len(filemods)
    )

    if not allow_empty and not created and not deleted and not filemods:
        raise NoChangesError()

    return Commit(
        name=name,
        timestamp=int(time.time()),
        created=created,
        deleted=deleted,
        filemods=filemods,
    )
