# What it does: Provides the Repository, which owns the commit log and the checkout cache, and the helpers to locate a repository on disk
# How it does: Every mutating operation goes through the Diff Engine (commits.build_commit) and the Replay Engine (replay.replay); the checkout cache is only ever replaced by a fresh replay. `find_repo_root` walks up the directory tree to locate the `.rvc` directory
# What data structure it uses: List (the append-only commit log, index = revision), Dictionary (the checkout cache, path -> content). Uses recursion (linear recursion) to find the repo root

import logging
import os
import shutil

from . import config as config_utils, state as state_utils
from .commits import Commit, build_commit
from .errors import InvalidPathError, NotARepositoryError, RepositoryExistsError, RevisionError
from .replay import replay
from .state import METADATA_DIR

logger = logging.getLogger(__name__)

INIT_COMMIT = 'init'


def find_repo_root(path='.'): # Recursively searches for the .rvc directory to find the repository root
    path = os.path.abspath(path)
    if os.path.isdir(os.path.join(path, METADATA_DIR)):
        return path
    parent_path = os.path.dirname(path)
    if parent_path == path:
        return None
    return find_repo_root(parent_path)


class Repository:

    def __init__(self, name, path, commits=None, checkout=None, head=None):
        self.name = name
        self.path = path
        self.commits = commits if commits is not None else []
        self.checkout_files = checkout if checkout is not None else {}
        self.head = head  # index of the last replayed commit, None while the log is empty

    @property
    def metadata_path(self):
        return os.path.join(self.path, METADATA_DIR)

    @classmethod
    def create(cls, name, path):
        """
        Creates a repository for the directory at `path` and records its
        whole content in an initial "init" commit. Nothing is written to
        disk until save() is called.
        """
        if not os.path.exists(path):
            raise InvalidPathError(f"'{path}' does not exist")
        if not os.path.isdir(path):
            raise InvalidPathError(f"'{path}' is not a directory")

        path = os.path.realpath(path)
        if os.path.exists(os.path.join(path, METADATA_DIR)):
            raise RepositoryExistsError(f"a repository already exists in '{path}'")

        repo = cls(name, path)
        repo._append(repo._build_commit(INIT_COMMIT, allow_empty=True))
        logger.debug("created repository '%s' at %s", name, path)
        return repo

    @classmethod
    def open(cls, path='.'):
        """
        Loads the repository enclosing `path`. A missing or unreadable state
        file yields an empty repository named after the directory.
        """
        repo_root = find_repo_root(path)
        if not repo_root:
            raise NotARepositoryError(f"not an rvc repository (or any of the parent directories): {os.path.abspath(path)}")
        repo_root = os.path.realpath(repo_root)

        data = state_utils.read_state(repo_root)
        if data is not None:
            try:
                repo = cls.from_dict(data)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning("ignoring malformed state in %s: %s", repo_root, e)
            else:
                # The working tree may have moved since the last save
                repo.path = repo_root
                # The stored checkout is only a copy; rebuild it from the log
                if repo.head is None:
                    repo.checkout_files = {}
                else:
                    repo.checkout_files = replay(repo.commits, repo.head)
                return repo

        return cls(os.path.basename(repo_root), repo_root)

    def commit(self, name):
        """Records the working tree changes as a new commit and returns it."""
        latest = len(self.commits) - 1 if self.commits else None
        if self.head != latest:
            raise RevisionError(
                f"repository '{self.name}' is checked out at revision {self.head} of {latest}; "
                "check out the latest revision before committing"
            )
        commit = self._build_commit(name)
        self._append(commit)
        logger.debug("repository '%s': committed '%s' as revision %d", self.name, name, self.head)
        return commit

    def checkout(self, index):
        """
        Rebuilds the checkout cache as of revision `index`.
        Returns True if the cache or the head moved.
        """
        files = replay(self.commits, index)
        changed = files != self.checkout_files or index != self.head
        self.checkout_files = files
        self.head = index
        return changed

    def checkout_latest(self):
        if not self.commits:
            changed = bool(self.checkout_files) or self.head is not None
            self.checkout_files = {}
            self.head = None
            return changed
        return self.checkout(len(self.commits) - 1)

    def save(self):
        state_utils.write_state(self.path, self.to_dict())

    def delete(self):
        """Removes the repository metadata. Working tree files are left alone."""
        if not os.path.isdir(self.metadata_path):
            raise NotARepositoryError(f"repository '{self.name}' has no metadata at {self.metadata_path}")
        shutil.rmtree(self.metadata_path)
        logger.debug("deleted repository '%s' at %s", self.name, self.path)

    def summary(self):
        return {
            'name': self.name,
            'path': self.path,
            'commits': len(self.commits),
            'head': self.head,
            'files': len(self.checkout_files),
        }

    def to_dict(self):
        return {
            'name': self.name,
            'path': self.path,
            'head': self.head,
            'commits': [commit.to_dict() for commit in self.commits],
            'checkout': dict(self.checkout_files),
        }

    @classmethod
    def from_dict(cls, data):
        commits = [Commit.from_dict(commit) for commit in data['commits']]
        head = data.get('head')
        if head is not None:
            head = int(head)
        return cls(data['name'], data['path'], commits, dict(data.get('checkout', {})), head)

    def _build_commit(self, name, allow_empty=False):
        return build_commit(
            name,
            self.path,
            self.checkout_files,
            max_depth=config_utils.get_max_depth(self.path),
            encoding=config_utils.get_encoding(self.path),
            allow_empty=allow_empty,
        )

    def _append(self, commit):
        commits = self.commits + [commit]
        files = replay(commits)
        self.commits = commits
        self.checkout_files = files
        self.head = len(commits) - 1

    def __eq__(self, other):
        if not isinstance(other, Repository):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __str__(self):
        return f"Name: {self.name}\nPath: {self.path}\nCommits: {len(self.commits)}"
