# Unit tests for utils/repository.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'rvc-project'))

from conftest import write_file
from utils import repository, state as state_utils
from utils.replay import replay
from utils.errors import (
    InvalidPathError, NoChangesError, NotARepositoryError, RepositoryExistsError, RevisionError
)

Repository = repository.Repository


class TestFindRepoRoot:
    # Tests for repository.find_repo_root()

    def test_finds_repo_in_current_dir(self, temp_repo):
        # Should find repo when in root directory
        result = repository.find_repo_root(temp_repo)
        assert result == temp_repo

    def test_finds_repo_in_subdirectory(self, temp_repo):
        # Should find repo when in a subdirectory
        subdir = os.path.join(temp_repo, 'src', 'deep', 'nested')
        os.makedirs(subdir)
        os.chdir(subdir)

        result = repository.find_repo_root()
        # Use realpath to resolve symlinks
        assert os.path.realpath(result) == os.path.realpath(temp_repo)

    def test_returns_none_when_not_in_repo(self, temp_dir):
        # Should return None when not in a repository
        result = repository.find_repo_root(temp_dir)
        assert result is None


class TestCreate:
    # Tests for Repository.create()

    def test_records_the_whole_tree(self, temp_tree):
        repo = Repository.create('demo', temp_tree)

        assert repo.name == 'demo'
        assert repo.path == temp_tree
        assert len(repo.commits) == 1
        assert repo.commits[0].name == 'init'
        assert repo.head == 0
        assert repo.checkout_files == {
            'README.md': '# Test Project\n',
            'src/main.py': 'print("one")\nprint("two")\n',
            'src/lib/util.py': 'def util():\n    return 1\n',
        }

    def test_does_not_persist(self, temp_tree):
        Repository.create('demo', temp_tree)
        assert not os.path.exists(os.path.join(temp_tree, '.rvc'))

    def test_empty_directory(self, temp_dir):
        repo = Repository.create('empty', temp_dir)

        assert len(repo.commits) == 1
        assert repo.commits[0].is_empty()
        assert repo.checkout_files == {}

    def test_missing_path(self, temp_dir):
        with pytest.raises(InvalidPathError):
            Repository.create('x', os.path.join(temp_dir, 'missing'))

    def test_path_is_a_file(self, temp_tree):
        with pytest.raises(InvalidPathError):
            Repository.create('x', os.path.join(temp_tree, 'README.md'))

    def test_existing_repository(self, temp_repo):
        with pytest.raises(RepositoryExistsError) as excinfo:
            Repository.create('again', temp_repo)
        assert temp_repo in str(excinfo.value)


class TestCommit:
    # Tests for Repository.commit()

    def test_appends_and_replays(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        write_file(temp_tree, 'src/main.py', 'print("one")\nprint("three")\n')
        write_file(temp_tree, 'NEW.md', 'new\n')

        commit = repo.commit('second')

        assert len(repo.commits) == 2
        assert repo.commits[-1] is commit
        assert repo.head == 1
        assert repo.checkout_files['src/main.py'] == 'print("one")\nprint("three")\n'
        assert repo.checkout_files['NEW.md'] == 'new\n'

    def test_no_changes_leaves_log_alone(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        before = repo.to_dict()

        with pytest.raises(NoChangesError):
            repo.commit('nothing')

        assert repo.to_dict() == before

    def test_requires_latest_checkout(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        write_file(temp_tree, 'a.txt', 'a\n')
        repo.commit('second')
        repo.checkout(0)
        write_file(temp_tree, 'b.txt', 'b\n')

        with pytest.raises(RevisionError):
            repo.commit('third')
        assert len(repo.commits) == 2

    def test_commit_on_repository_without_state(self, temp_tree):
        # An empty repository treats every file as created
        repo = Repository('fresh', temp_tree)
        commit = repo.commit('first')

        assert set(commit.created) == {'README.md', 'src/main.py', 'src/lib/util.py'}
        assert repo.head == 0


class TestCheckout:
    # Tests for Repository.checkout() and Repository.checkout_latest()

    def test_moves_between_revisions(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        write_file(temp_tree, 'README.md', '# Renamed\n')
        repo.commit('rename')

        assert repo.checkout(0) is True
        assert repo.head == 0
        assert repo.checkout_files['README.md'] == '# Test Project\n'

        assert repo.checkout(0) is False

        assert repo.checkout_latest() is True
        assert repo.head == 1
        assert repo.checkout_files['README.md'] == '# Renamed\n'

    def test_out_of_range(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        with pytest.raises(RevisionError):
            repo.checkout(5)
        assert repo.head == 0

    def test_latest_on_empty_log(self, temp_dir):
        repo = Repository('empty', temp_dir)
        assert repo.checkout_latest() is False
        assert repo.checkout_files == {}


class TestPersistence:
    # Tests for save(), open() and delete()

    def test_save_and_open(self, temp_tree):
        repo = Repository.create('demo', temp_tree)
        write_file(temp_tree, 'a.txt', 'a\n')
        repo.commit('second')
        repo.save()

        loaded = Repository.open(temp_tree)

        assert loaded == repo
        assert loaded.head == 1

    def test_open_from_subdirectory(self, temp_repo):
        loaded = Repository.open(os.path.join(temp_repo, 'src', 'lib'))
        assert loaded.path == temp_repo
        assert loaded.name == 'test'

    def test_open_outside_repository(self, temp_dir):
        with pytest.raises(NotARepositoryError):
            Repository.open(temp_dir)

    def test_open_with_unparsable_state(self, temp_repo):
        with open(state_utils.get_state_path(temp_repo), 'w') as f:
            f.write('{ not json')

        loaded = Repository.open(temp_repo)

        assert loaded.name == os.path.basename(temp_repo)
        assert loaded.commits == []
        assert loaded.checkout_files == {}
        assert loaded.head is None

    def test_open_with_malformed_state(self, temp_repo):
        state_utils.write_state(temp_repo, {'name': 'x'})

        loaded = Repository.open(temp_repo)

        assert loaded.commits == []

    def test_open_with_missing_state(self, temp_repo):
        os.remove(state_utils.get_state_path(temp_repo))
        assert Repository.open(temp_repo).commits == []

    def test_open_rebuilds_checkout_from_log(self, temp_repo):
        # A hand-edited checkout in the state file is replaced by a replay of the log
        data = state_utils.read_state(temp_repo)
        data['checkout'] = {'README.md': 'tampered\n', 'ghost.txt': 'boo\n'}
        state_utils.write_state(temp_repo, data)

        loaded = Repository.open(temp_repo)

        assert loaded.checkout_files == replay(loaded.commits, loaded.head)
        assert 'ghost.txt' not in loaded.checkout_files
        assert loaded.checkout_files['README.md'] != 'tampered\n'

    def test_open_with_head_outside_log(self, temp_repo):
        data = state_utils.read_state(temp_repo)
        data['head'] = 5
        state_utils.write_state(temp_repo, data)

        with pytest.raises(RevisionError):
            Repository.open(temp_repo)

    def test_delete_keeps_working_tree(self, temp_repo):
        repo = Repository.open(temp_repo)

        repo.delete()

        assert not os.path.exists(os.path.join(temp_repo, '.rvc'))
        assert os.path.exists(os.path.join(temp_repo, 'README.md'))
        assert repository.find_repo_root(temp_repo) is None

    def test_delete_twice(self, temp_repo):
        repo = Repository.open(temp_repo)
        repo.delete()
        with pytest.raises(NotARepositoryError):
            repo.delete()


class TestSummary:
    # Tests for Repository.summary() and str()

    def test_summary(self, temp_repo):
        repo = Repository.open(temp_repo)

        assert repo.summary() == {
            'name': 'test',
            'path': temp_repo,
            'commits': 1,
            'head': 0,
            'files': 3,
        }

    def test_str(self, temp_repo):
        repo = Repository.open(temp_repo)
        assert str(repo) == f"Name: test\nPath: {temp_repo}\nCommits: 1"
