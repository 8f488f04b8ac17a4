# The command: rvc show <index>
# What it does: Shows what one commit changed: the files it created and deleted, and a unified diff for every modified file
# How it does: Replays the log up to the commit before <index>, applies <index> on top of it and diffs the two versions of every modified file
# What data structure it uses: Dictionary (the checkouts before and after the commit), List (of diff lines)

import sys
from utils import diff as diff_utils, repository
from utils.errors import RevisionError, RvcError
from utils.replay import apply_commit, replay
from commands.log import format_timestamp


def run(args):
    try:
        repo = repository.Repository.open()
        index = args.index
        if not 0 <= index < len(repo.commits):
            raise RevisionError(f"no revision {index} (the log has {len(repo.commits)} commit(s))")
        before = replay(repo.commits, index - 1) if index > 0 else {}
        commit = repo.commits[index]
        after = apply_commit(before, commit)
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"revision {index}")
    print(f"Date: {format_timestamp(commit.timestamp)}")
    print()
    print(f"    {commit.name}")
    print()

    for path in sorted(commit.created):
        print(f"created: {path}")
    for path in sorted(commit.deleted):
        print(f"deleted: {path}")

    for filemod in sorted(commit.filemods, key=lambda m: m.path):
        diff_lines = diff_utils.get_diff_lines(before[filemod.path], after[filemod.path], 'a/' + filemod.path, 'b/' + filemod.path)
        sys.stdout.writelines(diff_lines)
