# The command: rvc status
# What it does: Shows a summary of the repository (name, path, revision) and the changes a commit would record right now
# How it does: It runs the Diff Engine against the checkout cache without appending the result, so nothing is mutated or saved
# What data structure it uses: Dictionary (the summary and the pending created files), Set / List (pending deletions and modifications)

import sys
from utils import commits, config as config_utils, repository
from utils.errors import RvcError


def run(args): # Prints the summary and the pending changes
    try:
        repo = repository.Repository.open()
        summary = repo.summary()
        pending = commits.build_commit(
            '',
            repo.path,
            repo.checkout_files,
            max_depth=config_utils.get_max_depth(repo.path),
            encoding=config_utils.get_encoding(repo.path),
            allow_empty=True,
        )
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Repository {summary['name']} ({summary['path']})")
    if summary['head'] is None:
        print("No commits yet")
    else:
        print(f"At revision {summary['head']} of {summary['commits'] - 1}, {summary['files']} tracked file(s)")

    if pending.is_empty():
        print("\nnothing to commit, working tree clean")
        return

    print("\nChanges not committed:")
    _print_status({
        'new file': sorted(pending.created),
        'modified': sorted(filemod.path for filemod in pending.filemods),
        'deleted': sorted(pending.deleted),
    })


def _print_status(changes):
    for change_type, paths in changes.items():
        for path in paths:
            print(f"\t{change_type}:   {path}")
