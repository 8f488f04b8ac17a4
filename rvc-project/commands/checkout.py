# The command: rvc checkout <index> | latest
# What it does: Moves the repository's checkout cache to another revision
# How it does: Replays the commit log from the first commit up to and including <index>; the resulting mapping replaces the cache. The repository is only saved when the cache actually moved. The working tree files are not touched
# What data structure it uses: List (the commit log being folded), Dictionary (the rebuilt checkout)

import sys
from utils import repository
from utils.errors import RvcError


def run(args):
    try:
        repo = repository.Repository.open()

        if args.revision == 'latest':
            changed = repo.checkout_latest()
        else:
            try:
                index = int(args.revision)
            except ValueError:
                print(f"fatal: invalid revision '{args.revision}'", file=sys.stderr)
                sys.exit(1)
            changed = repo.checkout(index)

        if changed:
            repo.save()
    except (RvcError, OSError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(1)

    if not changed:
        print(f"Already at revision {repo.head}")
        return
    print(f"Checked out revision {repo.head} ({len(repo.checkout_files)} file(s))")
