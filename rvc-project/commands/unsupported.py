# The commands: rvc branch | push | pull | revise | unlock
# What it does: Placeholders for operations rvc does not implement yet. They always fail, with their own exit status, so that scripts can tell them apart from real errors

import sys
from utils.errors import NotSupportedError

EXIT_NOT_SUPPORTED = 2

COMMANDS = {
    'branch': "Check out a new branch (not supported yet).",
    'push': "Push commits to a remote (not supported yet).",
    'pull': "Pull commits from a remote (not supported yet).",
    'revise': "Revise a commit (not supported yet).",
    'unlock': "Unlock the repository (not supported yet).",
}


def run(args):
    error = NotSupportedError(args.command)
    print(f"fatal: {error}", file=sys.stderr)
    sys.exit(EXIT_NOT_SUPPORTED)
