# What it does: Provides helper functions for comparing two snapshots of the tree and for aligning two texts line by line (the Line Differ)
# How it does: Path classification is plain set arithmetic. Line alignment runs difflib.SequenceMatcher over the two line lists and flattens its opcodes into one entry per line
# What data structure it uses: Set (for O(N) path comparisons), List (of lines fed to the diffing algorithm, and of aligned lines coming out of it)
import difflib

# Line classifications produced by align_lines
BOTH = 'both'
OLD = 'old'  # only in the old text
NEW = 'new'  # only in the new text


def split_lines(content): # Splits text on '\n'; a trailing terminator does not produce an empty last line
    if not content:
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def join_lines(lines): # Inverse of split_lines; non-empty output always ends with '\n'
    if not lines:
        return ''
    return '\n'.join(lines) + '\n'


def compare_states(prior_paths, current_paths): # Classifies paths into added, deleted and possibly modified

    prior = set(prior_paths)
    current = set(current_paths)

    added = sorted(current - prior)
    deleted = sorted(prior - current)
    common = sorted(prior & current)

    return {'added': added, 'deleted': deleted, 'common': common}


def align_lines(old_content, new_content):
    """
    Aligns two texts and returns a list of (classification, line) pairs,
    where classification is BOTH, OLD or NEW. Replaced blocks list their
    old lines before their new lines.
    """
    old_lines = split_lines(old_content)
    new_lines = split_lines(new_content)

    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)

    alignment = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == 'equal':
            alignment.extend((BOTH, line) for line in old_lines[i1:i2])
            continue
        if tag in ('delete', 'replace'):
            alignment.extend((OLD, line) for line in old_lines[i1:i2])
        if tag in ('insert', 'replace'):
            alignment.extend((NEW, line) for line in new_lines[j1:j2])
    return alignment


def get_diff_lines(content1, content2, from_file, to_file): # Generates unified diff lines between two contents, for display
    diff = difflib.unified_diff(
        split_lines(content1),
        split_lines(content2),
        fromfile=from_file,
        tofile=to_file,
        lineterm=''
    )
    return [line + '\n' for line in diff]
