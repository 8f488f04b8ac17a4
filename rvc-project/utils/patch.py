# What it does: Holds the per-file edit script (FileMod, a list of FileChange) and applies it to reconstruct a file (the Patch Applier)
# How it does: A FileMod is built by walking a line alignment once. Applying it sorts the changes by descending line number, so an edit at a high line never shifts the line numbers of the edits still to be applied below it
# What data structure it uses: List (of lines, mutated in place by insertions and removals), Dataclasses (for the change records)

from dataclasses import dataclass, field
from typing import Optional

from .diff import BOTH, OLD, NEW, align_lines, split_lines, join_lines
from .errors import CorruptLogError

ADDED = 'added'
DELETED = 'deleted'


@dataclass(frozen=True)
class FileChange:
    line: int  # 1-based, numbered against the original content
    kind: str  # ADDED or DELETED
    text: Optional[str] = None  # only set for ADDED

    @classmethod
    def added(cls, line, text):
        return cls(line, ADDED, text)

    @classmethod
    def deleted(cls, line):
        return cls(line, DELETED)

    @property
    def is_added(self):
        return self.kind == ADDED

    def to_dict(self):
        data = {'line': self.line, 'change': self.kind}
        if self.is_added:
            data['text'] = self.text
        return data

    @classmethod
    def from_dict(cls, data):
        if data['change'] == ADDED:
            return cls.added(int(data['line']), data['text'])
        if data['change'] == DELETED:
            return cls.deleted(int(data['line']))
        raise ValueError(f"unknown change kind: {data['change']!r}")

    def __str__(self):
        if self.is_added:
            return f"{self.line} [+] {self.text}"
        return f"{self.line} [-] ---"


@dataclass
class FileMod:
    path: str
    changes: list = field(default_factory=list)

    @classmethod
    def from_alignment(cls, path, alignment):
        """
        Converts a line alignment (see diff.align_lines) into a FileMod.

        The counter walks the original content: kept and removed lines
        advance it. Removed lines are recorded at their own number, added
        lines at the number of the original line they are inserted in front
        of, which is the counter value where the current run of changes began.
        """
        changes = []
        line = 1
        anchor = None
        for classification, text in alignment:
            if classification == BOTH:
                anchor = None
                line += 1
                continue
            if anchor is None:
                anchor = line
            if classification == OLD:
                changes.append(FileChange.deleted(line))
                line += 1
            elif classification == NEW:
                changes.append(FileChange.added(anchor, text))
        return cls(path, changes)

    @classmethod
    def from_contents(cls, path, old_content, new_content):
        return cls.from_alignment(path, align_lines(old_content, new_content))

    def is_empty(self):
        return len(self.changes) == 0

    def apply(self, content):
        """Returns content with this edit script applied."""
        lines = split_lines(content)

        # Descending by line; on a shared line, insertions go first and keep their order
        ordered = sorted(
            enumerate(self.changes),
            key=lambda pair: (-pair[1].line, 0 if pair[1].is_added else 1, pair[0])
        )

        current_line = None
        offset = 0
        for _, change in ordered:
            if change.line != current_line:
                current_line = change.line
                offset = 0
            position = change.line - 1 + offset
            if change.is_added:
                if not 0 <= position <= len(lines):
                    raise CorruptLogError(f"cannot insert at line {change.line} of '{self.path}' ({len(lines)} lines)")
                lines.insert(position, change.text)
                offset += 1
            else:
                if not 0 <= position < len(lines):
                    raise CorruptLogError(f"cannot delete line {change.line} of '{self.path}' ({len(lines)} lines)")
                del lines[position]
                offset -= 1

        return join_lines(lines)

    def to_dict(self):
        return {'path': self.path, 'changes': [change.to_dict() for change in self.changes]}

    @classmethod
    def from_dict(cls, data):
        return cls(data['path'], [FileChange.from_dict(change) for change in data['changes']])
