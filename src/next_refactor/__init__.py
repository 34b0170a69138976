"""
next-refactor - rank files by git change frequency

Walks a source tree, asks git how many commits touched each file on a branch
and reports the most frequently changed files as refactor candidates.
"""

__version__ = "0.1.0"

from .exceptions import NextRefactorError
from .models import FileChange, FilterSpec, RankedReport, ScanResult
from .ranking import rank
from .temporal import ChangeCountProvider, GitChangeCounter
from .walker import TreeWalker, walk

__all__ = [
    "TreeWalker",
    "walk",
    "rank",
    "GitChangeCounter",
    "ChangeCountProvider",
    "FileChange",
    "FilterSpec",
    "RankedReport",
    "ScanResult",
    "NextRefactorError",
]
