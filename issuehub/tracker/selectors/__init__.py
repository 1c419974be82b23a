from .project import ProjectSelector
from .issue import IssueSelector

__all__ = [
    'ProjectSelector',
    'IssueSelector',
]
