from .project import ProjectService
from .issue import IssueService

__all__ = [
    'ProjectService',
    'IssueService',
]
