# ============================================
# tracker/selectors/issue.py
# ============================================
from typing import List, Optional

from django.db.models import QuerySet

from accounts.selectors import UserSelector
from tracker.models import Issue, Project
from tracker.selectors.project import ProjectSelector


class IssueSelector:

    @staticmethod
    def get_issue_by_id(issue_id) -> Optional[Issue]:
        """Get single issue by ID (relations not resolved)"""
        return Issue.objects.filter(id=issue_id).first()

    @staticmethod
    def get_issues_by_project(project_id) -> QuerySet:
        """Get all issues filed under a project"""
        return Issue.objects.filter(project_id=project_id).order_by('-created_at')

    @staticmethod
    def resolve_issues(issues: List[Issue]) -> List[Issue]:
        """Fetch and attach reporter, assignees and project (with host and members) to issues"""
        user_ids = set()
        project_ids = set()

        for issue in issues:
            user_ids.add(str(issue.reporter_id))
            user_ids.update(str(uid) for uid in issue.assignee_ids)
            project_ids.add(issue.project_id)

        users_dict = UserSelector.get_users_by_ids(user_ids)

        projects = list(Project.objects.filter(id__in=project_ids))
        ProjectSelector.resolve_projects(projects)
        projects_dict = {str(project.id): project for project in projects}

        for issue in issues:
            issue.reporter = users_dict.get(str(issue.reporter_id))
            issue.assignees = [
                users_dict[str(uid)]
                for uid in issue.assignee_ids
                if str(uid) in users_dict
            ]
            # None when the project was deleted after the issue was filed
            issue.project = projects_dict.get(str(issue.project_id))

        return issues

    @classmethod
    def get_resolved_issue(cls, issue_id) -> Optional[Issue]:
        issue = cls.get_issue_by_id(issue_id)
        if issue is None:
            return None
        return cls.resolve_issues([issue])[0]
