# ============================================
# tracker/services/issue.py
# ============================================
"""
Issue operations.

Any host or member of an issue's project may read, file, edit, delete and
(un)assign. Access is always decided against the issue's resolved project.
Assignee changes read ``assignee_ids``, edit the list in memory and save it
back, so concurrent changes on one issue race (last save wins).
"""
import logging
from typing import Iterable, List, Optional

from accounts.selectors import UserSelector
from issuehub.exceptions import Invalid, NotFound, handle_operation_errors
from tracker.models import Issue
from tracker.policies import check_project_access, require_authenticated
from tracker.selectors.issue import IssueSelector
from tracker.selectors.project import ProjectSelector
from tracker.updates import IssueUpdateSet
from tracker.validators import (
    clean_choice,
    clean_description,
    clean_title,
    validate_id,
    validate_ids
)

logger = logging.getLogger(__name__)


class IssueService:

    @staticmethod
    def _get_resolved_or_404(issue_id) -> Issue:
        issue = IssueSelector.get_resolved_issue(issue_id)
        if issue is None:
            raise NotFound("Issue not found")
        return issue

    @staticmethod
    @handle_operation_errors
    def list_issues(*, project_id, user) -> List[Issue]:
        """All issues of a project the caller can access"""
        project_id = validate_id(project_id)
        require_authenticated(user)

        project = ProjectSelector.get_resolved_project(project_id)
        if project is None:
            raise NotFound("Project not found")
        check_project_access(project, user, "Not authorized to access these issues")

        issues = list(IssueSelector.get_issues_by_project(project.id))
        return IssueSelector.resolve_issues(issues)

    @staticmethod
    @handle_operation_errors
    def get_issue(*, issue_id, user) -> Issue:
        issue_id = validate_id(issue_id)
        require_authenticated(user)

        issue = IssueService._get_resolved_or_404(issue_id)
        check_project_access(issue.project, user, "Not authorized to access this issue")

        return issue

    @staticmethod
    @handle_operation_errors
    def create_issue(
        *,
        project_id,
        title: str,
        priority: str,
        description: Optional[str] = None,
        user
    ) -> Issue:
        """Create a new issue reported by the caller"""
        project_id = validate_id(project_id)
        require_authenticated(user)

        project = ProjectSelector.get_resolved_project(project_id)
        if project is None:
            raise NotFound("Project not found")
        check_project_access(project, user, "Not authorized to create an issue for this project")

        issue = Issue.objects.create(
            project_id=project.id,
            title=clean_title(title, "Issue"),
            description=clean_description(description),
            priority=clean_choice(priority, Issue.Priority, "priority"),
            status=Issue.Status.OPEN,
            reporter_id=user.id,
            assignee_ids=[]
        )
        logger.info("[issue] created issue=%s project=%s reporter=%s", issue.id, project.id, user.id)

        return IssueService._get_resolved_or_404(issue.id)

    @staticmethod
    @handle_operation_errors
    def update_issue(*, issue_id, changes: IssueUpdateSet, user) -> Issue:
        """Update the provided fields of an issue"""
        issue_id = validate_id(issue_id)
        if not changes:
            raise Invalid("No fields to update")
        require_authenticated(user)

        issue = IssueService._get_resolved_or_404(issue_id)
        check_project_access(issue.project, user, "Not authorized to update this issue")

        update_fields = []
        if 'title' in changes:
            issue.title = clean_title(changes['title'], "Issue")
            update_fields.append('title')
        if 'description' in changes:
            issue.description = clean_description(changes['description'])
            update_fields.append('description')
        if 'status' in changes:
            issue.status = clean_choice(changes['status'], Issue.Status, "status")
            update_fields.append('status')
        if 'priority' in changes:
            issue.priority = clean_choice(changes['priority'], Issue.Priority, "priority")
            update_fields.append('priority')

        issue.save(update_fields=update_fields)
        logger.info("[issue] updated issue=%s fields=%s", issue.id, update_fields)

        return IssueService._get_resolved_or_404(issue.id)

    @staticmethod
    @handle_operation_errors
    def delete_issue(*, issue_id, user) -> bool:
        issue_id = validate_id(issue_id)
        require_authenticated(user)

        issue = IssueService._get_resolved_or_404(issue_id)
        check_project_access(issue.project, user, "Not authorized to delete this issue")

        deleted, _ = Issue.objects.filter(id=issue.id).delete()
        logger.info("[issue] deleted issue=%s by=%s", issue.id, user.id)

        return deleted > 0

    @staticmethod
    @handle_operation_errors
    def assign_users_to_issue(*, issue_id, user_ids: Iterable, user) -> Issue:
        """
        Assign users to an issue.

        Candidates who are neither host nor member of the project, unknown ids
        and users already assigned are skipped without error.
        """
        issue_id = validate_id(issue_id)
        candidate_ids = validate_ids(user_ids, "user ID")
        require_authenticated(user)

        issue = IssueService._get_resolved_or_404(issue_id)
        project = issue.project
        check_project_access(project, user, "Not authorized to assign users to this issue")

        candidates = UserSelector.get_users_by_ids(candidate_ids)

        assignee_ids = list(issue.assignee_ids)
        for candidate_id in candidate_ids:
            candidate = candidates.get(str(candidate_id))
            if candidate is None:
                continue
            if not (str(candidate.id) == str(project.host_id) or project.has_member_id(candidate.id)):
                continue
            if str(candidate.id) in {str(uid) for uid in assignee_ids}:
                continue
            assignee_ids.append(str(candidate.id))

        issue.assignee_ids = assignee_ids
        issue.save(update_fields=['assignee_ids'])
        logger.info("[issue] assignees issue=%s now=%s", issue.id, len(assignee_ids))

        return IssueService._get_resolved_or_404(issue.id)

    @staticmethod
    @handle_operation_errors
    def remove_user_from_issue(*, issue_id, assignee_id, user) -> Issue:
        issue_id = validate_id(issue_id)
        assignee_id = validate_id(assignee_id, "user ID")
        require_authenticated(user)

        issue = IssueService._get_resolved_or_404(issue_id)
        check_project_access(issue.project, user, "Not authorized to access this issue")

        if not issue.has_assignee_id(assignee_id):
            raise NotFound("User not found in assignees")

        issue.assignee_ids = [
            uid for uid in issue.assignee_ids
            if str(uid) != str(assignee_id)
        ]
        issue.save(update_fields=['assignee_ids'])
        logger.info("[issue] unassigned user=%s issue=%s", assignee_id, issue.id)

        return IssueService._get_resolved_or_404(issue.id)
