# ============================================
# tracker/services/project.py
# ============================================
"""
Project operations.

Each operation receives the caller explicitly (``user``, None when the request
is anonymous) and runs: validate input -> authenticate -> fetch -> existence
-> access -> business rules -> single write -> freshly resolved result.

Membership changes read ``member_ids``, edit the list in memory and save it
back. Two concurrent changes on the same project race and the last save wins.
"""
import logging
from typing import List, Optional

from accounts.selectors import UserSelector
from issuehub.exceptions import Conflict, NotFound, handle_operation_errors
from tracker.models import Project
from tracker.policies import check_host_access, check_project_access, require_authenticated
from tracker.selectors.project import ProjectSelector
from tracker.updates import ProjectUpdateSet
from tracker.validators import clean_description, clean_title, validate_id

logger = logging.getLogger(__name__)


class ProjectService:

    @staticmethod
    def _get_resolved_or_404(project_id) -> Project:
        project = ProjectSelector.get_resolved_project(project_id)
        if project is None:
            raise NotFound("Project not found")
        return project

    @staticmethod
    @handle_operation_errors
    def list_my_projects(*, user) -> List[Project]:
        """All projects the user hosts or is a member of"""
        require_authenticated(user)

        projects = list(ProjectSelector.get_projects_by_user(user.id))
        return ProjectSelector.resolve_projects(projects)

    @staticmethod
    @handle_operation_errors
    def get_project(*, project_id, user) -> Project:
        project_id = validate_id(project_id)
        require_authenticated(user)

        project = ProjectService._get_resolved_or_404(project_id)
        check_project_access(project, user)

        return project

    @staticmethod
    @handle_operation_errors
    def search_projects(*, keyword: Optional[str], user) -> List[Project]:
        """Accessible projects whose title or description contains keyword"""
        require_authenticated(user)

        projects = list(ProjectSelector.get_projects_by_user(user.id, keyword=keyword))
        return ProjectSelector.resolve_projects(projects)

    @staticmethod
    @handle_operation_errors
    def create_project(
        *,
        title: str,
        description: Optional[str] = None,
        user
    ) -> Project:
        """Create a new project hosted by the caller"""
        require_authenticated(user)

        project = Project.objects.create(
            title=clean_title(title, "Project"),
            description=clean_description(description),
            host_id=user.id,
            member_ids=[]
        )
        logger.info("[project] created project=%s host=%s", project.id, user.id)

        return ProjectSelector.resolve_projects([project])[0]

    @staticmethod
    @handle_operation_errors
    def add_project_member(*, project_id, member_id, user) -> Project:
        """Add member to project (host only)"""
        project_id = validate_id(project_id, "project ID")
        member_id = validate_id(member_id, "user ID")
        require_authenticated(user)

        project = ProjectService._get_resolved_or_404(project_id)
        check_host_access(project, user, "Not authorized to manage members of this project")

        new_member = UserSelector.get_user_by_id(member_id)
        if new_member is None:
            raise NotFound("User not found")

        if str(new_member.id) == str(project.host_id):
            raise Conflict("User is the host of this project")

        if project.has_member_id(new_member.id):
            raise Conflict("User is already a member of this project")

        project.member_ids = [*project.member_ids, str(new_member.id)]
        project.save(update_fields=['member_ids'])
        logger.info("[project] added member=%s project=%s", new_member.id, project.id)

        return ProjectService._get_resolved_or_404(project.id)

    @staticmethod
    @handle_operation_errors
    def remove_project_member(*, project_id, member_id, user) -> Project:
        """Remove member from project (host only). Issue assignees are left as they are."""
        project_id = validate_id(project_id, "project ID")
        member_id = validate_id(member_id, "user ID")
        require_authenticated(user)

        project = ProjectService._get_resolved_or_404(project_id)
        check_host_access(project, user, "Not authorized to manage members of this project")

        member = UserSelector.get_user_by_id(member_id)
        if member is None:
            raise NotFound("User not found")

        if not project.has_member_id(member.id):
            raise Conflict("User is not a member of this project")

        project.member_ids = [
            uid for uid in project.member_ids
            if str(uid) != str(member.id)
        ]
        project.save(update_fields=['member_ids'])
        logger.info("[project] removed member=%s project=%s", member.id, project.id)

        return ProjectService._get_resolved_or_404(project.id)

    @staticmethod
    @handle_operation_errors
    def update_project(*, project_id, changes: ProjectUpdateSet, user) -> Project:
        """Update title and/or description (host only)"""
        project_id = validate_id(project_id)
        require_authenticated(user)

        project = ProjectService._get_resolved_or_404(project_id)
        check_host_access(project, user, "Not authorized to update this project")

        update_fields = []
        if 'title' in changes:
            project.title = clean_title(changes['title'], "Project")
            update_fields.append('title')
        if 'description' in changes:
            project.description = clean_description(changes['description'])
            update_fields.append('description')

        if update_fields:
            project.save(update_fields=update_fields)
            logger.info("[project] updated project=%s fields=%s", project.id, update_fields)

        return ProjectService._get_resolved_or_404(project.id)

    @staticmethod
    @handle_operation_errors
    def delete_project(*, project_id, user) -> bool:
        """Delete project (host only). Its issues are not deleted."""
        project_id = validate_id(project_id)
        require_authenticated(user)

        project = ProjectService._get_resolved_or_404(project_id)
        check_host_access(project, user, "Not authorized to delete this project")

        deleted, _ = Project.objects.filter(id=project.id).delete()
        logger.info("[project] deleted project=%s by=%s", project.id, user.id)

        return deleted > 0
