# ============================================
# tracker/selectors/project.py
# ============================================
from typing import List, Optional

from django.db.models import Q, QuerySet

from accounts.selectors import UserSelector
from tracker.models import Project


class ProjectSelector:

    @staticmethod
    def get_project_by_id(project_id) -> Optional[Project]:
        """Get single project by ID (relations not resolved)"""
        return Project.objects.filter(id=project_id).first()

    @staticmethod
    def get_projects_by_user(user_id, keyword: Optional[str] = None) -> QuerySet:
        """Get all projects where user is host or member, optionally filtered by keyword"""
        # member_ids is a JSON array of UUID strings; a UUID cannot be a
        # substring of another one, so icontains on the array is exact.
        queryset = Project.objects.filter(
            Q(host_id=user_id) | Q(member_ids__icontains=str(user_id))
        )

        if keyword:
            queryset = queryset.filter(
                Q(title__icontains=keyword) |
                Q(description__icontains=keyword)
            )

        return queryset.order_by('-created_at')

    @staticmethod
    def resolve_projects(projects: List[Project]) -> List[Project]:
        """Fetch and attach host and members to projects"""
        user_ids = set()

        for project in projects:
            user_ids.add(str(project.host_id))
            user_ids.update(str(uid) for uid in project.member_ids)

        users_dict = UserSelector.get_users_by_ids(user_ids)

        for project in projects:
            project.host = users_dict.get(str(project.host_id))
            project.members = [
                users_dict[str(uid)]
                for uid in project.member_ids
                if str(uid) in users_dict
            ]

        return projects

    @classmethod
    def get_resolved_project(cls, project_id) -> Optional[Project]:
        project = cls.get_project_by_id(project_id)
        if project is None:
            return None
        return cls.resolve_projects([project])[0]
