# ============================================
# tracker/urls.py
# ============================================
from django.urls import path
from tracker.views.project import (
    ProjectListCreateAPIView,
    ProjectSearchAPIView,
    ProjectDetailAPIView,
    ProjectMemberAddAPIView,
    ProjectMemberRemoveAPIView
)
from tracker.views.issue import (
    ProjectIssueListCreateAPIView,
    IssueDetailAPIView,
    IssueAssigneeAddAPIView,
    IssueAssigneeRemoveAPIView
)

app_name = 'tracker'

# Ids are captured as plain strings; malformed ones are rejected by the services
urlpatterns = [
    # Projects
    path('projects/', ProjectListCreateAPIView.as_view(), name='project-list-create'),
    path('projects/search/', ProjectSearchAPIView.as_view(), name='project-search'),
    path('projects/<str:project_id>/', ProjectDetailAPIView.as_view(), name='project-detail'),
    path('projects/<str:project_id>/members/', ProjectMemberAddAPIView.as_view(), name='project-member-add'),
    path('projects/<str:project_id>/members/<str:user_id>/', ProjectMemberRemoveAPIView.as_view(), name='project-member-remove'),

    # Issues
    path('projects/<str:project_id>/issues/', ProjectIssueListCreateAPIView.as_view(), name='issue-list-create'),
    path('issues/<str:issue_id>/', IssueDetailAPIView.as_view(), name='issue-detail'),
    path('issues/<str:issue_id>/assignees/', IssueAssigneeAddAPIView.as_view(), name='issue-assignee-add'),
    path('issues/<str:issue_id>/assignees/<str:user_id>/', IssueAssigneeRemoveAPIView.as_view(), name='issue-assignee-remove'),
]
