# ============================================
# tracker/views/issue.py
# ============================================
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from tracker.serializers.issue import (
    IssueAssignSerializer,
    IssueCreateSerializer,
    IssueOutputSerializer,
    IssueUpdateSerializer
)
from tracker.serializers.project import DeleteResultSerializer
from tracker.services.issue import IssueService
from tracker.updates import IssueUpdateSet


class ProjectIssueListCreateAPIView(APIView):
    """
    GET: List issues of a project
    POST: File a new issue in a project

    Path params:
    - project_id: UUID

    Request body (POST):
    - title: string (required, non-blank)
    - description: string (optional)
    - priority: string (required: LOW/MEDIUM/HIGH/CRITICAL)
    """

    @extend_schema(tags=["Issues"], summary="Project issues", responses={200: IssueOutputSerializer(many=True)})
    def get(self, request, project_id):
        issues = IssueService.list_issues(
            project_id=project_id,
            user=caller_from_request(request)
        )

        serializer = IssueOutputSerializer(issues, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Issues"],
        summary="Create issue",
        request=IssueCreateSerializer,
        responses={201: IssueOutputSerializer},
    )
    def post(self, request, project_id):
        serializer = IssueCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.create_issue(
            project_id=project_id,
            user=caller_from_request(request),
            **serializer.validated_data
        )

        output_serializer = IssueOutputSerializer(issue)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class IssueDetailAPIView(APIView):
    """
    GET: Retrieve issue details
    PATCH: Update title, description, status and/or priority
    DELETE: Delete issue

    Path params:
    - issue_id: UUID
    """

    @extend_schema(tags=["Issues"], summary="Get issue", responses={200: IssueOutputSerializer})
    def get(self, request, issue_id):
        issue = IssueService.get_issue(
            issue_id=issue_id,
            user=caller_from_request(request)
        )
        return Response(IssueOutputSerializer(issue).data)

    @extend_schema(
        tags=["Issues"],
        summary="Update issue",
        request=IssueUpdateSerializer,
        responses={200: IssueOutputSerializer, 400: OpenApiResponse(description="No fields to update")},
    )
    def patch(self, request, issue_id):
        serializer = IssueUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.update_issue(
            issue_id=issue_id,
            changes=IssueUpdateSet.from_data(serializer.validated_data),
            user=caller_from_request(request)
        )
        return Response(IssueOutputSerializer(issue).data)

    @extend_schema(tags=["Issues"], summary="Delete issue", responses={200: DeleteResultSerializer})
    def delete(self, request, issue_id):
        deleted = IssueService.delete_issue(
            issue_id=issue_id,
            user=caller_from_request(request)
        )
        return Response({'deleted': deleted})


class IssueAssigneeAddAPIView(APIView):
    """
    POST: Assign users to an issue

    Request body:
    - user_ids: list of UUID (non host/member ids are ignored)
    """

    @extend_schema(
        tags=["Issues"],
        summary="Assign users",
        request=IssueAssignSerializer,
        responses={200: IssueOutputSerializer},
    )
    def post(self, request, issue_id):
        serializer = IssueAssignSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        issue = IssueService.assign_users_to_issue(
            issue_id=issue_id,
            user_ids=serializer.validated_data['user_ids'],
            user=caller_from_request(request)
        )
        return Response(IssueOutputSerializer(issue).data)


class IssueAssigneeRemoveAPIView(APIView):

    @extend_schema(
        tags=["Issues"],
        summary="Unassign user",
        responses={200: IssueOutputSerializer, 404: OpenApiResponse(description="Not in assignees")},
    )
    def delete(self, request, issue_id, user_id):
        issue = IssueService.remove_user_from_issue(
            issue_id=issue_id,
            assignee_id=user_id,
            user=caller_from_request(request)
        )
        return Response(IssueOutputSerializer(issue).data)
