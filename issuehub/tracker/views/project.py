# ============================================
# tracker/views/project.py
# ============================================
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from drf_spectacular.types import OpenApiTypes
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import caller_from_request
from tracker.serializers.project import (
    DeleteResultSerializer,
    ProjectCreateSerializer,
    ProjectMemberSerializer,
    ProjectOutputSerializer,
    ProjectSearchSerializer,
    ProjectUpdateSerializer
)
from tracker.services.project import ProjectService
from tracker.updates import ProjectUpdateSet


class ProjectListCreateAPIView(APIView):
    """
    GET: List all projects the caller hosts or belongs to
    POST: Create a new project hosted by the caller

    Request body (POST):
    - title: string (required, non-blank)
    - description: string (optional)
    """

    @extend_schema(tags=["Projects"], summary="My projects", responses={200: ProjectOutputSerializer(many=True)})
    def get(self, request):
        projects = ProjectService.list_my_projects(user=caller_from_request(request))

        serializer = ProjectOutputSerializer(projects, many=True)
        return Response(serializer.data)

    @extend_schema(
        tags=["Projects"],
        summary="Create project",
        request=ProjectCreateSerializer,
        responses={201: ProjectOutputSerializer},
    )
    def post(self, request):
        serializer = ProjectCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.create_project(
            user=caller_from_request(request),
            **serializer.validated_data
        )

        output_serializer = ProjectOutputSerializer(project)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


class ProjectSearchAPIView(APIView):
    """
    GET: Search accessible projects by title or description

    Query params:
    - keyword: string (optional, case-insensitive substring)
    """

    @extend_schema(
        tags=["Projects"],
        summary="Search projects",
        parameters=[OpenApiParameter("keyword", OpenApiTypes.STR, OpenApiParameter.QUERY, required=False)],
        responses={200: ProjectOutputSerializer(many=True)},
    )
    def get(self, request):
        params = ProjectSearchSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        projects = ProjectService.search_projects(
            keyword=params.validated_data['keyword'],
            user=caller_from_request(request)
        )

        serializer = ProjectOutputSerializer(projects, many=True)
        return Response(serializer.data)


class ProjectDetailAPIView(APIView):
    """
    GET: Retrieve project details
    PATCH: Update title and/or description (host only)
    DELETE: Delete project (host only)

    Path params:
    - project_id: UUID
    """

    @extend_schema(tags=["Projects"], summary="Get project", responses={200: ProjectOutputSerializer})
    def get(self, request, project_id):
        project = ProjectService.get_project(
            project_id=project_id,
            user=caller_from_request(request)
        )
        return Response(ProjectOutputSerializer(project).data)

    @extend_schema(
        tags=["Projects"],
        summary="Update project",
        request=ProjectUpdateSerializer,
        responses={200: ProjectOutputSerializer},
    )
    def patch(self, request, project_id):
        serializer = ProjectUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.update_project(
            project_id=project_id,
            changes=ProjectUpdateSet.from_data(serializer.validated_data),
            user=caller_from_request(request)
        )
        return Response(ProjectOutputSerializer(project).data)

    @extend_schema(tags=["Projects"], summary="Delete project", responses={200: DeleteResultSerializer})
    def delete(self, request, project_id):
        deleted = ProjectService.delete_project(
            project_id=project_id,
            user=caller_from_request(request)
        )
        return Response({'deleted': deleted})


class ProjectMemberAddAPIView(APIView):
    """
    POST: Add a member (host only)

    Request body:
    - user_id: UUID
    """

    @extend_schema(
        tags=["Projects"],
        summary="Add project member",
        request=ProjectMemberSerializer,
        responses={200: ProjectOutputSerializer, 409: OpenApiResponse(description="Already a member")},
    )
    def post(self, request, project_id):
        serializer = ProjectMemberSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = ProjectService.add_project_member(
            project_id=project_id,
            member_id=serializer.validated_data['user_id'],
            user=caller_from_request(request)
        )
        return Response(ProjectOutputSerializer(project).data)


class ProjectMemberRemoveAPIView(APIView):

    @extend_schema(
        tags=["Projects"],
        summary="Remove project member",
        responses={200: ProjectOutputSerializer, 409: OpenApiResponse(description="Not a member")},
    )
    def delete(self, request, project_id, user_id):
        project = ProjectService.remove_project_member(
            project_id=project_id,
            member_id=user_id,
            user=caller_from_request(request)
        )
        return Response(ProjectOutputSerializer(project).data)
