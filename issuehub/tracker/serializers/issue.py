# ============================================
# tracker/serializers/issue.py
# ============================================
from rest_framework import serializers

from accounts.serializers import UserOutputSerializer
from tracker.models import Issue
from tracker.serializers.project import ProjectOutputSerializer


class IssueCreateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False
    )
    priority = serializers.ChoiceField(choices=Issue.Priority.choices)


class IssueUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    status = serializers.ChoiceField(choices=Issue.Status.choices, required=False)
    priority = serializers.ChoiceField(choices=Issue.Priority.choices, required=False)


class IssueAssignSerializer(serializers.Serializer):
    # Strings, so malformed ids surface as InvalidId
    user_ids = serializers.ListField(child=serializers.CharField(), allow_empty=True)


class IssueOutputSerializer(serializers.ModelSerializer):
    reporter = serializers.SerializerMethodField()
    assignees = serializers.SerializerMethodField()
    project = serializers.SerializerMethodField()

    class Meta:
        model = Issue
        fields = [
            'id', 'title', 'description', 'status', 'priority',
            'reporter', 'assignees', 'project', 'created_at'
        ]

    def get_reporter(self, obj):
        reporter = getattr(obj, 'reporter', None)
        return UserOutputSerializer(reporter).data if reporter else None

    def get_assignees(self, obj):
        return UserOutputSerializer(getattr(obj, 'assignees', []), many=True).data

    def get_project(self, obj):
        project = getattr(obj, 'project', None)
        return ProjectOutputSerializer(project).data if project else None
