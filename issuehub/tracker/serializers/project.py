# ============================================
# tracker/serializers/project.py
# ============================================
from rest_framework import serializers

from accounts.serializers import UserOutputSerializer
from tracker.models import Project


class ProjectCreateSerializer(serializers.Serializer):
    # Blank titles are rejected by the service, which trims first
    title = serializers.CharField(max_length=255, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False
    )


class ProjectUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class ProjectMemberSerializer(serializers.Serializer):
    # Kept as a string so malformed ids surface as InvalidId
    user_id = serializers.CharField()


class ProjectSearchSerializer(serializers.Serializer):
    keyword = serializers.CharField(required=False, allow_blank=True, default='', trim_whitespace=False)


class ProjectOutputSerializer(serializers.ModelSerializer):
    host = serializers.SerializerMethodField()
    members = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = [
            'id', 'title', 'description',
            'host', 'members', 'created_at'
        ]

    def get_host(self, obj):
        host = getattr(obj, 'host', None)
        return UserOutputSerializer(host).data if host else None

    def get_members(self, obj):
        return UserOutputSerializer(getattr(obj, 'members', []), many=True).data


class DeleteResultSerializer(serializers.Serializer):
    deleted = serializers.BooleanField()
