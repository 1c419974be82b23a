# ============================================
# tracker/models/project.py
# ============================================
import uuid

from django.db import models


class Project(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    host_id = models.UUIDField(db_index=True)
    member_ids = models.JSONField(default=list, blank=True)  # List of user IDs, host excluded
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'projects'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    def has_member_id(self, user_id) -> bool:
        return str(user_id) in {str(uid) for uid in self.member_ids}
