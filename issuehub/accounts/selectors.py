# ============================================
# accounts/selectors.py
# ============================================
from typing import Dict, Iterable, Optional

from accounts.models import User


class UserSelector:

    @staticmethod
    def get_user_by_id(user_id) -> Optional[User]:
        """Get single user by ID"""
        return User.objects.filter(id=user_id).first()

    @staticmethod
    def get_user_by_email(email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        return User.objects.filter(email__iexact=email.strip()).first()

    @staticmethod
    def get_users_by_ids(user_ids: Iterable) -> Dict[str, User]:
        """
        Batch get users by IDs
        Returns dict: {user_id: user}
        """
        ids = {str(uid) for uid in user_ids if uid}
        if not ids:
            return {}

        return {str(user.id): user for user in User.objects.filter(id__in=ids)}
