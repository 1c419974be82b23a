# ============================================
# accounts/services.py
# ============================================
import logging
from typing import Optional, Tuple

from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from accounts.models import User
from accounts.selectors import UserSelector
from accounts.tokens import sign_token
from issuehub.exceptions import Conflict, Invalid, Unauthenticated, handle_operation_errors
from tracker.policies import require_authenticated

logger = logging.getLogger(__name__)


class AccountService:

    @staticmethod
    def _clean_email(email: Optional[str]) -> str:
        email = (email or '').strip().lower()
        try:
            validate_email(email)
        except ValidationError:
            raise Invalid("Invalid email format")
        return email

    @staticmethod
    @handle_operation_errors
    def signup(
        *,
        first_name: str,
        last_name: str,
        email: str,
        password: str
    ) -> Tuple[str, User]:
        """Create an account and return (token, user)"""

        first_name = (first_name or '').strip()
        last_name = (last_name or '').strip()
        if not first_name or not last_name:
            raise Invalid("First and last name are required")
        if not password:
            raise Invalid("Password is required")

        email = AccountService._clean_email(email)

        if UserSelector.get_user_by_email(email):
            raise Conflict("this email is being used on an existing account.")

        # Unique email is the final guard against a concurrent signup
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    email=email,
                    password=password,
                    first_name=first_name,
                    last_name=last_name
                )
        except IntegrityError:
            raise Conflict("this email is being used on an existing account.")
        logger.info("[accounts] signup user=%s", user.id)

        return sign_token(user), user

    @staticmethod
    @handle_operation_errors
    def login(*, email: str, password: str) -> Tuple[str, User]:
        """Verify credentials and return (token, user)"""

        user = UserSelector.get_user_by_email(email or '')

        # Same message for unknown email and wrong password
        if user is None or not user.check_password(password or ''):
            raise Unauthenticated("Invalid email or password")

        return sign_token(user), user

    @staticmethod
    @handle_operation_errors
    def me(*, user) -> User:
        require_authenticated(user)

        current = UserSelector.get_user_by_id(user.id)
        if current is None:
            raise Unauthenticated("Not authenticated")
        return current
