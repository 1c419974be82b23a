# ============================================
# accounts/authentication.py
# ============================================
import logging
import uuid

from rest_framework.authentication import BaseAuthentication, get_authorization_header

from accounts.selectors import UserSelector
from accounts.tokens import decode_token

logger = logging.getLogger(__name__)


def caller_from_request(request):
    """The authenticated user bound to the request, or None."""
    user = getattr(request, 'user', None)
    if user is None or not user.is_authenticated:
        return None
    return user


class BearerTokenAuthentication(BaseAuthentication):
    """
    Resolve `Authorization: Bearer <token>` to a user.

    Never rejects the request: a missing or unusable token simply leaves the
    request anonymous, and each operation decides whether it needs a caller.
    """
    keyword = 'bearer'

    def authenticate(self, request):
        auth = get_authorization_header(request).split()
        if not auth or auth[0].lower() != self.keyword.encode():
            return None
        if len(auth) != 2:
            return None

        try:
            token = auth[1].decode()
        except UnicodeError:
            return None

        payload = decode_token(token)
        if not payload:
            logger.debug("[auth] rejected bearer token")
            return None

        try:
            user_id = uuid.UUID(str(payload.get('sub')))
        except ValueError:
            return None

        user = UserSelector.get_user_by_id(user_id)
        if user is None:
            return None
        return (user, token)

    def authenticate_header(self, request):
        return 'Bearer'
