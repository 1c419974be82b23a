# ============================================
# tracker/policies.py
# ============================================
"""
Access rules for projects and issues.

Pure predicates over resources whose relations are already resolved
(``project.host`` is a user, ``project.members`` a list of users). They never
touch the database. Issue checks go through the issue's resolved ``project``.

Callers follow a fixed order: validate input, ``require_authenticated``, fetch,
check existence, then apply the access check. Checking access before existence
would tell an outsider whether an id exists.
"""
from issuehub.exceptions import Forbidden, Unauthenticated


def _same_user(a, b) -> bool:
    return a is not None and b is not None and str(a.id) == str(b.id)


def require_authenticated(user) -> None:
    if user is None:
        raise Unauthenticated("Not authenticated")


def is_host(resource, user) -> bool:
    if resource is None:
        return False
    return _same_user(getattr(resource, 'host', None), user)


def is_member(resource, user) -> bool:
    if resource is None or user is None:
        return False
    return any(_same_user(member, user) for member in getattr(resource, 'members', []))


def has_project_access(resource, user) -> bool:
    return is_host(resource, user) or is_member(resource, user)


def has_host_access(resource, user) -> bool:
    return is_host(resource, user)


def check_project_access(resource, user, message="Not authorized to access this project") -> None:
    if not has_project_access(resource, user):
        raise Forbidden(message)


def check_host_access(resource, user, message="Only the host can perform this action") -> None:
    if not has_host_access(resource, user):
        raise Forbidden(message)
