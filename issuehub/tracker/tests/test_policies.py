from types import SimpleNamespace

import pytest

from issuehub.exceptions import Forbidden, Unauthenticated
from tracker.policies import (
    check_host_access,
    check_project_access,
    has_host_access,
    has_project_access,
    is_host,
    is_member,
    require_authenticated,
)


def _user(uid):
    return SimpleNamespace(id=uid)


HOST = _user("h-1")
MEMBER = _user("m-1")
STRANGER = _user("s-1")
PROJECT = SimpleNamespace(host=HOST, members=[MEMBER])


def test_require_authenticated():
    with pytest.raises(Unauthenticated):
        require_authenticated(None)
    require_authenticated(HOST)


def test_host_and_member_predicates():
    assert is_host(PROJECT, HOST)
    assert not is_host(PROJECT, MEMBER)
    assert is_member(PROJECT, MEMBER)
    assert not is_member(PROJECT, HOST)  # host is not implicitly a member
    assert not is_member(PROJECT, STRANGER)


@pytest.mark.parametrize("user,expected", [(HOST, True), (MEMBER, True), (STRANGER, False)])
def test_project_access(user, expected):
    assert has_project_access(PROJECT, user) is expected


@pytest.mark.parametrize("user,expected", [(HOST, True), (MEMBER, False), (STRANGER, False)])
def test_host_access(user, expected):
    assert has_host_access(PROJECT, user) is expected


def test_ids_are_compared_as_strings():
    import uuid

    uid = uuid.uuid4()
    project = SimpleNamespace(host=_user(uid), members=[])
    assert is_host(project, _user(str(uid)))


def test_orphaned_issue_grants_no_access():
    issue = SimpleNamespace(project=None)
    assert not has_project_access(issue.project, HOST)
    with pytest.raises(Forbidden):
        check_project_access(issue.project, HOST)


def test_unresolved_host_grants_no_host_access():
    project = SimpleNamespace(host=None, members=[MEMBER])
    assert not has_host_access(project, HOST)
    assert has_project_access(project, MEMBER)


def test_check_helpers_raise_forbidden_with_message():
    with pytest.raises(Forbidden) as exc:
        check_host_access(PROJECT, MEMBER, "Only the host may do that")
    assert exc.value.message == "Only the host may do that"

    check_project_access(PROJECT, MEMBER)
    check_host_access(PROJECT, HOST)
