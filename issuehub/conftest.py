import pytest
from rest_framework.test import APIClient

from accounts.models import User
from accounts.tokens import sign_token
from tracker.models import Issue, Project


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]


@pytest.fixture
def make_user(db):
    counter = {"n": 0}

    def _make(first_name="Test", last_name="User", email=None, password="S3cret!pass"):
        counter["n"] += 1
        email = email or f"user{counter['n']}@example.com"
        return User.objects.create_user(
            email=email, password=password, first_name=first_name, last_name=last_name
        )

    return _make


@pytest.fixture
def host(make_user):
    return make_user(first_name="Alice", last_name="Host", email="alice@example.com")


@pytest.fixture
def member(make_user):
    return make_user(first_name="Bob", last_name="Member", email="bob@example.com")


@pytest.fixture
def outsider(make_user):
    return make_user(first_name="Eve", last_name="Outsider", email="eve@example.com")


@pytest.fixture
def project(db, host, member):
    return Project.objects.create(
        title="Apollo",
        description="Moon landing tracker",
        host_id=host.id,
        member_ids=[str(member.id)],
    )


@pytest.fixture
def issue(db, project, host):
    return Issue.objects.create(
        project_id=project.id,
        title="Fuel leak",
        description="Stage two",
        priority=Issue.Priority.HIGH,
        reporter_id=host.id,
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    """APIClient carrying a real bearer token for the given user"""

    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {sign_token(user)}")
        return client

    return _client
