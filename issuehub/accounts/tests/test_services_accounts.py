from unittest.mock import patch

import pytest

from accounts.models import User
from accounts.services import AccountService
from accounts.tokens import decode_token
from issuehub.exceptions import Conflict, Invalid, Unauthenticated


@pytest.mark.django_db
def test_signup_hashes_password_and_issues_token():
    token, user = AccountService.signup(
        first_name="Ada", last_name="Lovelace", email="Ada@Example.com", password="analytical"
    )

    assert user.email == "ada@example.com"
    assert user.password != "analytical"
    assert user.check_password("analytical")
    assert decode_token(token)["sub"] == str(user.id)


@pytest.mark.django_db
def test_signup_existing_email_conflicts(host):
    with pytest.raises(Conflict):
        AccountService.signup(first_name="A", last_name="B", email="ALICE@example.com", password="x")
    assert User.objects.count() == 1


@pytest.mark.django_db
def test_signup_concurrent_duplicate_email_conflicts(host):
    # The existence check misses a row written by a concurrent signup
    with patch("accounts.services.UserSelector.get_user_by_email", return_value=None):
        with pytest.raises(Conflict):
            AccountService.signup(first_name="A", last_name="B", email="alice@example.com", password="x")
    assert User.objects.count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [
    {"first_name": " ", "last_name": "B", "email": "a@b.co", "password": "x"},
    {"first_name": "A", "last_name": "B", "email": "not-an-email", "password": "x"},
    {"first_name": "A", "last_name": "B", "email": "a@b.co", "password": ""},
])
def test_signup_invalid_input(payload):
    with pytest.raises(Invalid):
        AccountService.signup(**payload)


@pytest.mark.django_db
def test_login(make_user):
    user = make_user(email="grace@example.com", password="cobol")

    token, logged_in = AccountService.login(email="grace@example.com", password="cobol")
    assert logged_in == user
    assert decode_token(token)["sub"] == str(user.id)

    with pytest.raises(Unauthenticated):
        AccountService.login(email="grace@example.com", password="fortran")
    with pytest.raises(Unauthenticated):
        AccountService.login(email="nobody@example.com", password="cobol")


@pytest.mark.django_db
def test_me(host):
    assert AccountService.me(user=host) == host
    with pytest.raises(Unauthenticated):
        AccountService.me(user=None)
