"""
BDD step definitions for the user accounts feature (pytest-bdd).
Challenge: Express requirements in Gherkin; map to domain calls.
"""

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from accounts.core.exceptions import InactiveAccountError, MismatchError
from accounts.domain import TempUser, new_user

# Load all scenarios from the feature file
scenarios("../features/user_accounts.feature")


@pytest.fixture
def outcome():
    """Store the created user or the raised error for then steps."""
    return {}


@given(
    parsers.parse('a registration with password "{password}" and confirmation "{confirmation}"'),
    target_fixture="registration",
)
def given_registration(password, confirmation):
    return TempUser(
        first_name="Nick",
        last_name="Doe2",
        email="foo@bar.com",
        password=password,
        confirm_password=confirmation,
    )


@when("the user is created")
def create_user(registration, outcome):
    try:
        outcome["user"] = new_user(registration)
    except MismatchError as exc:
        outcome["error"] = exc


@when("the user is deactivated")
def deactivate(outcome):
    outcome["user"].visible = False


@then("creation fails because the confirmation does not match")
def mismatch(outcome):
    assert isinstance(outcome.get("error"), MismatchError)
    assert "user" not in outcome


@then(parsers.parse('the stored password is not "{password}"'))
def stored_password_is_hashed(outcome, password):
    assert outcome["user"].password != password


@then(parsers.parse('authenticating with "{password}" succeeds'))
def authenticates(outcome, password):
    outcome["user"].authenticate(password)


@then(parsers.parse('authenticating with "{password}" fails because the account is inactive'))
def inactive(outcome, password):
    with pytest.raises(InactiveAccountError):
        outcome["user"].authenticate(password)
