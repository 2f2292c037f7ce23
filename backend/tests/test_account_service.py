import uuid
import pytest

from fittrack.errors import AccountDisabled, DuplicateIdentity, InvalidCredentials, NotFound
from fittrack.services.account import AccountService

PWD = "StrongPassw0rd!"

def register(db, **over):
    tag = uuid.uuid4().hex[:8]
    fields = {"username": f"acct{tag}", "email": f"acct{tag}@example.com", "password": PWD,
              "first_name": "Grace", "last_name": "Hopper"}
    fields.update(over)
    return AccountService(db).register(**fields)

def test_password_is_hashed(db):
    user = register(db)
    assert user.password_hash and user.password_hash != PWD
    assert user.is_active is True
    assert user.last_login is None

def test_duplicate_email_leaves_existing_record_unchanged(db):
    user = register(db)
    with pytest.raises(DuplicateIdentity):
        register(db, email=user.email, first_name="Other")
    db.expire_all()
    again = AccountService(db).get_user(user.id)
    assert again.first_name == "Grace"
    assert again.username == user.username

def test_duplicate_username(db):
    user = register(db)
    with pytest.raises(DuplicateIdentity):
        register(db, username=user.username)

def test_identity_match_is_case_sensitive(db):
    user = register(db)
    other = register(db, username=user.username.upper(), email=user.email.upper())
    assert other.id != user.id

def test_authenticate_updates_last_login(db):
    user = register(db)
    logged_in = AccountService(db).authenticate(email=user.email, password=PWD)
    assert logged_in.id == user.id
    assert logged_in.last_login is not None

def test_authenticate_failures(db):
    user = register(db)
    svc = AccountService(db)
    with pytest.raises(InvalidCredentials):
        svc.authenticate(email=user.email, password="nope")
    with pytest.raises(InvalidCredentials):
        svc.authenticate(email="missing-" + user.email, password=PWD)
    svc.deactivate(user.id)
    with pytest.raises(AccountDisabled):
        svc.authenticate(email=user.email, password=PWD)
    svc.reactivate(user.id)
    assert svc.authenticate(email=user.email, password=PWD).is_active

def test_update_profile_overwrites_missing_fields_with_null(db):
    user = register(db)
    updated = AccountService(db).update_profile(user.id, {"first_name": "Anita"})
    assert updated.first_name == "Anita"
    assert updated.last_name is None
    assert updated.profile_image is None

def test_update_profile_missing_user(db):
    with pytest.raises(NotFound):
        AccountService(db).update_profile(987654321, {})

def test_change_password(db):
    user = register(db)
    svc = AccountService(db)
    with pytest.raises(InvalidCredentials):
        svc.change_password(user.id, current_password="wrong", new_password="NewStrongPassw0rd!")
    svc.change_password(user.id, current_password=PWD, new_password="NewStrongPassw0rd!")
    assert svc.authenticate(email=user.email, password="NewStrongPassw0rd!").id == user.id
    with pytest.raises(InvalidCredentials):
        svc.authenticate(email=user.email, password=PWD)
    with pytest.raises(NotFound):
        svc.change_password(987654321, current_password=PWD, new_password="x")
