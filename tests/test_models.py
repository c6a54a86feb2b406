"""
Model tests: email normalisation, timestamps, membership relationships.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session

from app.models import User, UserWorkspace, Workspace


def test_user_email_lowercased_on_assignment() -> None:
    user = User(email="Someone@Example.COM", password_hash="$2b$10$hash")
    assert user.email == "someone@example.com"
    user.email = "Other@Example.com"
    assert user.email == "other@example.com"


def test_user_repr_hides_password_hash() -> None:
    user = User(id=1, email="a@b.com", password_hash="$2b$10$secrethash")
    assert "secrethash" not in repr(user)
    assert "a@b.com" in repr(user)


def test_timestamps_set_on_insert(db: Session) -> None:
    workspace = Workspace(name="Acme")
    db.add(workspace)
    db.commit()
    db.refresh(workspace)
    assert isinstance(workspace.created_at, datetime)
    assert isinstance(workspace.updated_at, datetime)


def test_updated_at_changes_on_update(db: Session) -> None:
    user = User(email="a@b.com", password_hash="$2b$10$hash")
    db.add(user)
    db.commit()
    db.refresh(user)
    created_at = user.created_at
    first_update = user.updated_at

    user.password_hash = "$2b$10$other"
    db.commit()
    db.refresh(user)
    assert user.created_at == created_at
    assert user.updated_at >= first_update


def test_membership_relationship(db: Session) -> None:
    user = User(email="a@b.com", password_hash="$2b$10$hash")
    workspace = Workspace(name="Acme")
    db.add_all([user, workspace])
    db.flush()
    db.add(UserWorkspace(user_id=user.id, workspace_id=workspace.id))
    db.commit()

    db.expire_all()
    assert [w.id for w in user.workspaces] == [workspace.id]
    assert [u.id for u in workspace.users] == [user.id]
