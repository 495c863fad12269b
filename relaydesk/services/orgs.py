"""Organization (tenant) records.

Names are unique. Callers get plain domain errors and decide how to present
them; this module never raises HTTP errors.
"""
from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from relaydesk.db.models.org import Org


class OrgError(Exception):
    pass


class OrgNameError(OrgError):
    pass


class OrgExistsError(OrgError):
    pass


NAME_MAX_LENGTH = Org.__table__.c.name.type.length


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise OrgNameError("Organization name cannot be empty")
    if len(name) > NAME_MAX_LENGTH:
        raise OrgNameError(f"Organization name cannot be longer than {NAME_MAX_LENGTH} characters")
    return name


def _commit(db: Session) -> None:
    # The unique index is the final word when two writers race on a name.
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise OrgExistsError("Organization already exists") from exc


def create_org(db: Session, name: str) -> Org:
    name = _clean_name(name)
    if get_org_by_name(db, name) is not None:
        raise OrgExistsError("Organization already exists")

    org = Org(name=name)
    db.add(org)
    _commit(db)
    db.refresh(org)
    return org


def get_org(db: Session, org_id: int) -> Org | None:
    return db.get(Org, org_id)


def get_org_by_name(db: Session, name: str) -> Org | None:
    return db.query(Org).filter(Org.name == name).first()


def update_org(db: Session, org_id: int, name: str) -> Org | None:
    org = db.get(Org, org_id)
    if not org:
        return None
    name = _clean_name(name)
    other = get_org_by_name(db, name)
    if other is not None and other.id != org.id:
        raise OrgExistsError("Organization already exists")

    org.name = name
    _commit(db)
    db.refresh(org)
    return org


def list_orgs(db: Session) -> list[Org]:
    return db.query(Org).order_by(Org.created_at.desc(), Org.id.desc()).all()


def delete_org(db: Session, org_id: int) -> bool:
    org = db.get(Org, org_id)
    if not org:
        return False
    db.delete(org)
    db.commit()
    return True
