from datetime import datetime

from sqlalchemy import or_, func
from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.models.contact import Contact
from fxwallet.utils.auth_utils import initials
from fxwallet.utils.exceptions import ServiceError, NotFoundError
from fxwallet.utils.search import contains_pattern


def list_contacts(user_id, search=None):
    q = Contact.query.filter_by(user_id=user_id)
    if search:
        pattern = contains_pattern(search)
        q = q.filter(
            or_(
                Contact.name.ilike(pattern, escape="\\"),
                Contact.email.ilike(pattern, escape="\\"),
            )
        )
    return q.order_by(Contact.name).all()


def get_contact(user_id, contact_id):
    contact = Contact.query.filter_by(id=contact_id, user_id=user_id).first()
    if not contact:
        raise NotFoundError("Contact", contact_id)
    return contact


def find_contact_by_email(user_id, email):
    if not email:
        return None
    return Contact.query.filter(
        Contact.user_id == user_id, func.lower(Contact.email) == email.strip().lower()
    ).first()


def build_contact(user_id, name, email, avatar=None):
    """Stage a new contact in the session without committing."""
    if find_contact_by_email(user_id, email):
        raise ServiceError(
            "CONTACT_EXISTS",
            "A contact with that email already exists",
            {"field": "email"},
            status=409,
        )
    contact = Contact(
        user_id=user_id,
        name=name.strip(),
        email=email.strip(),
        avatar=avatar or initials(name),
    )
    db.session.add(contact)
    return contact


def add_contact(user_id, name, email, avatar=None):
    contact = build_contact(user_id, name, email, avatar)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise
    return contact


def touch_contact(contact):
    contact.last_transaction_date = datetime.utcnow()
    return contact
