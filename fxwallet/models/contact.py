from fxwallet.extensions import db
from datetime import datetime
import uuid

class Contact(db.Model):
    __tablename__ = "contacts"
    __table_args__ = (
        db.UniqueConstraint("user_id", "email", name="uq_contacts_user_email"),
    )

    id = db.Column(db.String(50), primary_key=True, default=lambda: f"con_{uuid.uuid4().hex[:12]}")
    user_id = db.Column(db.String(50), db.ForeignKey("users.id"), nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    avatar = db.Column(db.String(10))
    last_transaction_date = db.Column(db.DateTime)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
