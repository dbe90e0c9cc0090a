from fxwallet.extensions import db
from datetime import datetime
import uuid

CARD_TYPES = ("physical", "virtual")
CARD_STATUSES = ("active", "frozen", "blocked")

def gen_card_id():
    return f"card_{uuid.uuid4().hex[:12]}"

class Card(db.Model):
    __tablename__ = "cards"

    id = db.Column(db.String(50), primary_key=True, default=gen_card_id)
    user_id = db.Column(db.String(50), db.ForeignKey("users.id"), nullable=False, index=True)

    type = db.Column(db.String(20), nullable=False)
    # the full card number is never stored
    last_four = db.Column(db.String(4), nullable=False)
    expiry_date = db.Column(db.String(5), nullable=False)
    status = db.Column(db.String(20), default="active", nullable=False)

    spending_limit = db.Column(db.Numeric(15, 2), default=0, nullable=False)
    current_spending = db.Column(db.Numeric(15, 2), default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    @property
    def masked_number(self):
        return f"**** **** **** {self.last_four}"
