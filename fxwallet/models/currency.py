from fxwallet.extensions import db
from sqlalchemy.sql import func
import uuid

class Currency(db.Model):
    __tablename__ = "currencies"
    __table_args__ = (
        db.CheckConstraint("rate > 0", name="ck_currencies_rate_positive"),
    )

    id = db.Column(db.String(50), primary_key=True, default=lambda: f"cur_{uuid.uuid4().hex[:12]}")
    code = db.Column(db.String(10), unique=True, nullable=False, index=True)
    name = db.Column(db.String(50), nullable=False)
    symbol = db.Column(db.String(10), nullable=False)
    flag = db.Column(db.String(16))

    # value of one unit expressed in the base currency
    rate = db.Column(db.Numeric(18, 8), nullable=False, default=1)
    is_active = db.Column(db.Boolean, default=True, nullable=False)

    updated_at = db.Column(db.DateTime, server_default=func.now(), onupdate=func.now())
