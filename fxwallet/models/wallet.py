from fxwallet.extensions import db
from sqlalchemy.sql import func

class Wallet(db.Model):
    __tablename__ = "wallets"
    __table_args__ = (
        db.UniqueConstraint("user_id", "currency_code", name="uq_wallets_user_currency"),
    )

    id = db.Column(db.String(50), primary_key=True)
    user_id = db.Column(db.String(50), db.ForeignKey("users.id"), nullable=False, index=True)
    currency_code = db.Column(db.String(10), db.ForeignKey("currencies.code"), nullable=False)

    balance = db.Column(db.Numeric(15, 2), default=0, nullable=False)

    created_at = db.Column(db.DateTime, server_default=func.now())
    updated_at = db.Column(db.DateTime, onupdate=func.now())

    user = db.relationship("User", backref=db.backref("wallets", lazy="dynamic"))
