from fxwallet.extensions import db
from datetime import datetime

TRANSACTION_TYPES = ("exchange", "send", "receive", "spend", "transfer")
TRANSACTION_STATUSES = ("completed", "pending", "failed")

class WalletTransaction(db.Model):
    __tablename__ = "transactions"
    __table_args__ = (
        db.Index("idx_transactions_user_created", "user_id", "created_at"),
    )

    id = db.Column(db.String(50), primary_key=True)
    user_id = db.Column(db.String(50), db.ForeignKey("users.id"), nullable=False)

    type = db.Column(db.String(20), nullable=False)
    amount = db.Column(db.Numeric(15, 2), nullable=False)
    currency = db.Column(db.String(10), nullable=False)
    description = db.Column(db.String(255), nullable=False)

    location = db.Column(db.String(255))
    recipient = db.Column(db.String(255))
    category = db.Column(db.String(50))

    status = db.Column(db.String(20), default="completed", nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
