from fxwallet.extensions import db
from datetime import datetime
import uuid

BUDGET_CATEGORIES = ("accommodation", "food", "transport", "activities", "shopping")

def gen_budget_id():
    return f"bud_{uuid.uuid4().hex[:12]}"

class TravelBudget(db.Model):
    __tablename__ = "travel_budgets"

    id = db.Column(db.String(50), primary_key=True, default=gen_budget_id)
    user_id = db.Column(db.String(50), db.ForeignKey("users.id"), nullable=False, index=True)

    destination = db.Column(db.String(255), nullable=False)
    total_budget = db.Column(db.Numeric(15, 2), nullable=False)
    spent = db.Column(db.Numeric(15, 2), default=0, nullable=False)
    currency = db.Column(db.String(10), nullable=False)

    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    categories = db.relationship(
        "BudgetCategory",
        backref="travel_budget",
        cascade="all, delete-orphan",
        order_by="BudgetCategory.category",
    )


class BudgetCategory(db.Model):
    __tablename__ = "budget_categories"
    __table_args__ = (
        db.UniqueConstraint("budget_id", "category", name="uq_budget_categories_budget_category"),
    )

    id = db.Column(db.String(50), primary_key=True, default=lambda: f"bcat_{uuid.uuid4().hex[:12]}")
    budget_id = db.Column(db.String(50), db.ForeignKey("travel_budgets.id"), nullable=False)
    category = db.Column(db.String(30), nullable=False)

    budget = db.Column(db.Numeric(15, 2), nullable=False)
    spent = db.Column(db.Numeric(15, 2), default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
