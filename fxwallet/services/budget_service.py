import logging
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from fxwallet.extensions import db
from fxwallet.models.travel_budget import TravelBudget, BudgetCategory, BUDGET_CATEGORIES
from fxwallet.services.wallet_service import get_active_currency
from fxwallet.utils.exceptions import ServiceError, NotFoundError
from fxwallet.utils.money import to_decimal, to_cents, percent

logger = logging.getLogger(__name__)

WARNING_THRESHOLD = 75
CRITICAL_THRESHOLD = 90
HEALTHY_THRESHOLD = 50


def alert_level(percent_used):
    if percent_used >= CRITICAL_THRESHOLD:
        return "critical"
    if percent_used >= WARNING_THRESHOLD:
        return "warning"
    return "none"


def usage_band(percent_used):
    # progress bar colour on the budget screen
    if percent_used < HEALTHY_THRESHOLD:
        return "healthy"
    if percent_used < WARNING_THRESHOLD:
        return "moderate"
    if percent_used < CRITICAL_THRESHOLD:
        return "high"
    return "critical"


def _category_amounts(raw_categories):
    """Keep the categories whose amount parses to something above zero."""
    amounts = {}
    for name, value in (raw_categories or {}).items():
        if name not in BUDGET_CATEGORIES:
            raise ServiceError(
                "VALIDATION_ERROR",
                f"Unknown budget category {name}",
                {"field": "categories", "allowed": list(BUDGET_CATEGORIES)},
            )
        if value is None or (isinstance(value, str) and not value.strip()):
            continue
        amount = to_decimal(value, field=name)
        if amount > 0:
            amounts[name] = to_cents(amount, field=name)
    return amounts


def create_budget(user_id, data):
    """Create a travel budget and its category rows in a single commit."""
    currency = get_active_currency(data["currency"])
    amounts = _category_amounts(data.get("categories"))
    total = to_cents(to_decimal(data["total_budget"], field="total_budget"), field="total_budget")

    budget = TravelBudget(
        user_id=user_id,
        destination=data["destination"].strip(),
        total_budget=total,
        spent=Decimal("0.00"),
        currency=currency.code,
        start_date=data["start_date"],
        end_date=data["end_date"],
    )
    for name, amount in amounts.items():
        budget.categories.append(
            BudgetCategory(category=name, budget=amount, spent=Decimal("0.00"))
        )

    try:
        db.session.add(budget)
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        logger.exception("failed to create budget for user %s", user_id)
        raise ServiceError(
            "BUDGET_FAILED", "Budget could not be saved", status=500
        ) from exc

    logger.info(
        "budget %s created for user %s with %d categories",
        budget.id, user_id, len(amounts),
    )
    return budget


def get_budget(user_id, budget_id):
    budget = TravelBudget.query.filter_by(id=budget_id, user_id=user_id).first()
    if not budget:
        raise NotFoundError("Budget", budget_id)
    return budget


def list_budgets(user_id):
    return (
        TravelBudget.query
        .filter_by(user_id=user_id)
        .order_by(TravelBudget.start_date.desc(), TravelBudget.created_at.desc())
        .all()
    )


def budget_view(budget):
    total_pct = percent(budget.spent, budget.total_budget)
    categories = {}
    for cat in budget.categories:
        pct = percent(cat.spent, cat.budget)
        categories[cat.category] = {
            "category": cat.category,
            "budget": cat.budget,
            "spent": cat.spent,
            "percent_used": pct,
            "band": usage_band(pct),
        }
    return {
        "id": budget.id,
        "destination": budget.destination,
        "total_budget": budget.total_budget,
        "spent": budget.spent,
        "remaining": Decimal(budget.total_budget) - Decimal(budget.spent),
        "currency": budget.currency,
        "start_date": budget.start_date,
        "end_date": budget.end_date,
        "percent_used": total_pct,
        "alert": alert_level(total_pct),
        "categories": categories,
    }
