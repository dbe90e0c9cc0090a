from flask import Blueprint, request
from flask_jwt_extended import jwt_required, get_jwt_identity
from fxwallet.schemas.budget_schema import TravelBudgetSchema, NewBudgetSchema
from fxwallet.services.budget_service import create_budget, list_budgets, get_budget, budget_view
from fxwallet.utils.response_formatter import success_response

bp = Blueprint("budgets", __name__, url_prefix="/api/v1/budgets")


@bp.route("", methods=["GET"])
@jwt_required()
def budgets():
    uid = get_jwt_identity()
    views = [budget_view(b) for b in list_budgets(uid)]
    return success_response({"budgets": TravelBudgetSchema(many=True).dump(views)})


@bp.route("", methods=["POST"])
@jwt_required()
def new_budget():
    uid = get_jwt_identity()
    data = NewBudgetSchema().load(request.get_json() or {})

    budget = create_budget(uid, data)
    return success_response(
        {"budget": TravelBudgetSchema().dump(budget_view(budget))},
        "Budget created",
        status=201,
    )


@bp.route("/<budget_id>", methods=["GET"])
@jwt_required()
def budget_detail(budget_id):
    uid = get_jwt_identity()
    budget = get_budget(uid, budget_id)
    return success_response({"budget": TravelBudgetSchema().dump(budget_view(budget))})
