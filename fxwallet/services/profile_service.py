from fxwallet.extensions import db
from fxwallet.models.user import User
from fxwallet.services.wallet_service import get_active_currency
from fxwallet.utils.exceptions import NotFoundError


def get_user(user_id):
    user = User.query.get(user_id)
    if not user:
        raise NotFoundError("User", user_id)
    return user


def update_settings(user_id, data):
    user = get_user(user_id)

    if "full_name" in data:
        user.full_name = data["full_name"].strip()

    if "display_currency" in data:
        user.display_currency = get_active_currency(data["display_currency"]).code

    if "hide_balances" in data:
        user.hide_balances = data["hide_balances"]

    db.session.commit()
    return user
