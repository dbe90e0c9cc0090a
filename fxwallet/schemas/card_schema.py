from marshmallow import EXCLUDE, fields, validate
from fxwallet.extensions import ma
from fxwallet.models.card import CARD_STATUSES
from fxwallet.utils.money import percent

class CardSchema(ma.Schema):
    id = fields.String()
    type = fields.String()
    last_four = fields.String()
    number = fields.String(attribute="masked_number")
    expiry_date = fields.String()
    status = fields.String()
    spending_limit = fields.Float()
    current_spending = fields.Float()
    spending_percent = fields.Method("get_spending_percent")

    def get_spending_percent(self, card):
        return percent(card.current_spending, card.spending_limit)

class CardStatusSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    status = fields.String(required=True, validate=validate.OneOf(CARD_STATUSES))
