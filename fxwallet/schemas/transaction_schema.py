from marshmallow import EXCLUDE, fields, validate
from fxwallet.extensions import ma
from fxwallet.models.wallet_transaction import TRANSACTION_TYPES, TRANSACTION_STATUSES
from fxwallet.utils.money import MAX_AMOUNT

class TransactionSchema(ma.Schema):
    id = fields.String()
    type = fields.String()
    amount = fields.Float()
    currency = fields.String()
    description = fields.String()
    location = fields.String(allow_none=True)
    recipient = fields.String(allow_none=True)
    category = fields.String(allow_none=True)
    status = fields.String()
    created_at = fields.DateTime()

class NewTransactionSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    type = fields.String(required=True, validate=validate.OneOf(TRANSACTION_TYPES))
    amount = fields.Decimal(
        required=True,
        validate=validate.Range(min=-MAX_AMOUNT, max=MAX_AMOUNT, min_inclusive=False, max_inclusive=False),
    )
    currency = fields.String(required=True, validate=validate.Length(min=3, max=10))
    description = fields.String(required=True, validate=validate.Length(min=1, max=255))
    location = fields.String(load_default=None, allow_none=True)
    recipient = fields.String(load_default=None, allow_none=True)
    category = fields.String(load_default=None, allow_none=True)
    status = fields.String(load_default="completed", validate=validate.OneOf(TRANSACTION_STATUSES))

class ExchangeRequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    from_currency = fields.String(required=True, data_key="from")
    to_currency = fields.String(required=True, data_key="to")
    amount = fields.Decimal(required=True)

class SendMoneyRequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    contact_id = fields.String(load_default=None, allow_none=True)
    recipient_name = fields.String(load_default=None, allow_none=True)
    recipient_email = fields.Email(load_default=None, allow_none=True)
    amount = fields.Decimal(required=True)
    currency = fields.String(required=True)
    message = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=255))

class ScanRequestSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    payload = fields.String(required=True)
