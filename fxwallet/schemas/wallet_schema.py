from marshmallow import fields
from fxwallet.extensions import ma

class CurrencySchema(ma.Schema):
    code = fields.String()
    name = fields.String()
    symbol = fields.String()
    flag = fields.String()
    rate = fields.Float()
    balance = fields.Float(allow_none=True)

class WalletHoldingSchema(CurrencySchema):
    base_value = fields.Float(allow_none=True)
    share = fields.Float(allow_none=True)
