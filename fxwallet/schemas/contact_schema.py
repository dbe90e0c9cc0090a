from marshmallow import EXCLUDE, fields, validate
from fxwallet.extensions import ma

class ContactSchema(ma.Schema):
    id = fields.String()
    name = fields.String()
    email = fields.String()
    avatar = fields.String(allow_none=True)
    last_transaction_date = fields.DateTime(allow_none=True)

class NewContactSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1, max=255))
    email = fields.Email(required=True)
    avatar = fields.String(load_default=None, allow_none=True, validate=validate.Length(max=10))
