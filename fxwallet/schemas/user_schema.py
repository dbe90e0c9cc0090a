from marshmallow import EXCLUDE, fields, validate
from fxwallet.extensions import ma

class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=6), load_only=True)
    full_name = fields.String(load_default="")

class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    password = fields.String(required=True, load_only=True)

class SettingsSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    full_name = fields.String(validate=validate.Length(max=255))
    display_currency = fields.String(validate=validate.Length(min=3, max=10))
    hide_balances = fields.Boolean()
