from marshmallow import EXCLUDE, fields, validate, validates_schema, ValidationError
from fxwallet.extensions import ma
from fxwallet.utils.money import MAX_AMOUNT

class BudgetCategorySchema(ma.Schema):
    category = fields.String()
    budget = fields.Float()
    spent = fields.Float()
    percent_used = fields.Float()
    band = fields.String()

class TravelBudgetSchema(ma.Schema):
    id = fields.String()
    destination = fields.String()
    total_budget = fields.Float()
    spent = fields.Float()
    remaining = fields.Float()
    currency = fields.String()
    start_date = fields.Date()
    end_date = fields.Date()
    percent_used = fields.Float()
    alert = fields.String()
    categories = fields.Dict(keys=fields.String(), values=fields.Nested(BudgetCategorySchema))

class NewBudgetSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    destination = fields.String(required=True, validate=validate.Length(min=1, max=255))
    total_budget = fields.Decimal(
        required=True, validate=validate.Range(min=0, max=MAX_AMOUNT, max_inclusive=False)
    )
    currency = fields.String(required=True)
    start_date = fields.Date(required=True)
    end_date = fields.Date(required=True)
    categories = fields.Dict(keys=fields.String(), values=fields.Raw(allow_none=True), load_default=dict)

    @validates_schema
    def check_dates(self, data, **kwargs):
        if data["end_date"] < data["start_date"]:
            raise ValidationError("end_date must not be before start_date", "end_date")
