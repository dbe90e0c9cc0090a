from decimal import Decimal

from fxwallet.main import create_app
from fxwallet.extensions import db
from fxwallet.models.currency import Currency
from fxwallet.utils.catalog import CURRENCY_CATALOG

# -------------------------------------------------------------------
# MAIN LOGIC
# -------------------------------------------------------------------

def seed_currencies(catalog=CURRENCY_CATALOG):
    """Insert missing currencies and refresh rates on existing ones."""
    created, updated = 0, 0

    for entry in catalog:
        currency = Currency.query.filter_by(code=entry["code"]).one_or_none()
        rate = Decimal(entry["rate"])

        if currency is None:
            db.session.add(Currency(
                code=entry["code"],
                name=entry["name"],
                symbol=entry["symbol"],
                flag=entry["flag"],
                rate=rate,
                is_active=True,
            ))
            created += 1
            print(f"+ {entry['code']:<4} rate={rate}")
        elif Decimal(currency.rate) != rate:
            print(f"~ {entry['code']:<4} rate {currency.rate} -> {rate}")
            currency.rate = rate
            updated += 1

    db.session.commit()
    print(f"\nCurrencies created={created} updated={updated}")
    return created, updated


# -------------------------------------------------------------------
# ENTRY POINT
# -------------------------------------------------------------------

if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
        seed_currencies()
