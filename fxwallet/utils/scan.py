"""Decoding of payloads produced by the payment QR scanner.

A scanner yields plain text. Payment codes carry a JSON object with at least
``name`` and ``email`` and optionally ``amount`` and ``currency``; anything
else that looks like an email address is taken as the recipient's email.
"""
import json

from fxwallet.utils.exceptions import ServiceError


def parse_scan_payload(payload):
    text = (payload or "").strip()
    if not text:
        raise ServiceError("INVALID_SCAN", "Scan payload is empty")

    try:
        data = json.loads(text)
    except ValueError:
        data = None

    if isinstance(data, dict):
        if not data.get("name") or not data.get("email"):
            raise ServiceError(
                "INVALID_SCAN",
                "Payment code must include name and email",
                {"fields": ["name", "email"]},
            )
        amount = data.get("amount")
        currency = data.get("currency")
        return {
            "name": str(data["name"]),
            "email": str(data["email"]),
            "amount": str(amount) if amount not in (None, "") else None,
            "currency": str(currency).upper() if currency else None,
        }

    if "@" in text:
        return {"name": None, "email": text, "amount": None, "currency": None}

    raise ServiceError("INVALID_SCAN", "Unrecognised scan payload")
