# rate = value of one unit in the base currency (USD)
CURRENCY_CATALOG = [
    {"code": "USD", "name": "US Dollar", "symbol": "$", "flag": "🇺🇸", "rate": "1.00000000"},
    {"code": "EUR", "name": "Euro", "symbol": "€", "flag": "🇪🇺", "rate": "1.17647059"},
    {"code": "GBP", "name": "British Pound", "symbol": "£", "flag": "🇬🇧", "rate": "1.36986301"},
    {"code": "JPY", "name": "Japanese Yen", "symbol": "¥", "flag": "🇯🇵", "rate": "0.00909091"},
    {"code": "CAD", "name": "Canadian Dollar", "symbol": "C$", "flag": "🇨🇦", "rate": "0.80000000"},
    {"code": "AUD", "name": "Australian Dollar", "symbol": "A$", "flag": "🇦🇺", "rate": "0.74074074"},
    {"code": "CHF", "name": "Swiss Franc", "symbol": "CHF", "flag": "🇨🇭", "rate": "1.08695652"},
    {"code": "SGD", "name": "Singapore Dollar", "symbol": "S$", "flag": "🇸🇬", "rate": "0.74074074"},
    {"code": "HKD", "name": "Hong Kong Dollar", "symbol": "HK$", "flag": "🇭🇰", "rate": "0.12820513"},
    {"code": "SEK", "name": "Swedish Krona", "symbol": "kr", "flag": "🇸🇪", "rate": "0.11764706"},
]

STARTER_WALLETS = {
    "USD": "2450.75",
    "EUR": "890.30",
    "GBP": "320.50",
}

STARTER_TRANSACTIONS = [
    {
        "type": "receive",
        "amount": "1000",
        "currency": "USD",
        "description": "Initial deposit",
        "status": "completed",
    },
    {
        "type": "exchange",
        "amount": "500",
        "currency": "EUR",
        "description": "USD → EUR Exchange",
        "status": "completed",
    },
]

STARTER_CONTACTS = [
    {"name": "Sarah Johnson", "email": "sarah.j@email.com", "avatar": "SJ"},
    {"name": "Mike Chen", "email": "mike.chen@email.com", "avatar": "MC"},
]

STARTER_CARD = {
    "type": "physical",
    "last_four": "4521",
    "expiry_date": "12/27",
    "status": "active",
    "spending_limit": "5000",
    "current_spending": "1250.75",
}
