from fxwallet.extensions import bcrypt

def hash_password(password: str) -> str:
    return bcrypt.generate_password_hash(password).decode("utf-8")

def check_password(password, hashed_password):
    return bcrypt.check_password_hash(hashed_password, password)

def initials(name: str) -> str:
    # "Sarah Johnson" -> "SJ"
    return "".join(part[0] for part in (name or "").split() if part).upper()
