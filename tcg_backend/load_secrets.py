import os
from dotenv import load_dotenv

load_dotenv()

database_url = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./tcg_backend.sqlite3")
jwt_secret = os.getenv("JWT_SECRET", "default-secret")
jwt_expires_days = int(os.getenv("JWT_EXPIRES_DAYS", "7"))
pepper_data = os.getenv("PEPPER_DATA", "")
log_level = os.getenv("LOG_LEVEL", "INFO").upper()
seed_cards = os.getenv("SEED_CARDS", "true").lower() in ("1", "true", "yes")

if __name__ == "__main__":
    print(database_url, jwt_expires_days, log_level, seed_cards)
