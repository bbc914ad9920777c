# caspian/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _mysql_url() -> str:
    host = os.getenv("MYSQL_HOST", "localhost")
    user = os.getenv("MYSQL_USER", "root")
    password = os.getenv("MYSQL_PASSWORD", "")
    database = os.getenv("MYSQL_DATABASE", "caspian")
    port = os.getenv("MYSQL_PORT", "3306")
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{database}"


DATABASE_URL = os.getenv("DATABASE_URL") or _mysql_url()
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 10))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))

STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")
PAYMENT_METHOD_TYPES = [
    m.strip() for m in os.getenv("PAYMENT_METHOD_TYPES", "card,paypal,bacs_debit").split(",") if m.strip()
]

ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "https://zingy-twilight-e56255.netlify.app").split(",")
    if o.strip()
]

PORT = int(os.getenv("PORT", 5000))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SEED_CATALOG = os.getenv("SEED_CATALOG", "false").lower() in ("1", "true", "yes")
