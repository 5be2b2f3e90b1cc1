import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    # The hosted backend is Postgres; point DATABASE_URL at its connection string.
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///burganhome.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))

    SITE_URL = os.getenv("SITE_URL", "https://burganhomeservices.com").rstrip("/")

    # Hosted backend (auth + storage)
    SUPABASE_URL = os.getenv("SUPABASE_URL", "")
    SUPABASE_ANON_KEY = os.getenv("SUPABASE_ANON_KEY", "")
    PROJECT_IMAGES_BUCKET = os.getenv("PROJECT_IMAGES_BUCKET", "project-images")

    # Email
    RESEND_API_KEY = os.getenv("RESEND_API_KEY", "")
    EMAIL_FROM = os.getenv("EMAIL_FROM", "Burgan Home Services <noreply@burganhomeservices.com>")
    CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "contact@burganhomeservices.com")
    QUOTE_EMAIL = os.getenv("QUOTE_EMAIL", "quotes@burganhomeservices.com")

    # Outbound lead webhook for contact and quote forms; email is the last resort
    WEBHOOK_URL = os.getenv("WEBHOOK_URL", "")
    FALLBACK_WEBHOOK_URL = os.getenv("FALLBACK_WEBHOOK_URL", "")
    WEBHOOK_TIMEOUT = float(os.getenv("WEBHOOK_TIMEOUT", "10"))

    # Blog webhook; empty disables the endpoint
    BLOG_WEBHOOK_SECRET = os.getenv("BLOG_WEBHOOK_SECRET", "")

    # Geocoding
    GOOGLE_MAPS_API_KEY = os.getenv("GOOGLE_MAPS_API_KEY", "")
    GEOCODE_TIMEOUT = float(os.getenv("GEOCODE_TIMEOUT", "10"))

    # Development-only form webhook receiver
    ENABLE_WEBHOOK_TEST = _env_flag("ENABLE_WEBHOOK_TEST")

    # Rate limiting for /api/* (limit, window seconds)
    RATE_LIMIT_ENABLED = _env_flag("RATE_LIMIT_ENABLED", "true")
    RATE_LIMIT_DEFAULT = (int(os.getenv("RATE_LIMIT_DEFAULT", "10")), int(os.getenv("RATE_LIMIT_WINDOW", "60")))
    RATE_LIMIT_FORMS = (int(os.getenv("RATE_LIMIT_FORMS", "5")), int(os.getenv("RATE_LIMIT_FORMS_WINDOW", "300")))
    RATE_LIMIT_MAX_KEYS = int(os.getenv("RATE_LIMIT_MAX_KEYS", "1000"))
    RATE_LIMIT_RETRY_AFTER = int(os.getenv("RATE_LIMIT_RETRY_AFTER", "60"))
