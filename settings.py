import os
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(".") / ".env"
load_dotenv(dotenv_path=env_path)

ENVIRONMENT = os.getenv("PLATFORM_ENVIRONMENT", "local")


def is_production():
    return ENVIRONMENT == "production"


def is_test():
    return ENVIRONMENT == "test"


APPLICATION_NAME = "PAYMENT_SESSIONS"
# File logging is off unless a path is given
LOG_FILE_PATH = os.getenv("LOG_FILE_PATH", "")
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

STRIPE_API_BASE_URL = os.getenv("STRIPE_API_BASE_URL", "https://api.stripe.com/v1/")
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
# Pins the API version sent with every request, account default when unset
STRIPE_API_VERSION = os.getenv("STRIPE_API_VERSION")
# Connected account to act on behalf of
STRIPE_ACCOUNT = os.getenv("STRIPE_ACCOUNT")

REQUEST_TIMEOUT_SECONDS = float(os.getenv("REQUEST_TIMEOUT_SECONDS", 30))
