import os
from dotenv import load_dotenv

load_dotenv()

APP_ENV = os.getenv("APP_ENV", "local")

# Applied to the "govuk" logger tree when the app starts.
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Comma separated; "*" allows any origin for local form previews.
CORS_ALLOW_ORIGINS = [
	origin.strip()
	for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
	if origin.strip()
]

# Model state stops accepting errors after this many messages.
MAX_MODEL_ERRORS = int(os.getenv("MAX_MODEL_ERRORS", "200"))
