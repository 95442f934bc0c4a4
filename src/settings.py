# ---------- Defaults for the secret writer ----------
ENV_FILE_PATH = ".env"
SECRET_KEY_NAME = "APP_SECRET"

# ---------- Logging ----------
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
