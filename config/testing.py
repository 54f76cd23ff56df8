import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mess_attendance_test"),
}

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "Admin@123"

KIOSK_DEFAULT_PIN = "1234"

DEVICE_POLICY = "allowlist"
AUTHORIZED_DEVICES = "DEV-X"

ATTENDANCE_TIMEZONE = "UTC"

CORS_ORIGINS = "*"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
