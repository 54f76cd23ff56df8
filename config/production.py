import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mess_attendance"),
}

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "please-set-ADMIN_PASSWORD")

KIOSK_DEFAULT_PIN = os.getenv("KIOSK_DEFAULT_PIN", "1234")

DEVICE_POLICY = os.getenv("DEVICE_POLICY", "allowlist")
AUTHORIZED_DEVICES = os.getenv("AUTHORIZED_DEVICES", "")

ATTENDANCE_TIMEZONE = os.getenv("ATTENDANCE_TIMEZONE", "UTC")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

GEOFENCE_LATITUDE = os.getenv("GEOFENCE_LATITUDE") or None
GEOFENCE_LONGITUDE = os.getenv("GEOFENCE_LONGITUDE") or None
GEOFENCE_RADIUS_METERS = os.getenv("GEOFENCE_RADIUS_METERS") or None

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
