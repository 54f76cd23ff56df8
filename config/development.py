import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "mess_attendance"),
}

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@example.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "Admin@123")

KIOSK_DEFAULT_PIN = os.getenv("KIOSK_DEFAULT_PIN", "1234")

# "allowlist" or "bound_device"
DEVICE_POLICY = os.getenv("DEVICE_POLICY", "allowlist")

# Master kiosks that may always punch in development
MASTER_DEVICES = ("MASTER-1", "MASTER-2")
AUTHORIZED_DEVICES = ",".join([os.getenv("AUTHORIZED_DEVICES", ""), *MASTER_DEVICES])

ATTENDANCE_TIMEZONE = os.getenv("ATTENDANCE_TIMEZONE", "UTC")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

# Geofence is off unless all three are set
GEOFENCE_LATITUDE = os.getenv("GEOFENCE_LATITUDE") or None
GEOFENCE_LONGITUDE = os.getenv("GEOFENCE_LONGITUDE") or None
GEOFENCE_RADIUS_METERS = os.getenv("GEOFENCE_RADIUS_METERS") or None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
