"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# face-api.js computes 128-dimensional descriptors
FACE_DESCRIPTOR_LENGTH = 128

PIN_LENGTH = 4
DEFAULT_KIOSK_PIN = "1234"

DEFAULT_TIMEZONE = "UTC"

EARTH_RADIUS_METERS = 6371e3

KIOSK_PIN_SETTING = "kiosk_pin_hash"
