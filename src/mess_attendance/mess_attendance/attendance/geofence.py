from __future__ import annotations

from typing import Any, Optional

from ..common.geo import distance_meters
from ..common.validators import require_coordinate
from ..core.exceptions import OutsideGeofenceError
from ..core.settings import GeofenceSettings


class GeofenceGuard:
    """Optional location gate in front of the ledger.

    With no geofence configured every request passes and coordinates are
    ignored.
    """

    def __init__(self, geofence: Optional[GeofenceSettings] = None):
        self._geofence = geofence

    @property
    def enabled(self) -> bool:
        return self._geofence is not None

    def check(self, latitude: Any, longitude: Any) -> Optional[float]:
        """Return the distance to the site in meters, or None when disabled."""

        if self._geofence is None:
            return None

        lat = require_coordinate(latitude, "latitude", limit=90)
        lon = require_coordinate(longitude, "longitude", limit=180)
        distance = distance_meters(lat, lon, self._geofence.latitude, self._geofence.longitude)
        if distance > self._geofence.radius_meters:
            raise OutsideGeofenceError(
                f"You are {int(distance)}m away from the mess. Punching is allowed within "
                f"{int(self._geofence.radius_meters)}m."
            )
        return distance
