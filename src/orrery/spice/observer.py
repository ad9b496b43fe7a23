"""Observer geodetic position and local east/north/up frame in Earth body-fixed coordinates."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from orrery.constants import EARTH_FLAT, EARTH_RAD_KM
from orrery.params import Observer


def observer_position(observer: Observer) -> np.ndarray:
    """Return the observer's position in the Earth body-fixed frame (km).

    Geodetic latitude/longitude and altitude above the GRS 80 spheroid.

    Parameters:
        observer: Observer location.

    Returns:
        Length-3 array in km.
    """
    rectan = cspyce.georec(
        math.radians(observer.longitude_deg),
        math.radians(observer.latitude_deg),
        observer.altitude_m / 1000.0,
        EARTH_RAD_KM,
        EARTH_FLAT,
    )
    return np.asarray(rectan, dtype=np.float64)


def enu_matrix(observer: Observer) -> np.ndarray:
    """Rotation from Earth body-fixed to local east/north/up at the observer.

    Rows are the east, north and up unit vectors, so ``enu_matrix(obs) @ v``
    gives a body-fixed vector's (east, north, up) components.
    """
    lat = math.radians(observer.latitude_deg)
    lon = math.radians(observer.longitude_deg)
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    sin_lon, cos_lon = math.sin(lon), math.cos(lon)
    return np.array(
        [
            [-sin_lon, cos_lon, 0.0],
            [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],
            [cos_lat * cos_lon, cos_lat * sin_lon, sin_lat],
        ],
        dtype=np.float64,
    )
