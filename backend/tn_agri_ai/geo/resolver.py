"""
Nearest-centroid resolution of a coordinate to a district soil profile.

Distances are squared planar degrees with no geodesic correction, which is
adequate across a single state. District and taluk centroids compete in the
same search.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

import numpy as np

from ..registry.profiles import RegionProfile, default_region, get_region


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Centroid:
    label: str
    latitude: float
    longitude: float
    region: str


@dataclass(frozen=True)
class Resolution:
    region: RegionProfile
    label: str
    distance_sq: float

    def to_dict(self):
        return {
            "district": self.region.name,
            "centroid": self.label,
            "distanceSq": round(self.distance_sq, 6),
        }


# (label, lat, lon, region). Taluk labels point at their parent district.
_CENTROIDS: Tuple[Centroid, ...] = tuple(
    Centroid(*row)
    for row in (
        ("Chennai", 13.08, 80.27, "Chennai"),
        ("Tiruvallur", 13.13, 79.91, "Tiruvallur"),
        ("Kanchipuram", 12.84, 79.70, "Kanchipuram"),
        ("Cuddalore", 11.75, 79.77, "Cuddalore"),
        ("Thanjavur", 10.79, 79.14, "Thanjavur"),
        ("Salem", 11.66, 78.16, "Salem"),
        ("Dharmapuri", 12.13, 78.16, "Dharmapuri"),
        ("Madurai", 9.93, 78.12, "Madurai"),
        ("Coimbatore", 11.02, 76.96, "Coimbatore"),
        ("Erode", 11.34, 77.72, "Erode"),
        ("Trichy", 10.79, 78.70, "Karur"),
        ("Nilgiris", 11.41, 76.70, "Nilgiris"),
        ("Vellore", 12.92, 79.13, "Vellore"),
        ("Tiruppur", 11.11, 77.34, "Tiruppur"),
        ("Namakkal", 11.22, 78.17, "Namakkal"),
        ("Krishnagiri", 12.52, 78.21, "Krishnagiri"),
        ("Tiruvannamalai", 12.23, 79.07, "Tiruvannamalai"),
        ("Villupuram", 11.94, 79.49, "Villupuram"),
        ("Pudukkottai", 10.38, 78.82, "Pudukkottai"),
        ("Theni", 10.01, 77.48, "Theni"),
        ("Dindigul", 10.36, 77.98, "Dindigul"),
        ("Sivaganga", 9.85, 78.48, "Sivaganga"),
        ("Virudhunagar", 9.58, 77.96, "Virudhunagar"),
        ("Ramanathapuram", 9.37, 78.83, "Ramanathapuram"),
        ("Thoothukudi", 8.76, 78.13, "Thoothukudi"),
        ("Tirunelveli", 8.71, 77.76, "Tirunelveli"),
        ("Kanyakumari", 8.08, 77.54, "Kanyakumari"),
        ("Karur", 10.96, 78.08, "Karur"),
        # Taluks
        ("Salem-Attur", 11.60, 78.60, "Salem"),
        ("Salem-Mettur", 11.79, 77.80, "Salem"),
        ("Salem-Yercaud", 11.78, 78.20, "Salem"),
        ("Salem-Sankagiri", 11.48, 77.88, "Salem"),
        ("Coimbatore-Pollachi", 10.66, 77.00, "Coimbatore"),
        ("Coimbatore-Mettupalayam", 11.30, 76.94, "Coimbatore"),
        ("Erode-Bhavani", 11.45, 77.68, "Erode"),
        ("Erode-Gobichettipalayam", 11.45, 77.43, "Erode"),
        ("Thanjavur-Kumbakonam", 10.96, 79.38, "Thanjavur"),
        ("Madurai-Melur", 10.03, 78.34, "Madurai"),
        ("Tiruppur-Avinashi", 11.19, 77.27, "Tiruppur"),
        ("Dindigul-Palani", 10.45, 77.52, "Dindigul"),
        ("Krishnagiri-Hosur", 12.74, 77.83, "Krishnagiri"),
        ("Vellore-Gudiyatham", 12.95, 78.87, "Vellore"),
        ("Dharmapuri-Palacode", 12.21, 77.93, "Dharmapuri"),
    )
)


class CentroidTable:
    """
    Precomputed centroid coordinates for a vectorised linear scan.

    Ties go to the first centroid in table order (np.argmin returns the first
    occurrence of the minimum).
    """

    def __init__(self, centroids: Iterable[Centroid]):
        self.centroids = tuple(centroids)
        if not self.centroids:
            raise ValueError("Centroid table must not be empty")
        self._coords = np.array(
            [(c.latitude, c.longitude) for c in self.centroids], dtype=float
        )
        self._regions = []
        for c in self.centroids:
            profile = get_region(c.region)
            if profile is None:
                logger.warning(
                    "Centroid %s references unknown district %s; using default",
                    c.label,
                    c.region,
                )
                profile = default_region()
            self._regions.append(profile)

    def __len__(self):
        return len(self.centroids)

    def bounds(self) -> Tuple[float, float, float, float]:
        lat_min, lon_min = self._coords.min(axis=0)
        lat_max, lon_max = self._coords.max(axis=0)
        return float(lat_min), float(lat_max), float(lon_min), float(lon_max)

    def resolve(self, lat: float, lon: float) -> Resolution:
        deltas = self._coords - np.array([lat, lon], dtype=float)
        dist_sq = np.einsum("ij,ij->i", deltas, deltas)
        if not np.isfinite(dist_sq).any():
            logger.warning("Non-finite coordinate (%s, %s); using default", lat, lon)
            return Resolution(default_region(), default_region().name, float("inf"))
        idx = int(np.nanargmin(dist_sq))
        return Resolution(self._regions[idx], self.centroids[idx].label, float(dist_sq[idx]))


CENTROID_TABLE = CentroidTable(_CENTROIDS)


def resolve(lat: float, lon: float, table: Optional[CentroidTable] = None) -> Resolution:
    """Nearest centroid to (lat, lon). Always returns a profile."""
    return (table or CENTROID_TABLE).resolve(lat, lon)


def resolve_region(lat: float, lon: float) -> RegionProfile:
    return resolve(lat, lon).region
