"""Camera regions that fit a route on screen."""

from collections.abc import Sequence

from otp_itineraries.domain.geometry.bounding_box import bounding_rect_for_coordinates
from otp_itineraries.domain.geometry.projection import unproject
from otp_itineraries.domain.models.camera_region import CameraRegion
from otp_itineraries.domain.models.coordinate import Coordinate, MapPoint

DEFAULT_PADDING = 1.15


def fit_camera_region(
    coordinates: Sequence[Coordinate], padding: float = DEFAULT_PADDING
) -> CameraRegion | None:
    """Region showing all coordinates, with its span scaled by padding.

    Returns None for no coordinates and a zero-span region centred on the
    coordinate when there is only one.
    """
    if padding <= 0:
        raise ValueError(f"padding must be positive, got {padding}")

    rect = bounding_rect_for_coordinates(coordinates)
    if rect is None:
        return None
    if len(coordinates) == 1:
        return CameraRegion(center=coordinates[0], latitude_delta=0.0, longitude_delta=0.0)

    north_west = unproject(MapPoint(rect.origin_x, rect.origin_y))
    south_east = unproject(MapPoint(rect.max_x, rect.max_y))
    return CameraRegion(
        center=unproject(rect.center),
        latitude_delta=(north_west.latitude - south_east.latitude) * padding,
        longitude_delta=(south_east.longitude - north_west.longitude) * padding,
    )
