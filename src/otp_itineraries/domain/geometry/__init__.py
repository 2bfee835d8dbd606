"""Geometry: polyline codec, map projection, bounding boxes and camera fitting."""

from otp_itineraries.domain.geometry.polyline_codec import decode_polyline, encode_coordinates
from otp_itineraries.domain.geometry.projection import WORLD_SIZE, project, unproject
from otp_itineraries.domain.geometry.bounding_box import (
    bounding_rect_for_coordinates,
    calculate_bounding_box,
    leg_bounding_box,
    route_coordinates,
)
from otp_itineraries.domain.geometry.camera import fit_camera_region

__all__ = [
    "WORLD_SIZE",
    "bounding_rect_for_coordinates",
    "calculate_bounding_box",
    "decode_polyline",
    "encode_coordinates",
    "fit_camera_region",
    "leg_bounding_box",
    "project",
    "route_coordinates",
    "unproject",
]
