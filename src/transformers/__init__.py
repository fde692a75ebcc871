"""Data transformation package."""

from src.transformers.availability_transformer import AvailabilityTransformer
from src.transformers.reservation_transformer import ReservationTransformer

__all__ = [
    "AvailabilityTransformer",
    "ReservationTransformer",
]
