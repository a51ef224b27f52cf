"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .tier import Tier, Division

__all__ = [
    'Region',
    'QueueType',
    'Tier',
    'Division',
]
