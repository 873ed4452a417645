"""Domain ports - interfaces for infrastructure to implement."""

from .checkpoint_store_port import CheckpointStorePort
from .pattern_generator_port import DrawingIntent, PatternGeneratorPort
from .remote_host_port import RemoteHostPort
from .saved_repository_port import SavedRepository, SavedRepositoryStorePort
from .version_control_port import VersionControlPort

__all__ = [
    "VersionControlPort",
    "CheckpointStorePort",
    "PatternGeneratorPort",
    "DrawingIntent",
    "RemoteHostPort",
    "SavedRepository",
    "SavedRepositoryStorePort",
]
