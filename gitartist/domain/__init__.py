"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import Drawing

# Errors
from .errors import (
    AuthenticationError,
    CommitStepError,
    ConfigurationError,
    GitArtistError,
    GitOperationError,
    NothingToUndoError,
    PatternGenerationError,
    RemoteHostError,
    RepositoryExistsError,
    RepositorySetupError,
    TemplateError,
)

# Ports
from .ports import (
    CheckpointStorePort,
    DrawingIntent,
    PatternGeneratorPort,
    RemoteHostPort,
    SavedRepository,
    SavedRepositoryStorePort,
    VersionControlPort,
)

# Services
from .services import (
    CALENDAR_WEEKS,
    AnchorPolicy,
    CommitDensityTranslator,
    ShapeLibrary,
    TextRenderer,
    load_pixels_from_file,
    normalize_to_sunday,
    parse_anchor_date,
    parse_pixels,
    plan_date,
    resolve_anchor,
)

# Value Objects
from .values import (
    DAYS_PER_WEEK,
    DENSITY_TABLE,
    MAX_DENSITY,
    MIN_DENSITY,
    AuthorIdentity,
    CheckpointAt,
    CommitOperation,
    CommitPlanEntry,
    DensityRange,
    NoHistoryYet,
    Pixel,
    UndoCheckpoint,
    parse_checkpoint,
    range_for,
)

__all__ = [
    # Values
    "Pixel",
    "DAYS_PER_WEEK",
    "MIN_DENSITY",
    "MAX_DENSITY",
    "AuthorIdentity",
    "DensityRange",
    "DENSITY_TABLE",
    "range_for",
    "CommitPlanEntry",
    "CommitOperation",
    "NoHistoryYet",
    "CheckpointAt",
    "UndoCheckpoint",
    "parse_checkpoint",
    # Entities
    "Drawing",
    # Services
    "AnchorPolicy",
    "CALENDAR_WEEKS",
    "resolve_anchor",
    "normalize_to_sunday",
    "parse_anchor_date",
    "plan_date",
    "CommitDensityTranslator",
    "TextRenderer",
    "ShapeLibrary",
    "parse_pixels",
    "load_pixels_from_file",
    # Ports
    "VersionControlPort",
    "CheckpointStorePort",
    "PatternGeneratorPort",
    "DrawingIntent",
    "RemoteHostPort",
    "SavedRepository",
    "SavedRepositoryStorePort",
    # Errors
    "GitArtistError",
    "ConfigurationError",
    "NothingToUndoError",
    "GitOperationError",
    "CommitStepError",
    "RemoteHostError",
    "AuthenticationError",
    "RepositoryExistsError",
    "RepositorySetupError",
    "PatternGenerationError",
    "TemplateError",
]
