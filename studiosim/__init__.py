# studiosim — Channel Growth Simulation Engine & Autoplay Balance Tooling

from studiosim.errors import (
    StudioError,
    ValidationError,
    UploadError,
    InvalidTitle,
    InvalidGenre,
    InvalidSubGenre,
    InvalidRecordingMethod,
    InsufficientEnergy,
    InsufficientFunds,
    MaxLevelReached,
    NotEligible,
    AlreadyPlayedToday,
    ChannelLimitReached,
    UnknownChannel,
    SessionStateError,
)
from studiosim.definition import StudioConfig, DEFAULT_CONFIG
from studiosim.catalog import (
    EquipmentSlot,
    EquipmentLevel,
    EquipmentDef,
    EQUIPMENT,
    GENRES,
    RecordingMethod,
    RECORDING_METHODS,
    MilestoneType,
    AchievementDef,
    ACHIEVEMENTS,
)
from studiosim.ledger import BoostKind, BoostGrant, BoostLedger, StreamBonus
from studiosim.channel import Channel, Video, EquipmentLevels, new_channel
from studiosim.economy import UploadChoices, UploadOutcome, ChannelDelta, compute_upload, apply_upload
from studiosim.day import DayReport, advance_day
from studiosim.equipment import UpgradeResult, upgrade_equipment
from studiosim.monetization import evaluate_monetization, latch_monetization, activate_monetization
from studiosim.achievement import (
    evaluate_achievements,
    grant_achievements,
    achievement_progress,
)
from studiosim.minigames import (
    MinigameKind,
    MinigameSession,
    SessionPhase,
    CommunitySession,
    ThumbnailSession,
    StreamSession,
    start_minigame,
)
from studiosim.runtime import StudioRuntime
from studiosim.storage import ChannelStore, GlobalStats
from studiosim.strategy import Strategy, SkillProfile, GreedyUploader, SaveForBest
from studiosim.metrics import MetricsCollector
from studiosim.simulation import Simulation, run_monte_carlo
from studiosim.report import SimulationReport, build_report
from studiosim.formatting import format_text_report

__all__ = [
    # Errors
    "StudioError",
    "ValidationError",
    "UploadError",
    "InvalidTitle",
    "InvalidGenre",
    "InvalidSubGenre",
    "InvalidRecordingMethod",
    "InsufficientEnergy",
    "InsufficientFunds",
    "MaxLevelReached",
    "NotEligible",
    "AlreadyPlayedToday",
    "ChannelLimitReached",
    "UnknownChannel",
    "SessionStateError",
    # Config
    "StudioConfig",
    "DEFAULT_CONFIG",
    # Catalog
    "EquipmentSlot",
    "EquipmentLevel",
    "EquipmentDef",
    "EQUIPMENT",
    "GENRES",
    "RecordingMethod",
    "RECORDING_METHODS",
    "MilestoneType",
    "AchievementDef",
    "ACHIEVEMENTS",
    # Data model
    "BoostKind",
    "BoostGrant",
    "BoostLedger",
    "StreamBonus",
    "Channel",
    "Video",
    "EquipmentLevels",
    "new_channel",
    # Core operations
    "UploadChoices",
    "UploadOutcome",
    "ChannelDelta",
    "compute_upload",
    "apply_upload",
    "DayReport",
    "advance_day",
    "UpgradeResult",
    "upgrade_equipment",
    "evaluate_monetization",
    "latch_monetization",
    "activate_monetization",
    "evaluate_achievements",
    "grant_achievements",
    "achievement_progress",
    # Minigames
    "MinigameKind",
    "MinigameSession",
    "SessionPhase",
    "CommunitySession",
    "ThumbnailSession",
    "StreamSession",
    "start_minigame",
    # Runtime
    "StudioRuntime",
    # Persistence
    "ChannelStore",
    "GlobalStats",
    # Simulation
    "Strategy",
    "SkillProfile",
    "GreedyUploader",
    "SaveForBest",
    "MetricsCollector",
    "Simulation",
    "run_monte_carlo",
    "SimulationReport",
    "build_report",
    "format_text_report",
]
