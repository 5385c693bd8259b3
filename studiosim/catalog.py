from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


# ── Equipment ────────────────────────────────────────────────────────


class EquipmentSlot(str, Enum):
    CAMERA = "camera"
    MICROPHONE = "microphone"
    EDITING_SOFTWARE = "editing_software"
    DECORATION = "decoration"


@dataclass(frozen=True)
class EquipmentLevel:
    """One rung of an equipment ladder.

    ``stat_boost`` is a multiplicative bonus fraction for camera, microphone
    and editing software, and flat extra max energy for decoration.
    """

    level: int
    cost: float
    description: str
    stat_boost: float = 0.0


@dataclass(frozen=True)
class EquipmentDef:
    slot: EquipmentSlot
    display_name: str
    description: str
    levels: tuple[EquipmentLevel, ...]

    @property
    def max_level(self) -> int:
        return len(self.levels)

    def level(self, level: int) -> EquipmentLevel:
        if not 1 <= level <= self.max_level:
            raise ValueError(f"{self.slot.value} has no level {level}")
        return self.levels[level - 1]

    def next_level(self, level: int) -> EquipmentLevel | None:
        if level >= self.max_level:
            return None
        return self.levels[level]


EQUIPMENT: dict[EquipmentSlot, EquipmentDef] = {
    EquipmentSlot.CAMERA: EquipmentDef(
        slot=EquipmentSlot.CAMERA,
        display_name="Camera",
        description="Improves the visual quality of your videos.",
        levels=(
            EquipmentLevel(1, 0, "Basic phone"),
            EquipmentLevel(2, 50, "HD webcam", 0.05),
            EquipmentLevel(3, 500, "DSLR camera", 0.10),
            EquipmentLevel(4, 1000, "Professional camera", 0.15),
            EquipmentLevel(5, 5000, "Cinema camera", 0.20),
        ),
    ),
    EquipmentSlot.MICROPHONE: EquipmentDef(
        slot=EquipmentSlot.MICROPHONE,
        display_name="Microphone",
        description="Improves audio quality.",
        levels=(
            EquipmentLevel(1, 0, "Built-in microphone"),
            EquipmentLevel(2, 50, "USB microphone", 0.03),
            EquipmentLevel(3, 500, "Condenser microphone", 0.07),
            EquipmentLevel(4, 1000, "Professional microphone", 0.10),
            EquipmentLevel(5, 5000, "Recording studio", 0.15),
        ),
    ),
    EquipmentSlot.EDITING_SOFTWARE: EquipmentDef(
        slot=EquipmentSlot.EDITING_SOFTWARE,
        display_name="Editing Software",
        description="Improves editing quality and watch time.",
        levels=(
            EquipmentLevel(1, 0, "Free basic editor"),
            EquipmentLevel(2, 100, "Amateur editor", 0.05),
            EquipmentLevel(3, 750, "Semi-pro editor", 0.10),
            EquipmentLevel(4, 1500, "Professional editor", 0.15),
            EquipmentLevel(5, 7000, "Hollywood editing suite", 0.20),
        ),
    ),
    EquipmentSlot.DECORATION: EquipmentDef(
        slot=EquipmentSlot.DECORATION,
        display_name="Set Decoration",
        description="Makes the studio look better and raises max energy.",
        levels=(
            EquipmentLevel(1, 0, "Empty wall"),
            EquipmentLevel(2, 30, "Generic poster", 10),
            EquipmentLevel(3, 200, "LED lights and shelf", 20),
            EquipmentLevel(4, 800, "Basic themed set", 30),
            EquipmentLevel(5, 3000, "Custom professional studio", 50),
        ),
    ),
}

# Slots whose stat_boost feeds the upload quality multiplier
QUALITY_SLOTS = (
    EquipmentSlot.CAMERA,
    EquipmentSlot.MICROPHONE,
    EquipmentSlot.EDITING_SOFTWARE,
)


# ── Content ──────────────────────────────────────────────────────────


GENRES: dict[str, tuple[str, ...]] = {
    "Gaming": ("Fortnite", "Roblox", "Minecraft", "League of Legends", "Valorant", "Other"),
    "Music": ("Classical", "Dubstep", "Rap", "Pop", "Rock", "Cover", "Original", "Other"),
    "Vlogs": ("Daily", "Travel", "Events", "Opinion", "Other"),
    "Education": ("Tutorials", "Science", "History", "Languages", "Other"),
    "Comedy": ("Sketches", "Stand-up", "Parodies", "Pranks", "Other"),
    "Technology": ("Reviews", "Software Tutorials", "Tech News", "Gadgets", "Other"),
    "Beauty": ("Makeup", "Skincare", "Fashion", "Hauls", "Other"),
    "Cooking": ("Recipes", "Baking", "Fast Food", "International", "Other"),
}


@dataclass(frozen=True)
class RecordingMethod:
    name: str
    multiplier: float


RECORDING_METHODS: tuple[RecordingMethod, ...] = (
    RecordingMethod("Live (Low Quality)", 1.0),
    RecordingMethod("Recorded (Medium Quality)", 1.2),
    RecordingMethod("Professional (High Quality)", 1.5),
)


def get_recording_method(name: str) -> RecordingMethod | None:
    for method in RECORDING_METHODS:
        if method.name == name:
            return method
    return None


# ── Achievements ─────────────────────────────────────────────────────


class MilestoneType(str, Enum):
    SUBSCRIBERS = "subscribers"
    VIEWS = "views"
    WATCH_HOURS = "watch_hours"
    MONEY = "money"
    TOTAL_EARNINGS = "total_earnings"
    VIDEOS_UPLOADED = "videos_uploaded"


@dataclass(frozen=True)
class AchievementDef:
    """A milestone that unlocks once and may pay a one-time reward."""

    id: str
    name: str
    description: str
    milestone_type: MilestoneType
    milestone_value: float
    reward_money: float = 0.0
    reward_energy: float = 0.0


def _ach(
    id: str,
    name: str,
    description: str,
    milestone_type: MilestoneType,
    value: float,
    money: float = 0.0,
    energy: float = 0.0,
) -> AchievementDef:
    return AchievementDef(id, name, description, milestone_type, value, money, energy)


_S = MilestoneType.SUBSCRIBERS
_V = MilestoneType.VIEWS
_W = MilestoneType.WATCH_HOURS
_U = MilestoneType.VIDEOS_UPLOADED
_E = MilestoneType.TOTAL_EARNINGS

ACHIEVEMENTS: tuple[AchievementDef, ...] = (
    _ach("subs_10", "First Steps", "Reach 10 subscribers.", _S, 10, money=10),
    _ach("subs_100", "Growing Community", "Reach 100 subscribers.", _S, 100, money=50),
    _ach("subs_500", "Half a K", "Reach 500 subscribers.", _S, 500, money=100),
    _ach("subs_1000", "The Big K", "Reach 1,000 subscribers.", _S, 1000, money=200, energy=10),
    _ach("subs_10000", "Viral Sensation", "Reach 10,000 subscribers.", _S, 10000, money=1000, energy=20),
    _ach("subs_100000", "Silver Button (Virtual)", "Reach 100,000 subscribers.", _S, 100000, money=5000, energy=50),
    _ach("subs_1000000", "Subscriber Millionaire", "Reach 1,000,000 subscribers.", _S, 1000000, money=25000, energy=100),
    _ach("views_1000", "Seen by Thousands", "Reach 1,000 total views.", _V, 1000, money=20),
    _ach("views_10000", "Rising Popularity", "Reach 10,000 total views.", _V, 10000, money=100),
    _ach("views_100000", "King of Views", "Reach 100,000 total views.", _V, 100000, money=500),
    _ach("views_1000000", "View Dominator", "Reach 1,000,000 total views.", _V, 1000000, money=2000),
    _ach("watch_100", "Hooking the Audience", "Reach 100 watch hours.", _W, 100, money=30),
    _ach("watch_1000", "Ready to Monetize", "Reach 1,000 watch hours.", _W, 1000, money=150),
    _ach("videos_1", "First Video!", "Upload your first video.", _U, 1),
    _ach("videos_10", "Consistent Creator", "Upload 10 videos.", _U, 10, money=50),
    _ach("videos_50", "Growing Library", "Upload 50 videos.", _U, 50, money=250),
    _ach("money_100", "First Income", "Earn your first $100.", _E, 100),
    _ach("money_1000", "A Thousand Dollars", "Earn $1,000 in total.", _E, 1000),
    _ach("money_10000", "Content Mogul", "Earn $10,000 in total.", _E, 10000),
)


def get_achievement(id: str) -> AchievementDef | None:
    for a in ACHIEVEMENTS:
        if a.id == id:
            return a
    return None


# ── Community responder ──────────────────────────────────────────────


@dataclass(frozen=True)
class CommentOption:
    text: str
    points: int
    feedback: str
    is_correct: bool = False


@dataclass(frozen=True)
class GameComment:
    id: str
    author: str
    text: str
    type: str  # positive | neutral | mildly_negative | toxic_spam
    options: tuple[CommentOption, ...] = field(default_factory=tuple)


COMMENTS: tuple[GameComment, ...] = (
    GameComment("pos1", "LoyalFan01", "Best video I've seen in weeks! Keep it up!", "positive", (
        CommentOption("Thank you so much! 😊", 5, "Perfect reply!", True),
        CommentOption("I know.", 0, "A bit arrogant, don't you think?"),
        CommentOption("Ignore", -1, "Engagement is key."),
    )),
    GameComment("pos2", "NewSub44", "Just found your channel and subscribed. Great content.", "positive", (
        CommentOption("Welcome! Thanks for subscribing.", 5, "Excellent welcome!", True),
        CommentOption("Ok.", 1, "You could be more enthusiastic."),
        CommentOption("Report as spam", -5, "It's not spam, it's a new fan!"),
    )),
    GameComment("neu1", "Asker7", "What software do you use to edit your videos?", "neutral", (
        CommentOption('I use "EditProX" (answer kindly)', 3, "Useful info!", True),
        CommentOption("It's a secret.", 0, "Sharing is good for the community."),
        CommentOption("Ignore", -1, "A missed chance to engage."),
    )),
    GameComment("neu2", "CuriousGeorge", "Could you make a video about a related topic?", "neutral", (
        CommentOption("Great idea! I'll consider it.", 3, "Audiences like being heard!", True),
        CommentOption("I don't take requests.", 0, "A bit blunt, but fair."),
        CommentOption("Maybe. (vague)", 1, "Try to be clearer."),
    )),
    GameComment("neg1", "ConstructiveCritic", "The audio was a bit low in this one, but the idea is good.", "mildly_negative", (
        CommentOption("Thanks for the feedback, I'll keep it in mind.", 4, "Maturity first!", True),
        CommentOption("My audio is perfect.", -2, "Refusing criticism doesn't help."),
        CommentOption("Delete comment", -3, "That was constructive criticism..."),
    )),
    GameComment("neg2", "Honest", "This video felt a little boring...", "mildly_negative", (
        CommentOption("Sorry you didn't like it, I'll try to improve!", 3, "Good attitude!", True),
        CommentOption("Then don't watch it.", -2, "That drives viewers away."),
        CommentOption("Ignore", 0, "Sometimes silence is best."),
    )),
    GameComment("spam1", "BotSpammer77", "BUY MY COURSES!! MAKE MONEY NOW!! LINK IN BIO!", "toxic_spam", (
        CommentOption("Report as spam and delete", 5, "Clean community!", True),
        CommentOption('Reply: "No, thanks."', -1, "Don't engage with spam."),
        CommentOption("Ask for details", -3, "It's a trap!"),
    )),
    GameComment("spam2", "ImTheBest", "SUB 4 SUB?? ANSWER FAST!!", "toxic_spam", (
        CommentOption("Delete comment", 4, "Keep your comment section relevant.", True),
        CommentOption('Reply: "Sure, subbed!"', -5, "Sub for sub isn't real growth."),
        CommentOption("Ignore", 1, "Deleting is better for spam."),
    )),
    GameComment("pos3", "LearningWithYou", "Thanks! This tutorial helped me so much.", "positive", (
        CommentOption("So glad it helped! 😄", 5, "Excellent interaction!", True),
        CommentOption("You're welcome.", 2, "Short but polite."),
        CommentOption("Ask them to share the video", 0, "A bit pushy for this comment."),
    )),
    GameComment("neg3", "TotallyLost", "You didn't explain part XYZ well, very confusing.", "mildly_negative", (
        CommentOption("I'll be clearer next time, which part confused you?", 4, "Seeking to improve is key!", True),
        CommentOption("The problem is you, not my explanation.", -3, "That's not productive."),
        CommentOption("Ignore", 0, "You could have learned something."),
    )),
)


# ── Thumbnail optimizer ──────────────────────────────────────────────


THUMBNAIL_CATEGORIES = ("background", "object", "text")


@dataclass(frozen=True)
class ThumbnailComponent:
    id: str
    component_type: str  # one of THUMBNAIL_CATEGORIES
    display_name: str
    quality: str  # good | neutral | bad
    points: int


THUMBNAIL_COMPONENTS: tuple[ThumbnailComponent, ...] = (
    ThumbnailComponent("bg_red_solid", "background", "Solid red", "good", 8),
    ThumbnailComponent("bg_blue_gradient", "background", "Blue gradient", "good", 10),
    ThumbnailComponent("bg_grey_plain", "background", "Plain grey", "neutral", 3),
    ThumbnailComponent("bg_yellow_bright", "background", "Bright yellow", "good", 7),
    ThumbnailComponent("bg_black_solid", "background", "Solid black", "neutral", 5),
    ThumbnailComponent("bg_green_subtle", "background", "Soft green", "good", 8),
    ThumbnailComponent("bg_purple_vibrant", "background", "Vibrant purple", "good", 9),
    ThumbnailComponent("bg_brown_dull", "background", "Dull brown", "bad", -2),
    ThumbnailComponent("bg_pink_flashy", "background", "Flashy pink", "neutral", 4),
    ThumbnailComponent("bg_white_clean", "background", "Clean white", "good", 6),
    ThumbnailComponent("obj_rocket", "object", "Rocket", "good", 10),
    ThumbnailComponent("obj_star", "object", "Star", "good", 8),
    ThumbnailComponent("obj_face_surprise", "object", "Surprised face", "good", 9),
    ThumbnailComponent("obj_thumbs_up", "object", "Thumbs up", "good", 7),
    ThumbnailComponent("obj_poop", "object", "Poop emoji", "bad", -5),
    ThumbnailComponent("obj_question", "object", "Question mark", "neutral", 3),
    ThumbnailComponent("obj_fire", "object", "Fire", "good", 10),
    ThumbnailComponent("obj_lightbulb", "object", "Lightbulb", "good", 7),
    ThumbnailComponent("obj_ghost", "object", "Ghost", "neutral", 4),
    ThumbnailComponent("obj_heart", "object", "Heart", "good", 8),
    ThumbnailComponent("txt_epic", "text", '"EPIC!" (Impact)', "good", 10),
    ThumbnailComponent("txt_new", "text", '"NEW VIDEO" (Arial)', "good", 7),
    ThumbnailComponent("txt_boring", "text", '"Interesting" (Times)', "bad", -3),
    ThumbnailComponent("txt_clickbait", "text", '"YOU WON\'T BELIEVE IT" (Comic Sans)', "neutral", 4),
    ThumbnailComponent("txt_urgent", "text", '"URGENT!" (Impact, red)', "good", 9),
    ThumbnailComponent("txt_simple", "text", '"Tutorial" (Helvetica)', "neutral", 5),
    ThumbnailComponent("txt_tiny_unreadable", "text", '"secret" (tiny)', "bad", -5),
    ThumbnailComponent("txt_wow", "text", '"WOW!" (Impact, blue)', "good", 10),
    ThumbnailComponent("txt_question", "text", '"WHAT HAPPENED?" (bold)', "good", 8),
    ThumbnailComponent("txt_cool_style", "text", '"Cool Style" (script)', "neutral", 3),
)


# ── Streamer sensation ───────────────────────────────────────────────


class StreamPromptType(str, Enum):
    QUICK_CLICK = "quick_click"
    KEYWORD_TYPE = "keyword_type"
    EMOJI_SELECT = "emoji_select"


@dataclass(frozen=True)
class StreamPrompt:
    id: str
    type: StreamPromptType
    display_text: str
    duration_seconds: int
    points_for_success: float
    points_for_failure: float
    button_text: str = ""
    keyword: str = ""
    emojis: tuple[str, ...] = ()
    correct_emoji: str = ""


_QC = StreamPromptType.QUICK_CLICK
_KW = StreamPromptType.KEYWORD_TYPE
_EM = StreamPromptType.EMOJI_SELECT

STREAM_PROMPTS: tuple[StreamPrompt, ...] = (
    StreamPrompt("qc1", _QC, "New SUB! Say hi!", 5, 12, -8, button_text="Hi, new sub!"),
    StreamPrompt("qc2", _QC, "Someone sent a DONATION! Thank them!", 5, 15, -7, button_text="Thanks for the donation!"),
    StreamPrompt("qc3", _QC, "Chat is ON FIRE! Hype it up!", 6, 10, -5, button_text="Let's go team!"),
    StreamPrompt("qc4", _QC, "EPIC moment! React!", 5, 13, -6, button_text="Incredible!"),
    StreamPrompt("kw1", _KW, "Chat wants to know about the 'GIVEAWAY'", 8, 15, -10, keyword="GIVEAWAY"),
    StreamPrompt("kw2", _KW, "Announce the 'EXCLUSIVE'!", 7, 14, -9, keyword="EXCLUSIVE"),
    StreamPrompt("kw3", _KW, "Share the code 'PROMO123'", 10, 18, -12, keyword="PROMO123"),
    StreamPrompt("kw4", _KW, "They're asking for the 'GUIDE'", 8, 13, -8, keyword="GUIDE"),
    StreamPrompt("em1", _EM, "Chat is happy! React:", 6, 10, -5, emojis=("🥳", "😢", "😠"), correct_emoji="🥳"),
    StreamPrompt("em2", _EM, "Something funny happened! React:", 6, 12, -6, emojis=("😂", "🤔", "😱"), correct_emoji="😂"),
    StreamPrompt("em3", _EM, "Show your support! React:", 5, 11, -5, emojis=("👍", "👎", "🤷"), correct_emoji="👍"),
    StreamPrompt("em4", _EM, "Surprise in chat! React:", 6, 12, -7, emojis=("😮", "😴", "😐"), correct_emoji="😮"),
)
