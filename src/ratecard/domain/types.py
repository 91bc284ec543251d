"""Domain enumerations and display names for the deal valuation engine."""

from enum import StrEnum


class CreatorTier(StrEnum):
    """Creator size classes, ordered from smallest to largest audience."""

    NANO = "nano"
    MICRO = "micro"
    MID = "mid"
    RISING = "rising"
    MACRO = "macro"
    MEGA = "mega"
    CELEBRITY = "celebrity"


class Platform(StrEnum):
    """Social platforms a deliverable can be published on."""

    INSTAGRAM = "instagram"
    TIKTOK = "tiktok"
    YOUTUBE = "youtube"
    YOUTUBE_SHORTS = "youtube_shorts"
    TWITTER = "twitter"
    THREADS = "threads"
    PINTEREST = "pinterest"
    LINKEDIN = "linkedin"
    BLUESKY = "bluesky"
    LEMON8 = "lemon8"
    SNAPCHAT = "snapchat"
    TWITCH = "twitch"


class ContentFormat(StrEnum):
    """Content formats a brand can request."""

    STATIC = "static"
    CAROUSEL = "carousel"
    STORY = "story"
    REEL = "reel"
    VIDEO = "video"
    LIVE = "live"
    UGC = "ugc"


class Niche(StrEnum):
    """Content niches with a known market premium."""

    FINANCE = "finance"
    BUSINESS = "business"
    TECH = "tech"
    LEGAL = "legal"
    MEDICAL = "medical"
    LUXURY = "luxury"
    BEAUTY = "beauty"
    FITNESS = "fitness"
    FOOD = "food"
    TRAVEL = "travel"
    PARENTING = "parenting"
    LIFESTYLE = "lifestyle"
    ENTERTAINMENT = "entertainment"
    COMEDY = "comedy"
    MUSIC = "music"
    GAMING = "gaming"


class Region(StrEnum):
    """Primary audience market of a creator."""

    UNITED_STATES = "united_states"
    UNITED_KINGDOM = "united_kingdom"
    CANADA = "canada"
    AUSTRALIA = "australia"
    WESTERN_EUROPE = "western_europe"
    UAE_GULF = "uae_gulf"
    SINGAPORE_HK = "singapore_hk"
    JAPAN = "japan"
    SOUTH_KOREA = "south_korea"
    BRAZIL = "brazil"
    MEXICO = "mexico"
    INDIA = "india"
    SOUTHEAST_ASIA = "southeast_asia"
    EASTERN_EUROPE = "eastern_europe"
    AFRICA = "africa"
    OTHER = "other"


class CurrencyCode(StrEnum):
    """Currencies a quote can be expressed in."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AUD = "AUD"
    BRL = "BRL"
    INR = "INR"
    MXN = "MXN"


class ExclusivityLevel(StrEnum):
    """Scope of competitor exclusivity a brand requests."""

    NONE = "none"
    CATEGORY = "category"
    FULL = "full"


class WhitelistingType(StrEnum):
    """Level of access a brand gets to run ads through creator content."""

    NONE = "none"
    ORGANIC = "organic"
    PAID_SOCIAL = "paid_social"
    FULL_MEDIA = "full_media"


class ComplexityLevel(StrEnum):
    """Production effort required for a deliverable."""

    SIMPLE = "simple"
    STANDARD = "standard"
    COMPLEX = "complex"
    PRODUCTION = "production"


class UGCFormat(StrEnum):
    """Asset types for user-generated content deals."""

    VIDEO = "video"
    PHOTO = "photo"


class SeasonalPeriod(StrEnum):
    """High-demand campaign windows."""

    Q4_HOLIDAY = "q4_holiday"
    BACK_TO_SCHOOL = "back_to_school"
    VALENTINES = "valentines"
    SUMMER = "summer"
    STANDARD = "standard"


class DealLength(StrEnum):
    """Commitment length of a retainer deal."""

    ONE_TIME = "one_time"
    MONTHLY = "monthly"
    THREE_MONTH = "3_month"
    SIX_MONTH = "6_month"
    TWELVE_MONTH = "12_month"


class AffiliateCategory(StrEnum):
    """Product categories with known affiliate commission ranges."""

    FASHION_APPAREL = "fashion_apparel"
    BEAUTY_SKINCARE = "beauty_skincare"
    TECH_ELECTRONICS = "tech_electronics"
    HOME_LIFESTYLE = "home_lifestyle"
    FOOD_BEVERAGE = "food_beverage"
    HEALTH_SUPPLEMENTS = "health_supplements"
    DIGITAL_PRODUCTS = "digital_products"
    SERVICES_SUBSCRIPTIONS = "services_subscriptions"
    OTHER = "other"


class BonusMetric(StrEnum):
    """Metrics a performance bonus can be tied to."""

    VIEWS = "views"
    ENGAGEMENT = "engagement"
    CLICKS = "clicks"
    CONVERSIONS = "conversions"


class PricingModel(StrEnum):
    """Pricing branch that produced a quote."""

    FLAT_FEE = "flat_fee"
    HYBRID = "hybrid"
    AFFILIATE = "affiliate"
    PERFORMANCE = "performance"
    UGC = "ugc"
    RETAINER = "retainer"


class LayerOperation(StrEnum):
    """How a pricing layer combines with the running price."""

    BASE = "base"
    MULTIPLY = "multiply"
    ADD = "add"


class BrandTier(StrEnum):
    """Market standing of the brand behind an offer."""

    MAJOR = "major"
    ESTABLISHED = "established"
    EMERGING = "emerging"
    UNKNOWN = "unknown"


class PaymentTerms(StrEnum):
    """When the creator gets paid."""

    UPFRONT = "upfront"
    NET_15 = "net_15"
    NET_30 = "net_30"
    NET_60 = "net_60"
    NET_90 = "net_90"
    UNKNOWN = "unknown"


class ApprovalProcess(StrEnum):
    """How much sign-off friction the brand's review process adds."""

    SIMPLE = "simple"
    MODERATE = "moderate"
    COMPLEX = "complex"
    UNKNOWN = "unknown"


class QualityLevel(StrEnum):
    """Qualitative band of a deal-quality score."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    CAUTION = "caution"


class Recommendation(StrEnum):
    """Action suggested to the creator for a scored deal."""

    TAKE_DEAL = "take_deal"
    NEGOTIATE = "negotiate"
    DECLINE = "decline"


class FitLevel(StrEnum):
    """Qualitative band of the legacy fit score."""

    PERFECT = "perfect"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MarketPosition(StrEnum):
    """Where a quoted rate sits against the tier's market benchmark."""

    ABOVE = "above"
    AT = "at"
    BELOW = "below"


# Tiers in ascending order of audience size
TIER_ORDER: tuple[CreatorTier, ...] = tuple(CreatorTier)

TIER_DISPLAY_NAMES: dict[CreatorTier, str] = {
    CreatorTier.NANO: "Nano",
    CreatorTier.MICRO: "Micro",
    CreatorTier.MID: "Mid-Tier",
    CreatorTier.RISING: "Rising",
    CreatorTier.MACRO: "Macro",
    CreatorTier.MEGA: "Mega",
    CreatorTier.CELEBRITY: "Celebrity",
}

PLATFORM_DISPLAY_NAMES: dict[Platform, str] = {
    Platform.INSTAGRAM: "Instagram",
    Platform.TIKTOK: "TikTok",
    Platform.YOUTUBE: "YouTube",
    Platform.YOUTUBE_SHORTS: "YouTube Shorts",
    Platform.TWITTER: "Twitter/X",
    Platform.THREADS: "Threads",
    Platform.PINTEREST: "Pinterest",
    Platform.LINKEDIN: "LinkedIn",
    Platform.BLUESKY: "Bluesky",
    Platform.LEMON8: "Lemon8",
    Platform.SNAPCHAT: "Snapchat",
    Platform.TWITCH: "Twitch",
}

FORMAT_DISPLAY_NAMES: dict[ContentFormat, str] = {
    ContentFormat.STATIC: "Post",
    ContentFormat.CAROUSEL: "Carousel",
    ContentFormat.STORY: "Story",
    ContentFormat.REEL: "Reel",
    ContentFormat.VIDEO: "Video",
    ContentFormat.LIVE: "Live Stream",
    ContentFormat.UGC: "UGC Asset",
}

NICHE_DISPLAY_NAMES: dict[Niche, str] = {
    Niche.FINANCE: "Finance/Investing",
    Niche.BUSINESS: "B2B/Business",
    Niche.TECH: "Tech/Software",
    Niche.LEGAL: "Legal",
    Niche.MEDICAL: "Medical/Healthcare",
    Niche.LUXURY: "Luxury",
    Niche.BEAUTY: "Beauty/Skincare",
    Niche.FITNESS: "Fitness/Wellness",
    Niche.FOOD: "Food/Cooking",
    Niche.TRAVEL: "Travel",
    Niche.PARENTING: "Parenting/Family",
    Niche.LIFESTYLE: "Lifestyle",
    Niche.ENTERTAINMENT: "Entertainment",
    Niche.COMEDY: "Comedy",
    Niche.MUSIC: "Music",
    Niche.GAMING: "Gaming",
}

REGION_DISPLAY_NAMES: dict[Region, str] = {
    Region.UNITED_STATES: "United States",
    Region.UNITED_KINGDOM: "United Kingdom",
    Region.CANADA: "Canada",
    Region.AUSTRALIA: "Australia",
    Region.WESTERN_EUROPE: "Western Europe",
    Region.UAE_GULF: "UAE/Gulf States",
    Region.SINGAPORE_HK: "Singapore/Hong Kong",
    Region.JAPAN: "Japan",
    Region.SOUTH_KOREA: "South Korea",
    Region.BRAZIL: "Brazil",
    Region.MEXICO: "Mexico",
    Region.INDIA: "India",
    Region.SOUTHEAST_ASIA: "Southeast Asia",
    Region.EASTERN_EUROPE: "Eastern Europe",
    Region.AFRICA: "Africa",
    Region.OTHER: "Other",
}

WHITELISTING_DISPLAY_NAMES: dict[WhitelistingType, str] = {
    WhitelistingType.NONE: "No whitelisting",
    WhitelistingType.ORGANIC: "Organic whitelisting (brand can repost)",
    WhitelistingType.PAID_SOCIAL: "Paid social whitelisting",
    WhitelistingType.FULL_MEDIA: "Full media buy rights",
}

SEASONAL_DISPLAY_NAMES: dict[SeasonalPeriod, str] = {
    SeasonalPeriod.Q4_HOLIDAY: "Q4 Holiday Season (Nov-Dec)",
    SeasonalPeriod.BACK_TO_SCHOOL: "Back to School (Aug-Sep)",
    SeasonalPeriod.VALENTINES: "Valentine's Day (Feb 1-14)",
    SeasonalPeriod.SUMMER: "Summer Season (Jun-Jul)",
    SeasonalPeriod.STANDARD: "Standard Period",
}

AFFILIATE_CATEGORY_DISPLAY_NAMES: dict[AffiliateCategory, str] = {
    AffiliateCategory.FASHION_APPAREL: "Fashion & Apparel",
    AffiliateCategory.BEAUTY_SKINCARE: "Beauty & Skincare",
    AffiliateCategory.TECH_ELECTRONICS: "Tech & Electronics",
    AffiliateCategory.HOME_LIFESTYLE: "Home & Lifestyle",
    AffiliateCategory.FOOD_BEVERAGE: "Food & Beverage",
    AffiliateCategory.HEALTH_SUPPLEMENTS: "Health & Supplements",
    AffiliateCategory.DIGITAL_PRODUCTS: "Digital Products",
    AffiliateCategory.SERVICES_SUBSCRIPTIONS: "Services & Subscriptions",
    AffiliateCategory.OTHER: "Other",
}


def tier_rank(tier: CreatorTier) -> int:
    """Return the zero-based position of a tier, smallest audience first."""
    return TIER_ORDER.index(tier)
