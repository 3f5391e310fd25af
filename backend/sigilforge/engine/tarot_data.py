"""Tarot reference data: Major Arcana, Minor suits, historical variants and spreads."""

from __future__ import annotations

from types import MappingProxyType

from sigilforge.models.tarot import ArcanaInfo, CardColors, SpreadPosition, SuitInfo, TarotSpread, TarotVariant


def _colors(primary: str, secondary: str, accent: str) -> CardColors:
    return CardColors(primary=primary, secondary=secondary, accent=accent)


def _arcana(number, name, element, imagery, colors, symbols, keywords, symbolism, category) -> ArcanaInfo:
    return ArcanaInfo(
        number=number,
        name=name,
        element=element,
        imagery=imagery,
        colors=_colors(*colors),
        symbols=tuple(symbols),
        keywords=keywords,
        symbolism=symbolism,
        sigil_category=category,
    )


MAJOR_ARCANA: tuple[ArcanaInfo, ...] = (
    _arcana(
        0, "The Fool", "air",
        "A young traveller at a cliff edge, a small dog at heel, the sun rising behind.",
        ("#FFD700", "#87CEEB", "#FFFFFF"), ["sun", "cliff", "dog", "rose"],
        "new beginnings, innocence, spontaneity",
        "The eternal child, divine madness, leap of faith", "general",
    ),
    _arcana(
        1, "The Magician", "mercury",
        "A figure raising a wand to the sky, the four suit tools on a table below.",
        ("#DC143C", "#FFD700", "#FFFFFF"), ["wand", "cup", "sword", "pentacle"],
        "manifestation, resourcefulness, power",
        "Will made manifest, as above so below, divine creativity", "general",
    ),
    _arcana(
        2, "The High Priestess", "moon",
        "A veiled priestess between two pillars, a crescent moon at her feet.",
        ("#4682B4", "#C0C0C0", "#FFFFFF"), ["moon", "pillars", "scroll", "veil"],
        "intuition, sacred knowledge, divine feminine",
        "Hidden wisdom, the veil between worlds, lunar mysteries", "wisdom",
    ),
    _arcana(
        3, "The Empress", "venus",
        "A crowned woman among ripe wheat, a river flowing through the garden.",
        ("#228B22", "#FFD700", "#FFFFFF"), ["star", "wheat", "venus", "water"],
        "femininity, beauty, nature, nurturing",
        "Mother Earth, fertility, creative abundance", "prosperity",
    ),
    _arcana(
        4, "The Emperor", "aries",
        "A stern ruler on a stone throne carved with rams, mountains behind.",
        ("#B22222", "#FF8C00", "#FFD700"), ["cross", "throne", "ram", "mountain"],
        "authority, establishment, structure",
        "Earthly power, paternal authority, cosmic order", "protection",
    ),
    _arcana(
        5, "The Hierophant", "taurus",
        "A priest raising a blessing between two pillars, crossed keys at his feet.",
        ("#8B0000", "#C0C0C0", "#FFD700"), ["cross", "keys", "pillars", "crown"],
        "spiritual wisdom, conformity, tradition",
        "Sacred tradition, spiritual teaching, religious authority", "wisdom",
    ),
    _arcana(
        6, "The Lovers", "gemini",
        "Two figures beneath an angel, the sun blazing above them.",
        ("#FF69B4", "#FFD700", "#FFFFFF"), ["sun", "angel", "tree", "serpent"],
        "love, harmony, relationships, values",
        "Divine union, choice and consequence, Adam and Eve", "love",
    ),
    _arcana(
        7, "The Chariot", "cancer",
        "A crowned warrior in a chariot drawn by two sphinxes, a city behind.",
        ("#4169E1", "#C0C0C0", "#FFD700"), ["star", "chariot", "sphinx", "wand"],
        "control, willpower, success, determination",
        "Spiritual triumph, mastery of opposites, victory through will", "protection",
    ),
    _arcana(
        8, "Strength", "leo",
        "A woman gently closing a lion's jaws, an infinity sign above her head.",
        ("#FFD700", "#FF8C00", "#FFFFFF"), ["sun", "lion", "infinity", "flowers"],
        "strength, courage, patience, control",
        "Inner strength, taming the beast within, divine courage", "protection",
    ),
    _arcana(
        9, "The Hermit", "virgo",
        "A cloaked elder on a snowy peak holding a lantern with a star inside.",
        ("#708090", "#FFD700", "#FFFFFF"), ["star", "lantern", "staff", "mountain"],
        "soul searching, seeking inner guidance",
        "Inner light, spiritual quest, divine guidance", "wisdom",
    ),
    _arcana(
        10, "Wheel of Fortune", "jupiter",
        "A great wheel turning in the clouds, a sphinx atop and creatures in the corners.",
        ("#DAA520", "#4682B4", "#FFFFFF"), ["wheel", "sphinx", "serpent", "cloud"],
        "good luck, karma, life cycles",
        "Cosmic cycles, fate and fortune, eternal return", "prosperity",
    ),
    _arcana(
        11, "Justice", "libra",
        "A crowned judge holding scales and an upright sword between pillars.",
        ("#8B0000", "#FFD700", "#C0C0C0"), ["sword", "scales", "pillars", "crown"],
        "justice, fairness, truth, karma",
        "Divine justice, karmic balance, cosmic law", "general",
    ),
    _arcana(
        12, "The Hanged Man", "water",
        "A figure suspended from a living tree by one foot, a halo around the head.",
        ("#4682B4", "#FFD700", "#FFFFFF"), ["cross", "tree", "halo", "water"],
        "suspension, restriction, letting go",
        "Sacrifice, new perspective, spiritual surrender", "wisdom",
    ),
    _arcana(
        13, "Death", "scorpio",
        "An armoured rider on a pale horse, a white rose banner, the sun setting between towers.",
        ("#000000", "#FFFFFF", "#8B0000"), ["rose", "scythe", "sun", "river"],
        "endings, beginnings, change, transformation",
        "Transformation, rebirth, the great mystery", "general",
    ),
    _arcana(
        14, "Temperance", "sagittarius",
        "An angel pouring water between cups, sun and path in background.",
        ("#87CEEB", "#FFD700", "#FFFFFF"), ["cups", "angel", "sun", "path"],
        "balance, moderation, patience, purpose",
        "Divine alchemy, moderation, angelic guidance", "general",
    ),
    _arcana(
        15, "The Devil", "capricorn",
        "A horned figure with chained figures, pentagram above.",
        ("#8B0000", "#000000", "#FFD700"), ["pentagram", "chains", "torch", "horns"],
        "bondage, addiction, sexuality, materialism",
        "Material bondage, shadow self, illusion of limitation", "protection",
    ),
    _arcana(
        16, "The Tower", "mars",
        "A tower struck by lightning, figures falling, flames around.",
        ("#FF4500", "#000000", "#FFD700"), ["lightning", "tower", "flames", "crown"],
        "sudden change, upheaval, chaos, revelation",
        "Divine lightning, false structures falling, revelation", "protection",
    ),
    _arcana(
        17, "The Star", "aquarius",
        "A woman pouring water under stars, a large star above.",
        ("#87CEEB", "#FFD700", "#FFFFFF"), ["stars", "water", "woman", "bird"],
        "hope, faith, purpose, renewal, spirituality",
        "Divine hope, cosmic guidance, spiritual renewal", "general",
    ),
    _arcana(
        18, "The Moon", "pisces",
        "A moon with dogs howling, a path between towers.",
        ("#C0C0C0", "#4682B4", "#FFD700"), ["moon", "dogs", "towers", "path"],
        "illusion, fear, anxiety, subconscious, intuition",
        "Lunar mysteries, unconscious fears, psychic realm", "wisdom",
    ),
    _arcana(
        19, "The Sun", "sun",
        "A child on a horse under a bright sun, sunflowers around.",
        ("#FFD700", "#FF4500", "#FFFFFF"), ["sun", "child", "horse", "sunflowers"],
        "positivity, fun, warmth, success, vitality",
        "Solar consciousness, divine joy, enlightenment", "prosperity",
    ),
    _arcana(
        20, "Judgement", "fire",
        "An angel blowing a trumpet, figures rising from graves.",
        ("#FFD700", "#FFFFFF", "#FF4500"), ["trumpet", "angel", "graves", "cross"],
        "judgement, rebirth, inner calling, absolution",
        "Final judgment, spiritual awakening, resurrection", "general",
    ),
    _arcana(
        21, "The World", "saturn",
        "A dancing figure in a wreath, four creatures in corners.",
        ("#800080", "#FFD700", "#FFFFFF"), ["wreath", "creatures", "wand", "laurel"],
        "completion, accomplishment, travel, fulfillment",
        "Cosmic completion, unity, the great work finished", "general",
    ),
)

MINOR_RANKS: tuple[str, ...] = (
    "Ace", "2", "3", "4", "5", "6", "7", "8", "9", "10", "Page", "Knight", "Queen", "King",
)

MINOR_SUITS = MappingProxyType({
    "wands": SuitInfo(
        suit="wands",
        element="fire",
        imagery="Fiery landscapes with budding wands, salamanders, and golden skies.",
        colors=_colors("#FF4500", "#FFD700", "#FFFFFF"),
        symbols=("wand", "flame", "salamander", "sun"),
        keywords="creativity, spirituality, determination, ambition, passion",
        symbolism="Divine will, creative force, spiritual energy",
        sigil_category="protection",
        cards=MINOR_RANKS,
    ),
    "cups": SuitInfo(
        suit="cups",
        element="water",
        imagery="Serene waters with overflowing cups, fish, and moonlit scenes.",
        colors=_colors("#4682B4", "#87CEEB", "#FFFFFF"),
        symbols=("cup", "fish", "water", "moon"),
        keywords="emotion, intuition, relationships, spirituality, love",
        symbolism="Emotional realm, intuition, the heart's wisdom",
        sigil_category="love",
        cards=MINOR_RANKS,
    ),
    "swords": SuitInfo(
        suit="swords",
        element="air",
        imagery="Stormy skies with crossed swords, clouds, and birds in flight.",
        colors=_colors("#4682B4", "#C0C0C0", "#FFD700"),
        symbols=("sword", "cloud", "bird", "wind"),
        keywords="thought, communication, conflict, intellect, truth",
        symbolism="Mental realm, communication, the sword of truth",
        sigil_category="wisdom",
        cards=MINOR_RANKS,
    ),
    "pentacles": SuitInfo(
        suit="pentacles",
        element="earth",
        imagery="Lush gardens with pentacle coins, vines, and mountains.",
        colors=_colors("#228B22", "#FFD700", "#FFFFFF"),
        symbols=("pentacle", "vine", "mountain", "tree"),
        keywords="material world, career, money, achievement, manifestation",
        symbolism="Material realm, earthly manifestation, practical wisdom",
        sigil_category="prosperity",
        cards=MINOR_RANKS,
    ),
})

DEFAULT_VARIANT = "rider-waite"

TAROT_VARIANTS = MappingProxyType({
    "rider-waite": TarotVariant(
        id="rider-waite",
        name="Rider-Waite-Smith",
        year=1909,
        style="symbolic-pictorial",
        color_palette=("#8B4513", "#DAA520", "#4682B4", "#228B22"),
        characteristics=("detailed symbolism", "intuitive imagery", "occult traditions"),
        back_pattern="flower-of-life",
    ),
    "marseilles": TarotVariant(
        id="marseilles",
        name="Tarot de Marseille",
        year=1650,
        style="medieval-geometric",
        color_palette=("#DC143C", "#FFD700", "#4169E1", "#228B22"),
        characteristics=("geometric patterns", "heraldic symbols", "traditional colors"),
        back_pattern="lattice",
    ),
    "thoth": TarotVariant(
        id="thoth",
        name="Thoth Tarot",
        year=1944,
        style="occult-artistic",
        color_palette=("#8A2BE2", "#FF6347", "#40E0D0", "#32CD32"),
        characteristics=("complex symbolism", "astrological correspondences", "artistic innovation"),
        back_pattern="hexagram",
    ),
    "visconti": TarotVariant(
        id="visconti",
        name="Visconti-Sforza",
        year=1450,
        style="renaissance-court",
        color_palette=("#B8860B", "#CD853F", "#4682B4", "#800080"),
        characteristics=("courtly imagery", "gold leaf details", "renaissance art"),
        back_pattern="diamond-lattice",
    ),
})

# Used when a card has no reference entry
DEFAULT_MAJOR_COLORS = _colors("#d4af37", "#2a1810", "#f4e4c1")
DEFAULT_MINOR_COLORS = _colors("#6366f1", "#1e293b", "#e2e8f0")
INVALID_CARD_COLORS = _colors("#d4d4d8", "#3f3f46", "#a1a1aa")

DEFAULT_SPREAD = "three-card"

SPREADS = MappingProxyType({
    "three-card": TarotSpread(
        id="three-card",
        name="Past, Present, Future",
        positions=[
            SpreadPosition(name="Past", description="What influences from the past affect this situation"),
            SpreadPosition(name="Present", description="The current state and immediate influences"),
            SpreadPosition(name="Future", description="Likely outcome if current path continues"),
        ],
    ),
    "celtic-cross": TarotSpread(
        id="celtic-cross",
        name="Celtic Cross",
        positions=[
            SpreadPosition(name="Present Situation", description="The heart of the matter"),
            SpreadPosition(name="Challenge", description="What crosses or challenges you"),
            SpreadPosition(name="Distant Past", description="Foundation of the situation"),
            SpreadPosition(name="Possible Outcome", description="What may come to pass"),
            SpreadPosition(name="Recent Past", description="Recent influences"),
            SpreadPosition(name="Immediate Future", description="What approaches"),
            SpreadPosition(name="Your Approach", description="How you approach the situation"),
            SpreadPosition(name="External Influences", description="Others' influence on the situation"),
            SpreadPosition(name="Hopes and Fears", description="Your inner hopes and fears"),
            SpreadPosition(name="Final Outcome", description="The ultimate result"),
        ],
    ),
})
