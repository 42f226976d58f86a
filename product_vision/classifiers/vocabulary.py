"""
Keyword vocabularies for the rule-based classifiers.

All tables are lower-case and matched by substring against lower-cased
vision terms. Ordered tables are scanned top to bottom and the first hit
wins, so more specific groups must come before generic ones.
"""

# =============================================================================
# STORE CATEGORY KEYWORDS (keyed by category slug)
# =============================================================================

CATEGORY_SLUG_KEYWORDS: dict[str, tuple[str, ...]] = {
    "clothes": (
        "clothing",
        "apparel",
        "garment",
        "shirt",
        "t-shirt",
        "t shirt",
        "blouse",
        "dress",
        "pants",
        "jeans",
        "trousers",
        "shorts",
        "skirt",
        "jacket",
        "coat",
        "sweater",
        "hoodie",
        "sweatshirt",
        "top",
        "outfit",
        "fashion",
        "wear",
    ),
    "shoes": (
        "shoe",
        "sneaker",
        "boot",
        "sandal",
        "heel",
        "slipper",
        "footwear",
        "trainer",
        "running shoe",
        "high heel",
        "flat",
    ),
    "accessories": (
        "bag",
        "handbag",
        "purse",
        "wallet",
        "belt",
        "watch",
        "jewelry",
        "necklace",
        "bracelet",
        "ring",
        "earring",
        "accessory",
        "hat",
        "cap",
        "scarf",
        "gloves",
        "sunglasses",
    ),
    "perfumes": ("perfume", "cologne", "fragrance", "scent", "bottle"),
}


# =============================================================================
# FASHION ITEM GROUPS (main-item identification, order matters)
# =============================================================================

FASHION_GROUP_KEYWORDS: dict[str, tuple[str, ...]] = {
    "clothing": CATEGORY_SLUG_KEYWORDS["clothes"],
    "shoes": CATEGORY_SLUG_KEYWORDS["shoes"],
    "accessories": CATEGORY_SLUG_KEYWORDS["accessories"],
    "perfumes": CATEGORY_SLUG_KEYWORDS["perfumes"],
}


# =============================================================================
# NON-PRODUCT NOISE (logos, text, backgrounds, packaging)
# =============================================================================

NON_FASHION_KEYWORDS: tuple[str, ...] = (
    "cartoon",
    "illustration",
    "drawing",
    "graphic",
    "logo",
    "text",
    "letter",
    "word",
    "sign",
    "label",
    "brand",
    "trademark",
    "symbol",
    "icon",
    "emblem",
    "background",
    "surface",
    "table",
    "floor",
    "wall",
    "paper",
    "cardboard",
    "box",
    "packaging",
    "container",
)


# =============================================================================
# PRODUCT TYPES (naming fallback when no main item is identified)
# =============================================================================

PRODUCT_TYPES: tuple[str, ...] = (
    "jeans",
    "pants",
    "trousers",
    "shirt",
    "t-shirt",
    "t shirt",
    "blouse",
    "dress",
    "skirt",
    "jacket",
    "coat",
    "sweater",
    "hoodie",
    "shoes",
    "sneakers",
    "boots",
    "handbag",
    "bag",
    "wallet",
    "belt",
    "watch",
    "accessories",
)


# =============================================================================
# MATERIALS (specific before generic; "faux leather" before "leather")
# =============================================================================

MATERIAL_GROUPS: tuple[tuple[tuple[str, ...], str], ...] = (
    # Leather look-alikes first so they never collapse into "Leather"
    (("faux leather", "vegan leather", "synthetic leather", "imitation leather"), "Faux Leather"),
    (("pu leather", "polyurethane"), "Polyurethane"),
    (("suede", "suede leather"), "Suede"),
    (("nubuck",), "Nubuck"),
    (("patent leather",), "Patent Leather"),
    # Natural
    (("leather", "genuine leather", "real leather", "cowhide", "calfskin"), "Leather"),
    (("cotton", "cotton fabric", "cotton blend"), "Cotton"),
    (("cashmere",), "Cashmere"),
    (("wool", "woolen", "woollen", "merino"), "Wool"),
    (("silk", "silk fabric"), "Silk"),
    (("linen", "linen fabric"), "Linen"),
    (("denim", "jean", "jeans fabric"), "Denim"),
    (("canvas", "canvas fabric"), "Canvas"),
    (("mesh", "mesh fabric"), "Mesh"),
    (("knit", "knitted", "knit fabric"), "Knit"),
    (("jersey", "jersey fabric"), "Jersey"),
    (("chiffon", "chiffon fabric"), "Chiffon"),
    (("satin", "satin fabric"), "Satin"),
    (("velvet", "velvet fabric"), "Velvet"),
    (("corduroy", "corduroy fabric"), "Corduroy"),
    (("tweed", "tweed fabric"), "Tweed"),
    (("twill", "twill fabric"), "Twill"),
    (("bamboo", "bamboo fabric"), "Bamboo"),
    (("hemp", "hemp fabric"), "Hemp"),
    # Synthetic
    (("polyester", "polyester fabric"), "Polyester"),
    (("nylon", "nylon fabric"), "Nylon"),
    (("spandex", "elastane", "lycra"), "Spandex"),
    (("acrylic", "acrylic fabric"), "Acrylic"),
    (("polyamide",), "Polyamide"),
    (("synthetic", "synthetic fabric", "synthetic material"), "Synthetic"),
    (("plastic", "plastic material"), "Plastic"),
    (("rubber", "rubber material"), "Rubber"),
    (("neoprene",), "Neoprene"),
    # Metal
    (("stainless steel", "steel", "metal", "metallic"), "Metal"),
    (("gold plated", "gold", "golden"), "Gold"),
    (("silver plated", "silver tone", "silver"), "Silver"),
    (("brass", "brass plated"), "Brass"),
    (("copper", "copper plated"), "Copper"),
    # Generic fallback (lowest priority)
    (("fabric", "textile", "material"), "Fabric"),
)


# =============================================================================
# STYLE
# =============================================================================

STYLE_GROUPS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("casual",), "Casual"),
    (("formal",), "Formal"),
    (("sporty", "sportswear", "athletic"), "Sporty"),
    (("elegant",), "Elegant"),
    (("vintage", "retro"), "Vintage"),
    (("modern",), "Modern"),
    (("classic",), "Classic"),
    (("minimalist", "minimal"), "Minimalist"),
    (("bohemian", "boho"), "Bohemian"),
    (("trendy",), "Trendy"),
)

# Style words that keep a label out of the description's "showcasing" clause
STYLE_KEYWORDS: tuple[str, ...] = (
    "casual",
    "formal",
    "sporty",
    "elegant",
    "classic",
    "modern",
    "vintage",
    "trendy",
    "minimalist",
    "bold",
)


# =============================================================================
# GENDER (matched as whole words: "man" must not hit "mannequin" or "human")
# =============================================================================

GENDER_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("women", ("women", "female", "woman", "womens", "womenswear", "ladies", "girls")),
    ("men", ("men", "male", "man", "mens", "menswear", "gents", "boys")),
    ("unisex", ("unisex", "unified")),
)


# =============================================================================
# FEATURES
# =============================================================================

FEATURE_STYLE_KEYWORDS: tuple[str, ...] = (
    "casual",
    "formal",
    "sporty",
    "elegant",
    "vintage",
    "modern",
    "classic",
    "trendy",
    "minimalist",
    "bohemian",
)

PATTERN_KEYWORDS: tuple[str, ...] = (
    "striped",
    "solid",
    "printed",
    "patterned",
    "floral",
    "geometric",
    "polka dot",
    "checkered",
    "plaid",
)

FEATURE_MATERIAL_KEYWORDS: tuple[str, ...] = (
    "cotton",
    "denim",
    "leather",
    "synthetic",
    "polyester",
    "wool",
    "silk",
    "linen",
)

DETAIL_KEYWORDS: tuple[str, ...] = (
    "button",
    "zipper",
    "pocket",
    "collar",
    "sleeve",
    "hood",
    "lace",
    "buckle",
)

# Labels mentioning any of these are treated as material mentions in descriptions
DESCRIPTION_MATERIAL_KEYWORDS: tuple[str, ...] = (
    "cotton",
    "denim",
    "leather",
    "synthetic",
    "wool",
    "silk",
    "polyester",
    "linen",
    "fabric",
    "textile",
    "canvas",
    "nylon",
    "spandex",
    "suede",
    "mesh",
    "knit",
    "jersey",
    "chiffon",
    "satin",
    "velvet",
)


# =============================================================================
# BRAND / COLOR FROM TEXT
# =============================================================================

# Upper-cased tokens that look like brands on labels but are origin marks or places
NON_BRAND_WORDS: frozenset[str] = frozenset(
    {
        "MADE", "IN", "THE", "AND", "FOR", "WITH", "SIZE", "STYLE", "COLLECTION",
        "ITALY", "PARIS", "FRANCE", "USA", "UK", "GERMANY", "SPAIN", "PORTUGAL",
        "CHINA", "JAPAN", "KOREA", "INDIA", "BRAZIL", "MEXICO", "CANADA",
        "AUSTRALIA", "NEW", "YORK", "LONDON", "MILAN", "ROME", "BERLIN", "MADRID",
        "AMSTERDAM", "VIENNA", "ZURICH", "COPENHAGEN", "STOCKHOLM", "OSLO",
        "HELSINKI", "DUBLIN", "BRUSSELS", "LISBON", "ATHENS", "PRAGUE", "BUDAPEST",
        "WARSAW", "BUCHAREST", "SOFIA", "ZAGREB", "BELGRADE", "BRATISLAVA",
        "LJUBLJANA", "TALLINN", "RIGA", "VILNIUS", "REYKJAVIK", "LUXEMBOURG",
        "MONACO", "VATICAN", "SAN", "MARINO", "ANDORRA", "LIECHTENSTEIN", "MALTA",
        "CYPRUS", "VIETNAM", "BANGLADESH", "TURKEY", "INDONESIA", "CAMBODIA",
    }
)

# Color words recognized inside a generated product name (multi-word first)
NAME_COLOR_WORDS: tuple[str, ...] = (
    "dark gray", "light gray", "slate gray", "dark brown", "light brown",
    "dark red", "dark green", "forest green", "royal blue", "sky blue",
    "light blue", "dark blue", "hot pink", "burnt orange",
    "black", "white", "red", "blue", "navy", "brown", "tan", "beige", "gray",
    "grey", "green", "yellow", "orange", "pink", "purple", "burgundy",
    "maroon", "crimson", "gold", "silver", "bronze", "ivory", "cream", "khaki",
    "olive", "teal", "turquoise", "coral", "charcoal", "slate", "chocolate",
    "coffee", "camel", "mustard", "amber", "emerald", "lime", "mint", "sage",
    "midnight", "indigo", "violet", "lavender", "plum", "rose", "salmon",
    "blush", "fuchsia", "magenta",
)

# Light colors most likely to be the photo backdrop rather than the product
BACKGROUND_COLORS: tuple[str, ...] = (
    "Tan",
    "Beige",
    "Cream",
    "Ivory",
    "Khaki",
    "Light Gray",
    "Silver",
)

# Dark colors preferred as the product color
DARK_FASHION_COLORS: tuple[str, ...] = (
    "Black",
    "Navy",
    "Dark Gray",
    "Charcoal",
    "Brown",
    "Dark Brown",
    "Burgundy",
    "Maroon",
)
