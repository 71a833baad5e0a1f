from typing import Iterable, Optional

from .schemas import Pillar

# Guardian palette swatches used by the cards
NEUTRAL = {10: "#1A1A1A", 86: "#DCDCDC", 97: "#F6F6F6"}
NEWS = {300: "#AB0613", 400: "#C70000"}
OPINION = {400: "#E05E00", 800: "#FEF9F5"}
SPORT = {400: "#0077B6"}
CULTURE = {400: "#A1845C", 500: "#EACCA0"}
LIFESTYLE = {300: "#7D0068", 400: "#BB3B80"}
BRAND = {400: "#052962"}

PILLAR_CLASSES = {
    Pillar.NEWS: "news",
    Pillar.OPINION: "opinion",
    Pillar.SPORT: "sport",
    Pillar.LIFESTYLE: "lifestyle",
    Pillar.ARTS: "culture",
}

PILLAR_PALETTE = {
    "news": {
        "border": NEWS[400],
        "headline": NEWS[300],
        "text": NEUTRAL[10],
        "background": NEUTRAL[97],
    },
    "opinion": {
        "border": OPINION[400],
        "headline": OPINION[400],
        "text": NEUTRAL[10],
        "background": OPINION[800],
    },
    "sport": {
        "border": SPORT[400],
        "headline": SPORT[400],
        "text": NEUTRAL[10],
        "background": NEUTRAL[97],
    },
    "culture": {
        "border": CULTURE[500],
        "headline": CULTURE[400],
        "text": NEUTRAL[10],
        "background": NEUTRAL[97],
    },
    "lifestyle": {
        "border": LIFESTYLE[400],
        "headline": LIFESTYLE[300],
        "text": NEUTRAL[10],
        "background": NEUTRAL[97],
    },
}

def pillar_class(pillar: Optional[Pillar]) -> Optional[str]:
    if pillar is None:
        return None
    return PILLAR_CLASSES[pillar]

def pillar_styles(pillars: Iterable[Optional[Pillar]]) -> str:
    """CSS custom properties for every distinct pillar, in first-seen order."""
    seen: list[str] = []
    for p in pillars:
        cls = pillar_class(p)
        if cls and cls not in seen:
            seen.append(cls)
    lines = []
    for cls in seen:
        colours = PILLAR_PALETTE[cls]
        lines.append(f".{cls} {{")
        lines.extend(f"--{name}: {value};" for name, value in colours.items())
        lines.append("}")
    return "\n".join(lines)
