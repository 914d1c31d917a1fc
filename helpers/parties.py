"""Party label normalization - first matching rule wins."""
import re

UNKNOWN_PARTY = "Onbekend"

_BOUNDED = r"(^|[\s_-]){}([\s_-]|$)"

# Priority-ordered: earlier rules shadow later ones ("gl pvda" before "sp", "pvdd" before "vv").
PARTY_NAME_RULES: list[tuple[re.Pattern, str]] = [
    (re.compile(r"(groenlinks|pvdagl|gl[\s_-]?pvda|pvda[\s_-]?gl)", re.I), "GroenLinks-PvdA"),
    (re.compile(_BOUNDED.format("vvd"), re.I), "VVD"),
    (re.compile(_BOUNDED.format("d66"), re.I), "D66"),
    (re.compile(_BOUNDED.format("cda"), re.I), "CDA"),
    (re.compile(_BOUNDED.format("pvv"), re.I), "PVV"),
    (re.compile(r"(nieuw\s+sociaal\s+contract)|" + _BOUNDED.format("nsc"), re.I), "NSC"),
    (re.compile(_BOUNDED.format("bbb"), re.I), "BBB"),
    (re.compile(r"(partij\s+(voor|van)\s+de\s+dieren)|" + _BOUNDED.format("pvddv?"), re.I), "Partij voor de Dieren"),
    (re.compile(r"(christen\s*unie)|" + _BOUNDED.format("cu"), re.I), "ChristenUnie"),
    (re.compile(_BOUNDED.format("volt"), re.I), "Volt"),
    (re.compile(_BOUNDED.format("ja21"), re.I), "JA21"),
    (re.compile(_BOUNDED.format("bvnl"), re.I), "BVNL"),
    (re.compile(_BOUNDED.format("fvd"), re.I), "FvD"),
    (re.compile(_BOUNDED.format("denk"), re.I), "DENK"),
    (re.compile(_BOUNDED.format("sgp"), re.I), "SGP"),
    (re.compile(r"(vrij\s*verbond)|" + _BOUNDED.format("vv"), re.I), "Vrij Verbond"),
    (re.compile(_BOUNDED.format("sp"), re.I), "SP"),
]


def normalize_party_name(text: str | None, fallback: str = UNKNOWN_PARTY) -> str:
    """Map a messy label (file name, title, url) to a canonical party name."""
    cleaned = re.sub(r"\.[^/.]+$", "", text or "")
    cleaned = re.sub(r"[._/]+", " ", cleaned).strip().lower()

    for pattern, name in PARTY_NAME_RULES:
        if pattern.search(cleaned):
            return name
    return fallback or UNKNOWN_PARTY


def party_slug(name: str) -> str:
    """Stable id from a party name: lowercase, non-alphanumerics to '-'."""
    return re.sub(r"[^a-z0-9]", "-", name.lower())
