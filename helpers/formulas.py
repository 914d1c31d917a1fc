"""Pure math formulas - no dependencies, easily testable."""
from math import exp, floor, isfinite

POSITIONS = (-1, 0, 1)

# Alignment categories for one (user, party) pair
PERFECT_MATCH = "perfect_match"
CONFLICT = "conflict"
NEUTRAL_ALIGNMENT = "neutral_alignment"
PARTIAL_MATCH = "partial_match"

# Importance below which a conflict may be softened
SOFT_CONFLICT_IMPORTANCE = 0.7

# Combined score blend (program vs. voting record), in tenths
PROGRAM_SHARE = 7
VOTES_SHARE = 3


def round_half_up(x: float) -> int:
    """Round to nearest integer, .5 away from minus infinity (JS Math.round)."""
    return int(floor(x + 0.5))


def clamp(x: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Clamp x into [lo, hi]."""
    return max(lo, min(hi, x))


def compatibility(
    user_pos: int,
    party_pos: int,
    importance: float = 1.0,
    a: float = 0.30,
    b: float = 0.60,
    soft_conflict: bool = False,
    soft_floor: float = 0.12,
) -> float:
    """Match quality g(u, p) in [0, 1]; requires a < b < 1."""
    if user_pos == 0 and party_pos == 0:
        return b
    if user_pos == 0 or party_pos == 0:
        return a
    if user_pos == party_pos:
        return 1.0
    if soft_conflict and importance < SOFT_CONFLICT_IMPORTANCE:
        return soft_floor
    return 0.0


def alignment(user_pos: int, party_pos: int) -> str:
    """Bucket for a pair: exactly one of the four alignment categories."""
    if user_pos == 0 and party_pos == 0:
        return NEUTRAL_ALIGNMENT
    if user_pos == 0 or party_pos == 0:
        return PARTIAL_MATCH
    if user_pos == party_pos:
        return PERFECT_MATCH
    return CONFLICT


def topic_weight_linear(percentage: float) -> int:
    """Importance 0-100 to integer multiplier 1..3."""
    return int(clamp(round_half_up(percentage / 33.33), 1, 3))


def topic_weight_sigmoid(percentage: float) -> float:
    """Importance 0-100 to a smooth weight in ~[0.7, 1.3], centred at 70%."""
    x = clamp(percentage, 0, 100) / 100
    return 1.0 + 0.6 * (1 / (1 + exp(-8 * (x - 0.7))) - 0.5)


def normalize_weights(weights: list[float]) -> list[float]:
    """Rescale weights so their mean is 1."""
    total = sum(weights) or 1
    scale = len(weights) / total
    return [w * scale for w in weights]


def coverage_penalty(lam: float, coverage: float, quadratic: bool = False) -> float:
    """Penalty for low coverage: lambda*(1-c) or lambda*(1-c)^2."""
    miss = max(0.0, 1 - coverage)
    return lam * miss * miss if quadratic else lam * miss


def combined_score(program: int, votes: int) -> int:
    """70/30 blend of two 0-100 scores, rounded half up."""
    return round_half_up((PROGRAM_SHARE * program + VOTES_SHARE * votes) / 10)


def fuse_stance(manual: int, ai_stance: int, ai_confidence: float, min_confidence: float = 0.85) -> tuple[int, bool]:
    """Blend a manual stance with a confident AI stance. Returns (stance, fused)."""
    if not isfinite(ai_confidence) or ai_confidence < min_confidence:
        return manual, False

    span = 1 - min_confidence
    t = clamp((ai_confidence - min_confidence) / span) if span > 0 else 1.0
    w_ai = 0.5 + 0.5 * t
    fused = (1 - w_ai) * manual + w_ai * ai_stance

    if fused > 0.33:
        return 1, True
    if fused < -0.33:
        return -1, True
    return 0, True


def ideological_distance(pos_a: float, pos_b: float) -> float:
    """Distance on a 0-10 left-right scale, normalized to 0-1."""
    return abs(pos_a - pos_b) / 10


def coalition_stability(positions: list[float]) -> float:
    """1 - mean pairwise ideological distance (0 if fewer than two members)."""
    n = len(positions)
    if n < 2:
        return 0.0

    total, pairs = 0.0, 0
    for i in range(n):
        for j in range(i + 1, n):
            total += ideological_distance(positions[i], positions[j])
            pairs += 1

    return max(0.0, 1 - total / pairs)


def majority_quota(total_seats: int) -> int:
    """Seats needed for a majority."""
    return total_seats // 2 + 1


def share_of(part: float, whole: float) -> int:
    """part/whole as a 0-100 integer, 0 when whole is empty."""
    return int(clamp(round_half_up(part / whole * 100), 0, 100)) if whole > 0 else 0
