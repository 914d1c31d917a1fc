"""Coalition-chance estimators over ranked party results."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from app.models import Coalition, CoalitionChance, CoalitionOption, CoalitionTables, DualPartyResult, PartyResult
from app.services.scoring.errors import TooManyPartiesError
from helpers import formulas

TOP_COALITIONS = 3


def explain(party: str, chance: int) -> str:
    """Human-readable summary, bucketed at 70 / 40 / 15 percent."""
    if chance > 70:
        return f"{party} has excellent coalition chances thanks to broad compatibility with other parties."
    if chance > 40:
        return f"{party} has good coalition chances, mostly in centre-oriented cooperation."
    if chance > 15:
        return f"{party} has limited but real coalition chances, depending on political developments."
    return f"{party} has low coalition chances because of its ideological position or incompatibilities."


def isolated(party: str) -> str:
    return f"{party} struggles to find coalition partners because of incompatibilities with other parties."


def party_names(results: Sequence[DualPartyResult | PartyResult]) -> list[str]:
    """Distinct party names, in result order."""
    return list(dict.fromkeys(r.party.name for r in results))


def result_percentage(result: DualPartyResult | PartyResult) -> int:
    """Match percentage of a result of either scoring flow."""
    return result.percentage if isinstance(result, PartyResult) else result.combined


def rank_chances(chances: list[CoalitionChance]) -> list[CoalitionChance]:
    return sorted(chances, key=lambda c: -c.chance_percentage)


class CoalitionEstimator(ABC):
    """Derives per-party coalition chances from scoring results."""

    name: str = ""

    @abstractmethod
    def estimate(self, results: Sequence[DualPartyResult | PartyResult]) -> list[CoalitionChance]:
        """Chances for every party in ``results``, highest first."""


class ExactCoalitionEstimator(CoalitionEstimator):
    """Enumerates every compatible majority coalition and weighs it by stability."""

    name = "exact"

    def __init__(self, tables: CoalitionTables, max_parties: int = 20):
        self.tables = tables
        self.max_parties = max_parties

    def feasible_coalitions(self, names: Sequence[str]) -> list[Coalition]:
        """Compatible coalitions of two or more parties with a seat majority, most stable first."""
        if len(names) > self.max_parties:
            raise TooManyPartiesError(len(names), self.max_parties)

        quota = self.tables.majority
        found: list[tuple[int, Coalition]] = []

        # Depth-first over subsets in index order; a party incompatible with any
        # member cuts the whole branch, which leaves the feasible set unchanged.
        # Ties on stability keep subset-bitmask order (bit i = names[i]).
        def extend(start: int, members: list[str], seats: int, mask: int) -> None:
            for i in range(start, len(names)):
                name = names[i]
                if not all(self.tables.compatible(name, m) for m in members):
                    continue

                group = members + [name]
                total = seats + self.tables.seats_of(name)
                if len(group) >= 2 and total >= quota:
                    stability = formulas.coalition_stability([self.tables.position_of(p) for p in group])
                    found.append((mask | 1 << i, Coalition(tuple(group), total, stability)))
                extend(i + 1, group, total, mask | 1 << i)

        extend(0, [], 0, 0)
        found.sort(key=lambda item: (-item[1].stability, item[0]))
        return [c for _, c in found]

    def estimate(self, results: Sequence[DualPartyResult | PartyResult]) -> list[CoalitionChance]:
        names = party_names(results)
        coalitions = self.feasible_coalitions(names)
        total_weight = sum(c.stability for c in coalitions)

        chances = []
        for name in names:
            own = [c for c in coalitions if name in c.parties]
            if not own:
                chances.append(CoalitionChance(name, 0, [], isolated(name)))
                continue

            party_weight = sum(c.stability for c in own)
            chance = formulas.share_of(party_weight, total_weight)
            options = [
                CoalitionOption(
                    partners=[p for p in c.parties if p != name],
                    seats=c.seats,
                    probability=formulas.share_of(c.stability, party_weight),
                )
                for c in own[:TOP_COALITIONS]
            ]
            chances.append(CoalitionChance(name, chance, options, explain(name, chance)))

        return rank_chances(chances)


class SeatShareCoalitionEstimator(CoalitionEstimator):
    """Linear fallback without seat or incompatibility tables.

    Match percentages stand in for vote shares and are scaled to the chamber size.
    Each party is joined by the strongest of its top-3 partners until a majority forms;
    its chance is its own share of that coalition's seats.
    """

    name = "seat_share"

    def __init__(self, total_seats: int = 150):
        self.total_seats = total_seats

    def estimate(self, results: Sequence[DualPartyResult | PartyResult]) -> list[CoalitionChance]:
        shares: dict[str, float] = {}
        for r in results:
            shares.setdefault(r.party.name, max(0, result_percentage(r)))

        total_share = sum(shares.values())
        if total_share <= 0:
            return [CoalitionChance(name, 0, [], explain(name, 0)) for name in shares]

        quota = formulas.majority_quota(self.total_seats)
        scaled = {name: self.total_seats * s / total_share for name, s in shares.items()}
        order = sorted(shares, key=lambda n: -shares[n])

        chances = []
        for name in shares:
            seats, partners = scaled[name], []
            for partner in [p for p in order if p != name][:TOP_COALITIONS]:
                if partners and seats >= quota:
                    break
                partners.append(partner)
                seats += scaled[partner]

            if not partners or seats < quota:
                chances.append(CoalitionChance(name, 0, [], isolated(name)))
                continue

            chance = formulas.share_of(scaled[name], seats)
            option = CoalitionOption(partners=partners, seats=formulas.round_half_up(seats), probability=chance)
            chances.append(CoalitionChance(name, chance, [option], explain(name, chance)))

        return rank_chances(chances)


def get_estimator(name: str, tables: CoalitionTables | None, max_parties: int = 20) -> CoalitionEstimator:
    """Estimator by configured name; the exact one needs tables."""
    if name == ExactCoalitionEstimator.name:
        if tables is None:
            raise ValueError("Exact coalition estimator needs seat and incompatibility tables")
        return ExactCoalitionEstimator(tables, max_parties)
    if name == SeatShareCoalitionEstimator.name:
        return SeatShareCoalitionEstimator(tables.total_seats if tables else 150)
    raise ValueError(f"Unknown coalition estimator {name!r}")
