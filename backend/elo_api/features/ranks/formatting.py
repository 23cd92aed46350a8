"""Sorting and pt-BR rendering of rank summaries."""

from typing import Iterable, List, Mapping

from elo_api.core.enums import Tier

from .models import PlayerRankRecord

NO_ACCOUNTS_MESSAGE = (
    "Nenhuma conta foi adicionada ainda. Por favor, adicione uma conta para ver o ELO."
)

TIER_LABELS: Mapping[Tier, str] = {
    Tier.UNRANKED: "UNRANKED",
    Tier.IRON: "Ferro",
    Tier.BRONZE: "Bronze",
    Tier.SILVER: "Prata",
    Tier.GOLD: "Ouro",
    Tier.PLATINUM: "Platina",
    Tier.EMERALD: "Esmeralda",
    Tier.DIAMOND: "Diamante",
    Tier.MASTER: "Mestre",
    Tier.GRANDMASTER: "Grão-Mestre",
    Tier.CHALLENGER: "Desafiante",
}

DEFAULT_SEPARATOR = " ───────────────────────────── "

# Channel-specific decorations
SEPARATORS: Mapping[str, str] = {
    "korris": " ───────────────★────────────── ",
}


def separator_for(identifier: str) -> str:
    """Separator line used between and around entries for a channel."""
    return SEPARATORS.get(identifier, DEFAULT_SEPARATOR)


def rank_sort_key(record: PlayerRankRecord) -> tuple[int, int, int]:
    """Ascending key: tier, then division (0 for division-less tiers), then LP."""
    tier = record.tier
    division = record.division.order if tier.has_divisions else 0
    return tier.order, division, record.league_points


def sort_records(records: Iterable[PlayerRankRecord]) -> List[PlayerRankRecord]:
    """Highest rank first; ties keep their input order."""
    return sorted(records, key=rank_sort_key, reverse=True)


def render_record(record: PlayerRankRecord) -> str:
    """Render ``Name - Tier [Division] LP LP``."""
    label = TIER_LABELS[record.tier]
    if not record.tier.has_divisions:
        return f"{record.display_name} - {label} {record.league_points} LP"
    return (
        f"{record.display_name} - {label} {record.division.value} "
        f"{record.league_points} LP"
    )


def render_summary(records: Iterable[PlayerRankRecord], identifier: str) -> str:
    """Sort and render every record, framed by the channel separator."""
    separator = separator_for(identifier)
    lines = [render_record(record) for record in sort_records(records)]
    return separator + separator.join(lines) + separator
