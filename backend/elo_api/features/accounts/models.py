"""Value types for resolved player accounts."""

from dataclasses import dataclass

REFERENCE_SEPARATOR = "---"


@dataclass(frozen=True)
class PlayerReference:
    """Shard-qualified player identifier.

    Riot PUUIDs are only meaningful together with the shard that serves
    the player's league data, so the two always travel together.
    """

    shard: str
    puuid: str

    def serialize(self) -> str:
        """Flat form stored in the roster table."""
        return f"{self.shard}{REFERENCE_SEPARATOR}{self.puuid}"

    @classmethod
    def parse(cls, value: str) -> "PlayerReference":
        """Rebuild a reference from its stored form.

        :raises ValueError: If the value is not ``shard---puuid``
        """
        shard, separator, puuid = value.partition(REFERENCE_SEPARATOR)
        if not separator or not shard or not puuid:
            raise ValueError(f"Invalid player reference: {value!r}")
        return cls(shard=shard, puuid=puuid)

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True)
class ParsedAccount:
    """Account string split into its components."""

    shard: str
    game_name: str
    tag_line: str

    @property
    def riot_id(self) -> str:
        return f"{self.game_name}#{self.tag_line}"


@dataclass(frozen=True)
class ResolvedAccount:
    """Account confirmed by the Riot API."""

    reference: PlayerReference
    game_name: str
    tag_line: str

    @property
    def label(self) -> str:
        """``Name#Tag(shard)`` as shown in confirmations."""
        return f"{self.game_name}#{self.tag_line}({self.reference.shard})"
