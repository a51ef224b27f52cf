"""Riot platform shards and how to reach them."""
from enum import Enum


class Region(Enum):
    """A platform shard, valued ``(platform host, regional route, op.gg slug)``.

    Summoner and league endpoints live on the platform host (``jp1``);
    account and match endpoints on the regional route (``asia``).
    """

    # Asia
    JP1 = ("jp1", "asia", "jp")
    KR = ("kr", "asia", "kr")

    # Americas
    NA1 = ("na1", "americas", "na")
    BR1 = ("br1", "americas", "br")
    LA1 = ("la1", "americas", "lan")
    LA2 = ("la2", "americas", "las")

    # Europe
    EUW1 = ("euw1", "europe", "euw")
    EUN1 = ("eun1", "europe", "eune")
    TR1 = ("tr1", "europe", "tr")
    RU = ("ru", "europe", "ru")
    ME1 = ("me1", "europe", "me")

    # SEA & Oceania
    OC1 = ("oc1", "sea", "oce")
    SG2 = ("sg2", "sea", "sg")
    TW2 = ("tw2", "sea", "tw")
    VN2 = ("vn2", "sea", "vn")

    @property
    def platform_route(self) -> str:
        return self.value[0]

    @property
    def regional_route(self) -> str:
        return self.value[1]

    @property
    def profile_slug(self) -> str:
        """Region segment of op.gg profile links."""
        return self.value[2]

    @property
    def platform_url(self) -> str:
        return f"https://{self.platform_route}.api.riotgames.com"

    @property
    def regional_url(self) -> str:
        return f"https://{self.regional_route}.api.riotgames.com"

    @classmethod
    def from_string(cls, code: str) -> 'Region':
        """Look a shard up by platform code, e.g. 'jp1' or 'EUW1'."""
        wanted = (code or "").strip().lower()
        for region in cls:
            if region.platform_route == wanted:
                return region
        raise ValueError(f"Unknown Riot platform '{code}'")
