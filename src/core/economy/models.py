"""아이템 경제 도메인 모델 (전송/저장 무관)"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ItemType(str, Enum):
    WEAPON = "weapon"
    MELEE = "melee"
    GLOVES = "gloves"
    MUSICKIT = "musickit"
    STICKER = "sticker"
    GRAFFITI = "graffiti"
    AGENT = "agent"
    COLLECTIBLE = "collectible"
    CONTAINER = "container"
    CONTAINER_KEY = "containerkey"
    PATCH = "patch"
    TOOL = "tool"
    STUB = "stub"


class Team(str, Enum):
    T = "t"
    CT = "ct"


class Rarity(str, Enum):
    """희귀도 등급. SPECIAL은 상자 특수 풀 전용 (카탈로그에 저장되지 않음)."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    MYTHICAL = "mythical"
    LEGENDARY = "legendary"
    ANCIENT = "ancient"
    IMMORTAL = "immortal"
    SPECIAL = "special"


# 카탈로그 색상 코드 → 등급
RARITY_COLORS: dict[str, Rarity] = {
    "#b0c3d9": Rarity.COMMON,
    "#5e98d9": Rarity.UNCOMMON,
    "#4b69ff": Rarity.RARE,
    "#8847ff": Rarity.MYTHICAL,
    "#d32ce6": Rarity.LEGENDARY,
    "#eb4b4b": Rarity.ANCIENT,
    "#e4ae39": Rarity.IMMORTAL,
}

# 오름차순. 개봉 확률 계산 순서.
RARITY_ORDER: tuple[Rarity, ...] = (
    Rarity.COMMON,
    Rarity.UNCOMMON,
    Rarity.RARE,
    Rarity.MYTHICAL,
    Rarity.LEGENDARY,
    Rarity.ANCIENT,
    Rarity.IMMORTAL,
    Rarity.SPECIAL,
)

# 개봉 연출 사운드. ancient/immortal은 같은 사운드
RARITY_FOR_SOUNDS: dict[Rarity, str] = {
    Rarity.COMMON: "common",
    Rarity.UNCOMMON: "uncommon",
    Rarity.RARE: "rare",
    Rarity.MYTHICAL: "mythical",
    Rarity.LEGENDARY: "legendary",
    Rarity.ANCIENT: "ancient",
    Rarity.IMMORTAL: "ancient",
}


def parse_rarity(raw: str) -> Rarity:
    """색상 코드("#eb4b4b") 또는 등급명("ancient") → Rarity.
    SPECIAL은 구조적으로만 부여되므로 거부.
    """
    key = raw.strip().lower()
    if key in RARITY_COLORS:
        return RARITY_COLORS[key]
    rarity = Rarity(key)
    if rarity is Rarity.SPECIAL:
        raise ValueError("special rarity cannot be stored on a catalog item")
    return rarity


@dataclass(frozen=True)
class TypeTraits:
    """아이템 타입별 속성 허용 여부"""

    seed: bool = False
    stattrak: bool = False
    wear: bool = False
    nametag: bool = False
    stickers: bool = False


# 타입 추가 시 이 표만 수정
TYPE_TRAITS: dict[ItemType, TypeTraits] = {
    ItemType.WEAPON: TypeTraits(
        seed=True, stattrak=True, wear=True, nametag=True, stickers=True
    ),
    ItemType.MELEE: TypeTraits(seed=True, stattrak=True, wear=True, nametag=True),
    ItemType.GLOVES: TypeTraits(seed=True, wear=True),
    ItemType.MUSICKIT: TypeTraits(stattrak=True),
    ItemType.STICKER: TypeTraits(),
    ItemType.GRAFFITI: TypeTraits(),
    ItemType.AGENT: TypeTraits(),
    ItemType.COLLECTIBLE: TypeTraits(),
    ItemType.CONTAINER: TypeTraits(),
    ItemType.CONTAINER_KEY: TypeTraits(),
    ItemType.PATCH: TypeTraits(),
    ItemType.TOOL: TypeTraits(),
    ItemType.STUB: TypeTraits(),
}


@dataclass(frozen=True)
class CatalogItem:
    """카탈로그 아이템 — 불변. 로더가 한 번 적재."""

    id: int
    type: ItemType
    name: str = ""

    rarity: Optional[Rarity] = None
    teams: Optional[tuple[Team, ...]] = None  # None = 팀 무관
    model: Optional[str] = None  # 무기 모델명 ("ak47")

    # 마모도 범위 (None = 전역 [0, 1])
    wear_min: Optional[float] = None
    wear_max: Optional[float] = None

    # 상자
    contents: Optional[tuple[int, ...]] = None
    specials: Optional[tuple[int, ...]] = None

    # 표시용
    image: str = ""
    local_image: int = 0  # GENERATED_* 비트

    @property
    def traits(self) -> TypeTraits:
        return TYPE_TRAITS[self.type]

    @property
    def has_seed(self) -> bool:
        return self.traits.seed

    @property
    def has_stattrak(self) -> bool:
        return self.traits.stattrak

    @property
    def has_wear(self) -> bool:
        return self.traits.wear

    @property
    def has_nametag(self) -> bool:
        return self.traits.nametag

    @property
    def has_stickers(self) -> bool:
        return self.traits.stickers

    @property
    def is_container(self) -> bool:
        return self.type is ItemType.CONTAINER and self.contents is not None


@dataclass(frozen=True)
class ItemInstance:
    """보유 아이템 개체. 카탈로그 대비 개별 속성만 저장."""

    item_id: int  # CatalogItem.id 참조

    # 속성
    wear: Optional[float] = None
    seed: Optional[int] = None
    stattrak: Optional[int] = None  # 0이어도 스탯트랙 아이템
    nametag: Optional[str] = None
    stickers: Optional[tuple[Optional[int], ...]] = None  # 슬롯별 스티커 id
    sticker_wears: Optional[tuple[Optional[float], ...]] = None

    # 장착 (True 또는 None)
    equipped: Optional[bool] = None
    equipped_ct: Optional[bool] = None
    equipped_t: Optional[bool] = None

    def is_equipped_in(self, team: Optional[Team]) -> bool:
        """요청 슬롯(팀 무관 / CT / T)에 장착 중인지."""
        if team is None:
            return bool(self.equipped)
        if team is Team.CT:
            return bool(self.equipped_ct)
        return bool(self.equipped_t)
