"""Transport payloads for unlock results and inventory items.

Plain key/value shapes exchanged with clients and persisted by callers.
Numeric fields round-trip exactly (wear as float, seed/stattrak as int).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.core.economy.models import ItemInstance
from src.core.economy.unlock import UnlockAttributes, UnlockResult


class AttributesPayload(BaseModel):
    """개봉 아이템 속성"""

    seed: Optional[int] = None
    stattrak: Optional[int] = None
    wear: Optional[float] = None


class UnlockResultPayload(BaseModel):
    """상자 개봉 결과"""

    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(..., alias="itemId")
    special: bool = False
    rarity_for_sound_effect: Optional[str] = Field(None, alias="rarityForSoundEffect")
    attributes: AttributesPayload = Field(default_factory=AttributesPayload)

    @classmethod
    def from_result(cls, result: UnlockResult) -> "UnlockResultPayload":
        return cls(
            item_id=result.item_id,
            special=result.special,
            rarity_for_sound_effect=result.rarity_for_sound_effect,
            attributes=AttributesPayload(
                seed=result.attributes.seed,
                stattrak=result.attributes.stattrak,
                wear=result.attributes.wear,
            ),
        )

    def to_result(self) -> UnlockResult:
        return UnlockResult(
            item_id=self.item_id,
            rarity_for_sound_effect=self.rarity_for_sound_effect,
            special=self.special,
            attributes=UnlockAttributes(
                seed=self.attributes.seed,
                stattrak=self.attributes.stattrak,
                wear=self.attributes.wear,
            ),
        )


class InventoryItemPayload(BaseModel):
    """인벤토리 아이템 저장/전송 형태"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    wear: Optional[float] = None
    seed: Optional[int] = None
    stattrak: Optional[int] = None
    nametag: Optional[str] = None
    stickers: Optional[list[Optional[int]]] = None
    sticker_wears: Optional[list[Optional[float]]] = Field(None, alias="stickerWears")
    equipped: Optional[bool] = None
    equipped_ct: Optional[bool] = Field(None, alias="equippedCT")
    equipped_t: Optional[bool] = Field(None, alias="equippedT")

    @classmethod
    def from_instance(cls, instance: ItemInstance) -> "InventoryItemPayload":
        return cls(
            id=instance.item_id,
            wear=instance.wear,
            seed=instance.seed,
            stattrak=instance.stattrak,
            nametag=instance.nametag,
            stickers=list(instance.stickers) if instance.stickers is not None else None,
            sticker_wears=list(instance.sticker_wears)
            if instance.sticker_wears is not None
            else None,
            equipped=instance.equipped,
            equipped_ct=instance.equipped_ct,
            equipped_t=instance.equipped_t,
        )

    def to_instance(self) -> ItemInstance:
        return ItemInstance(
            item_id=self.id,
            wear=self.wear,
            seed=self.seed,
            stattrak=self.stattrak,
            nametag=self.nametag,
            stickers=tuple(self.stickers) if self.stickers is not None else None,
            sticker_wears=tuple(self.sticker_wears)
            if self.sticker_wears is not None
            else None,
            # 저장 형태는 True/None만 사용
            equipped=self.equipped or None,
            equipped_ct=self.equipped_ct or None,
            equipped_t=self.equipped_t or None,
        )
