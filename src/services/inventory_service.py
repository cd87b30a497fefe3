"""인벤토리 Service — Core 조합, 현재 인벤토리 참조 관리, EventBus 통신

Core의 Inventory는 불변 값이므로 "현재 값" 참조 갱신은 이 서비스가 단독으로 한다.
갱신은 lock 안에서 읽기 → 계산 → 교체 순으로 직렬화.
"""

import threading
from typing import Any, Callable, Optional

from src.core.economy.catalog import Catalog
from src.core.economy.constants import DEFAULT_INVENTORY_CAPACITY
from src.core.economy.errors import EconomyError
from src.core.economy.images import resolve_image
from src.core.economy.inventory import Inventory, InventoryEntry
from src.core.economy.models import CatalogItem, ItemInstance, Team
from src.core.economy.rng import RandomSource
from src.core.economy.unlock import (
    UnlockResult,
    list_container_contents,
    unlock_container,
    validate_unlocked_item,
)
from src.core.event_bus import EconomyEvent, EventBus
from src.core.event_types import EventTypes
from src.core.logging import get_logger
from src.services.payloads import InventoryItemPayload, UnlockResultPayload

logger = get_logger(__name__)

SOURCE = "inventory_service"


class InventoryService:
    """상자 개봉 + 인벤토리 조작"""

    def __init__(
        self,
        catalog: Catalog,
        event_bus: EventBus,
        rng: Optional[RandomSource] = None,
        capacity: int = DEFAULT_INVENTORY_CAPACITY,
        image_base_url: str = "",
    ):
        self._catalog = catalog
        self._bus = event_bus
        self._rng = rng
        self._image_base_url = image_base_url
        self._inventory = Inventory.empty(catalog, capacity)
        self._lock = threading.Lock()

    @property
    def inventory(self) -> Inventory:
        return self._inventory

    # === 카탈로그 ===

    def get_item(self, item_id: int) -> CatalogItem:
        return self._catalog.get_by_id(item_id)

    def list_container(
        self, container_id: int, hide_specials: bool = False
    ) -> list[CatalogItem]:
        return list_container_contents(container_id, self._catalog, hide_specials)

    # === 상자 개봉 ===

    def unlock(self, container_id: int) -> UnlockResult:
        """상자 개봉만 수행. 인벤토리는 변경하지 않음.
        container_unlocked 이벤트 발행.
        """
        result = unlock_container(container_id, self._catalog, self._rng)
        self._emit(
            EventTypes.CONTAINER_UNLOCKED,
            {
                "container_id": container_id,
                "item_id": result.item_id,
                "special": result.special,
            },
        )
        logger.info(
            "Container %d unlocked -> item %d (special=%s)",
            container_id,
            result.item_id,
            result.special,
        )
        return result

    def open_container(self, container_id: int) -> Optional[UnlockResult]:
        """개봉 후 결과를 인벤토리에 추가 (서버 측 개봉).
        인벤토리가 가득 차 있으면 개봉하지 않고 None.
        """
        if not self._inventory.can_add():
            logger.info("Inventory full, container %d not opened", container_id)
            return None
        result = self.unlock(container_id)
        self.add_item(result.to_instance())
        return result

    def verify_unlock(
        self, container_id: int, payload: UnlockResultPayload | dict[str, Any]
    ) -> UnlockResult:
        """클라이언트가 제출한 개봉 결과 재검증.
        실패 시 오류 종류를 로그 + unlock_rejected 발행 후 원래 예외를 다시 던진다.
        """
        if isinstance(payload, dict):
            payload = UnlockResultPayload.model_validate(payload)
        result = payload.to_result()
        try:
            validate_unlocked_item(container_id, result, self._catalog)
        except EconomyError as e:
            logger.warning(
                "Unlock rejected: container=%d item=%d reason=%s (%s)",
                container_id,
                result.item_id,
                type(e).__name__,
                e,
            )
            self._emit(
                EventTypes.UNLOCK_REJECTED,
                {
                    "container_id": container_id,
                    "item_id": result.item_id,
                    "reason": type(e).__name__,
                },
            )
            raise
        return result

    def claim_unlock(
        self, container_id: int, payload: UnlockResultPayload | dict[str, Any]
    ) -> Inventory:
        """재검증 통과한 개봉 결과를 인벤토리에 추가."""
        result = self.verify_unlock(container_id, payload)
        return self.add_item(result.to_instance())

    # === 인벤토리 ===

    def add_item(self, instance: ItemInstance) -> Inventory:
        before, inventory = self._commit(lambda inv: inv.add(instance))
        if inventory is not before:
            self._emit(EventTypes.INVENTORY_ITEM_ADDED, {"item_id": instance.item_id})
        else:
            logger.info("Inventory full, item %d not added", instance.item_id)
        return inventory

    def remove_item(self, index: int) -> Inventory:
        before, inventory = self._commit(lambda inv: inv.remove(index))
        removed = before.get(index)
        if inventory is not before and removed is not None:
            self._emit(
                EventTypes.INVENTORY_ITEM_REMOVED,
                {"index": index, "item_id": removed.item_id},
            )
        return inventory

    def equip_item(self, index: int, team: Optional[Team] = None) -> Inventory:
        before, inventory = self._commit(lambda inv: inv.equip(index, team))
        if inventory is not before:
            self._emit(
                EventTypes.INVENTORY_ITEM_EQUIPPED,
                {"index": index, "team": team.value if team else None},
            )
        return inventory

    def unequip_item(self, index: int, team: Optional[Team] = None) -> Inventory:
        before, inventory = self._commit(lambda inv: inv.unequip(index, team))
        if inventory is not before:
            self._emit(
                EventTypes.INVENTORY_ITEM_UNEQUIPPED,
                {"index": index, "team": team.value if team else None},
            )
        return inventory

    def entries(self) -> list[InventoryEntry]:
        return self._inventory.get_all()

    def image_url(self, index: int) -> Optional[str]:
        """인벤토리 아이템의 품질별 이미지 URL. 인덱스가 없으면 None."""
        instance = self._inventory.get(index)
        if instance is None:
            return None
        item = self._catalog.get_by_id(instance.item_id)
        return resolve_image(instance, item, self._image_base_url)

    # === 직렬화 ===

    def export_items(self) -> list[dict[str, Any]]:
        return [
            InventoryItemPayload.from_instance(i).model_dump(
                by_alias=True, exclude_none=True
            )
            for i in self._inventory
        ]

    def load_items(self, raw_items: list[dict[str, Any]]) -> Inventory:
        """저장된 목록으로 현재 인벤토리 교체. 저장 데이터는 검증 완료로 간주."""
        instances = [
            InventoryItemPayload.model_validate(raw).to_instance()
            for raw in raw_items
        ]
        with self._lock:
            self._inventory = Inventory.from_instances(
                self._catalog, instances, self._inventory.capacity
            )
        logger.info("Loaded %d inventory items", len(instances))
        return self._inventory

    # === 내부 ===

    def _commit(
        self, mutate: Callable[[Inventory], Inventory]
    ) -> tuple[Inventory, Inventory]:
        """(변경 전, 변경 후). 변화가 없으면 같은 객체."""
        with self._lock:
            before = self._inventory
            after = mutate(before)
            self._inventory = after
        return before, after

    def _emit(self, event_type: str, data: dict[str, Any]) -> None:
        self._bus.emit(EconomyEvent(event_type=event_type, data=data, source=SOURCE))
