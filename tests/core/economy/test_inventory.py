"""인벤토리 테스트: 용량, 추가/제거, 장착/해제"""

from __future__ import annotations

import pytest

import src.core.economy.inventory as inventory_module
from src.core.economy.catalog import Catalog
from src.core.economy.errors import InvalidFormat, NotFound, OutOfRange, Unsupported
from src.core.economy.inventory import Inventory
from src.core.economy.models import ItemInstance, Team


def _filled(inventory: Inventory, *item_ids: int) -> Inventory:
    """item_ids 순서대로 add. add는 맨 앞에 넣으므로 마지막 id가 index 0."""
    for item_id in item_ids:
        inventory = inventory.add(ItemInstance(item_id=item_id))
    return inventory


# ── 용량 ──────────────────────────────────────────────────────


class TestCapacity:
    def test_default_capacity(self, inventory: Inventory) -> None:
        assert inventory.capacity == 256
        assert inventory.can_add() is True

    def test_full_inventory_cannot_add(self, catalog: Catalog) -> None:
        inventory = _filled(Inventory.empty(catalog, capacity=2), 10, 11)
        assert len(inventory) == 2
        assert inventory.can_add() is False

    def test_full_add_is_noop_without_validation(
        self, catalog: Catalog, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        inventory = _filled(Inventory.empty(catalog, capacity=1), 10)
        calls = []
        monkeypatch.setattr(
            inventory_module,
            "validate_instance",
            lambda *args: calls.append(args),
        )

        result = inventory.add(ItemInstance(item_id=11, wear=0.5))
        assert result is inventory
        assert len(result) == 1
        assert calls == []

    def test_validator_invoked_when_space(
        self, inventory: Inventory, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls = []
        monkeypatch.setattr(
            inventory_module,
            "validate_instance",
            lambda *args: calls.append(args),
        )
        inventory.add(ItemInstance(item_id=11))
        assert len(calls) == 1

    def test_negative_capacity_rejected(self, catalog: Catalog) -> None:
        with pytest.raises(ValueError):
            Inventory.empty(catalog, capacity=-1)


# ── 추가 ──────────────────────────────────────────────────────


class TestAdd:
    def test_prepends(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10, 11)
        assert [i.item_id for i in inventory] == [11, 10]

    def test_clears_equip_flags(self, inventory: Inventory) -> None:
        inventory = inventory.add(
            ItemInstance(item_id=15, equipped=True, equipped_ct=True, equipped_t=True)
        )
        added = inventory.get(0)
        assert added.equipped is None
        assert added.equipped_ct is None
        assert added.equipped_t is None

    def test_keeps_attributes(self, inventory: Inventory) -> None:
        instance = ItemInstance(
            item_id=14,
            wear=0.15,
            seed=321,
            stattrak=7,
            nametag="Redline",
            stickers=(40, None, None, None, None),
        )
        assert inventory.add(instance).get(0) == instance

    def test_out_of_range_wear_rejected(self, inventory: Inventory) -> None:
        before = _filled(inventory, 10)
        with pytest.raises(OutOfRange):
            before.add(ItemInstance(item_id=11, wear=1.5))
        assert len(before) == 1
        assert [i.item_id for i in before] == [10]

    def test_unsupported_attribute_rejected(self, inventory: Inventory) -> None:
        with pytest.raises(Unsupported):
            inventory.add(ItemInstance(item_id=21, stattrak=0))

    def test_unknown_item_rejected(self, inventory: Inventory) -> None:
        with pytest.raises(NotFound):
            inventory.add(ItemInstance(item_id=9999))

    @pytest.mark.parametrize(
        "attributes", [{"seed": 500.5}, {"stattrak": 3.25}, {"seed": True}]
    )
    def test_non_integer_attribute_rejected(
        self, inventory: Inventory, attributes: dict
    ) -> None:
        with pytest.raises(InvalidFormat):
            inventory.add(ItemInstance(item_id=10, **attributes))

    def test_previous_value_unchanged(self, inventory: Inventory) -> None:
        first = _filled(inventory, 10)
        second = first.add(ItemInstance(item_id=11))
        assert len(first) == 1
        assert len(second) == 2
        # 변경되지 않은 인스턴스는 참조 공유
        assert second.get(1) is first.get(0)


# ── 제거 ──────────────────────────────────────────────────────


class TestRemove:
    def test_add_then_remove_equals_empty(self, inventory: Inventory) -> None:
        result = inventory.add(ItemInstance(item_id=10)).remove(0)
        assert result == inventory
        assert result is not inventory

    def test_preserves_order(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10, 11, 12, 13)
        assert [i.item_id for i in inventory.remove(1)] == [13, 11, 10]

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_out_of_bounds_noop(self, inventory: Inventory, index: int) -> None:
        inventory = _filled(inventory, 10, 11, 12, 13)
        assert inventory.remove(index) is inventory


# ── 장착 ──────────────────────────────────────────────────────


class TestEquip:
    def test_different_models_coexist(self, inventory: Inventory) -> None:
        # index 0 = nova(11), index 1 = mp9(10)
        inventory = _filled(inventory, 10, 11).equip(0).equip(1)
        assert inventory.get(0).equipped is True
        assert inventory.get(1).equipped is True

    def test_same_model_exclusive(self, inventory: Inventory) -> None:
        # index 0 = mp9 hot rod(17), index 1 = mp9 sand dashed(10)
        inventory = _filled(inventory, 10, 17).equip(1).equip(0)
        assert inventory.get(0).equipped is True
        assert inventory.get(1).equipped is None

    def test_non_weapon_type_exclusive(self, inventory: Inventory) -> None:
        # 근접 무기는 모델이 달라도 타입 단위로 하나만
        inventory = _filled(inventory, 20, 22)
        inventory = inventory.equip(1, Team.T).equip(0, Team.T)
        assert inventory.get(0).equipped_t is True
        assert inventory.get(1).equipped_t is None

    def test_team_slots_independent(self, inventory: Inventory) -> None:
        # index 0 = awp safari(18), index 1 = awp asiimov(15)
        inventory = _filled(inventory, 15, 18)
        inventory = inventory.equip(1, Team.CT).equip(0, Team.T)
        assert inventory.get(1).equipped_ct is True
        assert inventory.get(0).equipped_t is True

        inventory = inventory.equip(0, Team.CT)
        assert inventory.get(0).equipped_ct is True
        assert inventory.get(0).equipped_t is True
        assert inventory.get(1).equipped_ct is None

    def test_other_types_untouched(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 30, 31, 10)
        inventory = inventory.equip(1).equip(0)
        # musickit(31) 장착 유지, 무기(10) 장착
        assert inventory.get(1).equipped is True
        assert inventory.get(0).equipped is True
        inventory = inventory.equip(2)
        assert inventory.get(2).equipped is True
        assert inventory.get(1).equipped is None
        assert inventory.get(0).equipped is True

    def test_already_equipped_noop(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10).equip(0)
        assert inventory.equip(0) is inventory

    def test_team_item_requires_team(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 14)
        assert inventory.equip(0) is inventory

    def test_wrong_team_noop(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 14)
        assert inventory.equip(0, Team.CT) is inventory

    def test_team_agnostic_item_refuses_team(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 30)
        assert inventory.equip(0, Team.T) is inventory

    @pytest.mark.parametrize("index", [-1, 1, 50])
    def test_out_of_bounds_noop(self, inventory: Inventory, index: int) -> None:
        inventory = _filled(inventory, 10)
        assert inventory.equip(index) is inventory

    def test_previous_value_not_mutated(self, inventory: Inventory) -> None:
        before = _filled(inventory, 10, 17).equip(1)
        after = before.equip(0)
        assert before.get(1).equipped is True
        assert before.get(0).equipped is None
        assert after.get(1).equipped is None


# ── 장착 해제 ─────────────────────────────────────────────────


class TestUnequip:
    def test_clears_only_requested_slot(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 15).equip(0, Team.T).equip(0, Team.CT)
        inventory = inventory.unequip(0, Team.T)
        assert inventory.get(0).equipped_t is None
        assert inventory.get(0).equipped_ct is True

    def test_no_cascade(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10, 11).equip(0).equip(1)
        inventory = inventory.unequip(0)
        assert inventory.get(0).equipped is None
        assert inventory.get(1).equipped is True

    def test_out_of_bounds_noop(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10)
        assert inventory.unequip(3) is inventory

    def test_not_equipped_noop(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10)
        assert inventory.unequip(0) == inventory


# ── 조회 ──────────────────────────────────────────────────────


class TestGetAll:
    def test_snapshot(self, inventory: Inventory) -> None:
        inventory = _filled(inventory, 10, 21)
        entries = inventory.get_all()
        assert [e.index for e in entries] == [0, 1]
        assert entries[0].item.id == 21
        assert entries[1].instance.item_id == 10
        assert isinstance(entries, list)

    def test_from_instances(self, catalog: Catalog) -> None:
        instances = [
            ItemInstance(item_id=10, equipped=True),
            ItemInstance(item_id=15, equipped_t=True),
        ]
        inventory = Inventory.from_instances(catalog, instances, capacity=10)
        assert len(inventory) == 2
        assert inventory.get(0).equipped is True
        assert inventory.capacity == 10
