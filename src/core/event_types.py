"""이벤트 유형 상수"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # unlock
    CONTAINER_UNLOCKED = "container_unlocked"
    UNLOCK_REJECTED = "unlock_rejected"

    # inventory
    INVENTORY_ITEM_ADDED = "inventory_item_added"
    INVENTORY_ITEM_REMOVED = "inventory_item_removed"
    INVENTORY_ITEM_EQUIPPED = "inventory_item_equipped"
    INVENTORY_ITEM_UNEQUIPPED = "inventory_item_unequipped"
