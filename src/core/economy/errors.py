"""아이템 경제 예외 계층

모두 동기적으로 발생하며 재시도 의미가 없다.
호출자는 입력을 고치거나 요청을 거부한다.
"""


class EconomyError(ValueError):
    """아이템 경제 오류의 공통 부모"""


class NotFound(EconomyError):
    """카탈로그에 없는 아이템 id"""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"item not found: {item_id}")
        self.item_id = item_id


class NotAContainer(EconomyError):
    """상자가 아닌 아이템에 개봉 요청"""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"item is not a container: {item_id}")
        self.item_id = item_id


class ForeignItem(EconomyError):
    """개봉 결과 아이템이 해당 상자 소속이 아님"""

    def __init__(self, container_id: int, item_id: int) -> None:
        super().__init__(
            f"unlocked item {item_id} is not from container {container_id}"
        )
        self.container_id = container_id
        self.item_id = item_id


class Unsupported(EconomyError):
    """아이템 타입이 해당 속성을 지원하지 않음"""

    def __init__(self, attribute: str, item_type: str) -> None:
        super().__init__(f"{item_type} items do not support {attribute}")
        self.attribute = attribute
        self.item_type = item_type


class OutOfRange(EconomyError):
    """수치 속성이 허용 범위 밖"""

    def __init__(self, attribute: str, value: object, low: float, high: float) -> None:
        super().__init__(f"{attribute} {value!r} is out of range [{low}, {high}]")
        self.attribute = attribute
        self.value = value
        self.low = low
        self.high = high


class InvalidFormat(EconomyError):
    """값 형식 불일치 (이름표 패턴, 정수가 아닌 seed/stattrak)"""

    def __init__(self, attribute: str, value: object) -> None:
        super().__init__(f"invalid {attribute}: {value!r}")
        self.attribute = attribute
        self.value = value
