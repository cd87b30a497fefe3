"""아이템 경제 상수 — 속성 범위, 확률, 이름표 패턴"""

import re

# === 스탯트랙 ===
MIN_STATTRAK = 0
MAX_STATTRAK = 999999

# === 마모도 (float) ===
MIN_WEAR = 0.0
MAX_WEAR = 1.0
WEAR_FACTOR = 0.000001  # 마모도 표시 정밀도 (소수점 6자리)

MAX_FACTORY_NEW_WEAR = 0.07
MAX_MINIMAL_WEAR_WEAR = 0.15
MAX_FIELD_TESTED_WEAR = 0.37
MAX_WELL_WORN_WEAR = 0.44

# === 패턴 시드 ===
MIN_SEED = 1
MAX_SEED = 1000

# === 스티커 ===
MIN_STICKER_WEAR = 0.0
MAX_STICKER_WEAR = 0.9
MAX_STICKERS = 5

# === 이름표 ===
MAX_NAMETAG_LENGTH = 20
NAMETAG_RE = re.compile(
    r"^[A-Za-z0-9`!@#$%^&*+,\-=(){}\[\]/|\\.?:;'_"
    r"\u2e80-\u2fdf\u3005\u3007\u3021-\u3029\u3038-\u303b"  # Han radicals, marks
    r"\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"  # Han
    r"\U00020000-\U000323af"  # Han extensions
    r"\u3040-\u309f"  # Hiragana
    r"\u30a0-\u30ff"  # Katakana
    r"\s]{0," + str(MAX_NAMETAG_LENGTH) + r"}\Z"
)

# === 상자 개봉 확률 ===
BASE_ODD = 0.8  # 가장 낮은 등급의 가중치
ODD_DIVISOR = 5  # 등급이 하나 오를 때마다 1/5
STATTRAK_ODD = 1 / 10

# === 인벤토리 ===
DEFAULT_INVENTORY_CAPACITY = 256

# === 생성 이미지 플래그 (CatalogItem.local_image 비트) ===
GENERATED_LIGHT = 1 << 0
GENERATED_MEDIUM = 1 << 1
GENERATED_HEAVY = 1 << 2
