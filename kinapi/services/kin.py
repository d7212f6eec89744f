from types import MappingProxyType
from typing import Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict


# 月份常數（官方講義）
MONTH_OFFSETS = MappingProxyType({
    1: 0,
    2: 31,
    3: 59,
    4: 90,
    5: 120,
    6: 151,
    7: 181,
    8: 212,
    9: 243,
    10: 13,
    11: 44,
    12: 74,
})

# 年份常數：表外年份不推算，一律視為「尚未定義」
YEAR_OFFSETS = MappingProxyType({
    2014: 62,
    2015: 167,
    2016: 12,
    2017: 117,
    2018: 222,
    2019: 67,
    2020: 172,
    2021: 17,
    2022: 122,
    2023: 227,
    2024: 72,
    2025: 177,
    2026: 22,
    2027: 127,
    2028: 232,
    2029: 77,
    2030: 182,
    2031: 27,
    2032: 132,
    2033: 237,
    2034: 82,
    2035: 187,
})

SEALS = (
    "紅龍", "白風", "藍夜", "黃種子", "紅蛇",
    "白世界橋", "藍手", "黃星星", "紅月", "白狗",
    "藍猴", "黃人", "紅天行者", "白巫師", "藍鷹",
    "黃戰士", "紅地球", "白鏡", "藍風暴", "黃太陽",
)

TONES = (
    "磁性的", "月亮的", "電力的", "自我存在的", "超頻的",
    "韻律的", "共振的", "銀河星系的", "太陽的", "行星的",
    "光譜的", "水晶的", "宇宙的",
)

SEAL_COLORS = ("red", "white", "blue", "yellow")

KIN_CYCLE = 260
HUNAB_KU = "Hunab Ku"


class Kin(BaseModel):
    """一般的 Kin 結果（1–260），圖騰與調性都由 kin 本身推得。"""
    model_config = ConfigDict(frozen=True)

    kin: int
    seal_index: int
    tone_index: int
    seal_name: str
    tone_name: str
    display_name: str

    @property
    def seal_number(self) -> int:
        return self.seal_index + 1

    @property
    def tone_number(self) -> int:
        return self.tone_index + 1

    @property
    def color(self) -> str:
        return SEAL_COLORS[self.seal_index % 4]


class HunabKu(BaseModel):
    """2 月 29 日的固定結果，不屬於 260 天循環。"""
    model_config = ConfigDict(frozen=True)

    special: Literal["HunabKu"] = "HunabKu"
    display_name: str = HUNAB_KU


class UnsupportedYear(BaseModel):
    """年份常數表中沒有這一年。"""
    model_config = ConfigDict(frozen=True)

    year: int


KinResult = Union[Kin, HunabKu, UnsupportedYear]


class UnsupportedYearError(LookupError):
    def __init__(self, year: int):
        super().__init__(f"年份 {year} 的常數尚未定義")
        self.year = year


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)


def normalize_kin(raw: int) -> int:
    """任意整數折回 1–260；260 的倍數落在 260 而不是 0。"""
    return (raw - 1) % KIN_CYCLE + 1


def supported_years() -> Tuple[int, ...]:
    return tuple(sorted(YEAR_OFFSETS))


def kin_from_number(kin: int) -> Kin:
    """
    由 Kin 編號（1–260）推出圖騰與調性：
    - 圖騰：(kin - 1) % 20
    - 調性：(kin - 1) % 13
    - 完整名稱：調性在前、圖騰在後
    """
    if isinstance(kin, bool) or not isinstance(kin, int) or not 1 <= kin <= KIN_CYCLE:
        raise ValueError(f"Kin must be an integer in 1..{KIN_CYCLE}, got {kin!r}")

    seal_index = (kin - 1) % len(SEALS)
    tone_index = (kin - 1) % len(TONES)
    seal_name = SEALS[seal_index]
    tone_name = TONES[tone_index]

    return Kin(
        kin=kin,
        seal_index=seal_index,
        tone_index=tone_index,
        seal_name=seal_name,
        tone_name=tone_name,
        display_name=f"{tone_name}{seal_name}",
    )


def raw_kin(year: int, month: int, day: int) -> Optional[int]:
    """
    未折返前的總和：年份常數 + 月份常數 + 日期（閏年 2/28 之後 +1）。
    年份不在表內時回傳 None。
    """
    if month not in MONTH_OFFSETS:
        raise ValueError(f"month must be in 1..12, got {month!r}")

    year_offset = YEAR_OFFSETS.get(year)
    if year_offset is None:
        return None

    raw = year_offset + MONTH_OFFSETS[month] + day

    # 閏年：2/28 之後的日期多算一天（含呼叫端未檢查的 2/30、2/31）
    if is_leap_year(year) and (month > 2 or (month == 2 and day > 28)):
        raw += 1

    return raw


def compute_kin(year: int, month: int, day: int) -> KinResult:
    """
    13 月亮曆 Kin 計算：
    - 2/29 → HunabKu（不論年份）
    - 年份不在常數表 → UnsupportedYear
    - 其餘 → Kin
    月份須在 1–12；日期是否存在於該月由呼叫端負責檢查，
    不存在的日期（如 4/31）照樣以常數表相加，結果沒有曆法意義。
    """
    if month == 2 and day == 29:
        return HunabKu()

    raw = raw_kin(year, month, day)
    if raw is None:
        return UnsupportedYear(year=year)

    return kin_from_number(normalize_kin(raw))


def require_kin(year: int, month: int, day: int) -> Union[Kin, HunabKu]:
    """同 compute_kin，但年份未定義時丟出 UnsupportedYearError。"""
    result = compute_kin(year, month, day)
    if isinstance(result, UnsupportedYear):
        raise UnsupportedYearError(result.year)
    return result
