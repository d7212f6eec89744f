import logging
import random
from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ..schemas import KinData, KinResponse
from .kin import (
    HUNAB_KU,
    KIN_CYCLE,
    MONTH_OFFSETS,
    YEAR_OFFSETS,
    HunabKu,
    Kin,
    UnsupportedYear,
    compute_kin,
    kin_from_number,
    supported_years,
)
from .messages import get_kin_message

logger = logging.getLogger(__name__)

HUNAB_KU_IMAGE = "hunab-ku-1.png"
UNSUPPORTED_YEAR_TEXT = "年份數據未定義"


def today_in(tz_name: str) -> date:
    """指定時區（IANA 名稱）的今天日期。"""
    return datetime.now(ZoneInfo(tz_name)).date()


def seal_image_name(seal_number: int) -> str:
    """圖騰圖片檔名：01.png – 20.png"""
    return f"{seal_number:02d}.png"


def draw_random_kin(rng: Optional[random.Random] = None) -> int:
    rng = rng or random.Random()
    return rng.randint(1, KIN_CYCLE)


def kin_data(k: Kin, day: Optional[str] = None, messages_file: Optional[str] = None) -> KinData:
    return KinData(
        kin=k.kin,
        seal=k.seal_name,
        tone=k.tone_name,
        seal_number=k.seal_number,
        tone_number=k.tone_number,
        color=k.color,
        display_text=k.display_name,
        seal_image=seal_image_name(k.seal_number),
        messages=get_kin_message(k.kin, messages_file),
        date=day,
    )


def describe_date(year: int, month: int, day: int, messages_file: Optional[str] = None) -> KinResponse:
    """
    日期查詢的回應：
    - 2/29 → Hunab Ku
    - 年份未定義 → success=False + 支援年份範圍
    - 其餘 → Kin + 圖騰圖片 + 訊息
    """
    result = compute_kin(year, month, day)
    iso = f"{year:04d}-{month:02d}-{day:02d}"

    if isinstance(result, HunabKu):
        logger.debug("%s 為 2/29，顯示 Hunab Ku", iso)
        return KinResponse(
            success=True,
            data=KinData(
                is_hunab_ku=True,
                display_text=HUNAB_KU,
                seal_image=HUNAB_KU_IMAGE,
                date=iso,
            ),
        )

    if isinstance(result, UnsupportedYear):
        years = supported_years()
        logger.warning("年份 %s 的常數尚未定義（支援 %s–%s）", year, years[0], years[-1])
        return KinResponse(
            success=False,
            error=UNSUPPORTED_YEAR_TEXT,
            detail={"year": year, "min_year": years[0], "max_year": years[-1]},
        )

    logger.debug(
        "%s: 年份常數=%s 月份常數=%s 日期=%s → KIN %s %s",
        iso, YEAR_OFFSETS[year], MONTH_OFFSETS[month], day, result.kin, result.display_name,
    )
    return KinResponse(success=True, data=kin_data(result, iso, messages_file))


def describe_kin(kin: int, messages_file: Optional[str] = None) -> KinResponse:
    return KinResponse(success=True, data=kin_data(kin_from_number(kin), messages_file=messages_file))
