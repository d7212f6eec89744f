import calendar
import random
from typing import Optional

from fastapi import FastAPI, HTTPException, Path, Query
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logging_setup import configure_logging
from .schemas import KinResponse, YearsResponse
from .services.kin import KIN_CYCLE, supported_years
from .services.oracle import describe_date, describe_kin, draw_random_kin, today_in


app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    description="13 月亮曆 Kin 計算服務"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def on_startup():
    """啟動時設定 logging。"""
    configure_logging(settings.LOG_LEVEL)


@app.get("/")
def root():
    return {"status": "ok", "app": settings.APP_NAME}


def check_calendar_date(year: int, month: int, day: int) -> None:
    """
    日期合法性檢查（核心計算不做）：
    - 2/29 不論年份都接受，交給 Hunab Ku 處理
    - 其他日期不可超過該月天數
    """
    if month == 2 and day == 29:
        return
    last_day = calendar.monthrange(year, month)[1]
    if day > last_day:
        raise HTTPException(
            status_code=422,
            detail=f"{year}-{month:02d} has only {last_day} days",
        )


# ----------------------------------------------------
# KIN ENDPOINTS
# ----------------------------------------------------


@app.get("/api/v1/kin/today", response_model=KinResponse)
def kin_today():
    """今日能量：以 DEFAULT_TZ 的今天日期計算。"""
    today = today_in(settings.DEFAULT_TZ)
    return describe_date(today.year, today.month, today.day, settings.MESSAGES_FILE)


@app.get("/api/v1/kin/date", response_model=KinResponse)
def kin_for_date(
    year: int = Query(..., ge=1, le=9999),
    month: int = Query(..., ge=1, le=12),
    day: int = Query(..., ge=1, le=31),
):
    """
    指定日期的 Kin：
    - 不存在的日期 → 422
    - 年份未定義 → success=False（由呼叫端決定如何顯示）
    """
    check_calendar_date(year, month, day)
    return describe_date(year, month, day, settings.MESSAGES_FILE)


@app.get("/api/v1/kin/random", response_model=KinResponse)
def kin_random(seed: Optional[str] = None):
    """隨機抽一個 Kin；帶 seed 時結果固定。"""
    rng = random.Random(seed) if seed is not None else None
    return describe_kin(draw_random_kin(rng), settings.MESSAGES_FILE)


@app.get("/api/v1/kin/{kin}", response_model=KinResponse)
def kin_by_number(kin: int = Path(..., ge=1, le=KIN_CYCLE)):
    return describe_kin(kin, settings.MESSAGES_FILE)


@app.get("/api/v1/years", response_model=YearsResponse)
def years():
    return YearsResponse(years=list(supported_years()))
