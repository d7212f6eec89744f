import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .kin import KIN_CYCLE

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
DEFAULT_MESSAGES_FILE = DATA_DIR / "kin_messages.json"

PLACEHOLDER = "能量讀取中..."


class KinMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    synchronic_message: str = Field(PLACEHOLDER, validation_alias=AliasChoices("synchronicMessage", "synchronic_message"))
    high_frequency: str = Field(PLACEHOLDER, validation_alias=AliasChoices("highFrequency", "high_frequency"))
    low_frequency: str = Field(PLACEHOLDER, validation_alias=AliasChoices("lowFrequency", "low_frequency"))
    alignment: str = PLACEHOLDER


PLACEHOLDER_MESSAGE = KinMessage()


@lru_cache(maxsize=None)
def load_messages(path: Optional[str] = None) -> Dict[int, KinMessage]:
    """
    Kin 訊息資料庫（JSON，以 kin 編號字串為 key）。
    每個檔案只讀一次。
    """
    file = Path(path) if path else DEFAULT_MESSAGES_FILE
    with open(file, "r", encoding="utf-8") as f:
        raw = json.load(f)
    return {int(k): KinMessage.model_validate(v) for k, v in raw.items()}


def get_kin_message(kin, path: Optional[str] = None) -> KinMessage:
    """資料缺失或 kin 超出 1–260 時回傳預設文字；數字字串（如 "28"）視同整數。"""
    if isinstance(kin, str) and kin.strip().isdigit():
        kin = int(kin)
    if isinstance(kin, bool) or not isinstance(kin, int) or not 1 <= kin <= KIN_CYCLE:
        return PLACEHOLDER_MESSAGE
    return load_messages(path).get(kin, PLACEHOLDER_MESSAGE)
