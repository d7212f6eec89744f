import argparse
import calendar
import json
import re
import sys
from typing import List, Optional, Tuple

from .config import settings
from .logging_setup import configure_logging
from .services.oracle import describe_date, today_in
from .schemas import KinResponse

DATE_PATTERNS = (
    (re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})"), ("y", "m", "d")),
    (re.compile(r"(\d{4})/(\d{1,2})/(\d{1,2})"), ("y", "m", "d")),
    (re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})"), ("d", "m", "y")),
)


def parse_date_arg(s: str) -> Tuple[int, int, int]:
    """
    接受：
    - YYYY-MM-DD
    - YYYY/MM/DD
    - DD/MM/YYYY
    2/29 不論年份都接受（Hunab Ku）。
    """
    s = s.strip()
    for pattern, order in DATE_PATTERNS:
        m = pattern.fullmatch(s)
        if not m:
            continue
        parts = dict(zip(order, (int(g) for g in m.groups())))
        year, month, day = parts["y"], parts["m"], parts["d"]
        if not 1 <= month <= 12 or day < 1:
            break
        if (month, day) != (2, 29) and day > calendar.monthrange(year, month)[1]:
            break
        return year, month, day
    raise ValueError(f"invalid date {s!r}; use YYYY-MM-DD, YYYY/MM/DD or DD/MM/YYYY")


def format_result(resp: KinResponse) -> str:
    data = resp.data
    if data.is_hunab_ku:
        return f"{data.date}  {data.display_text}"
    return f"{data.date}  KIN {data.kin}  {data.display_text}  ({data.seal_image})"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="kin", description="13 月亮曆 Kin 計算")
    parser.add_argument("date", nargs="?", help="YYYY-MM-DD、YYYY/MM/DD 或 DD/MM/YYYY；省略時為今天")
    parser.add_argument("--json", action="store_true", help="以 JSON 輸出")
    args = parser.parse_args(argv)

    configure_logging(settings.LOG_LEVEL)

    if args.date:
        try:
            year, month, day = parse_date_arg(args.date)
        except ValueError as e:
            parser.error(str(e))
    else:
        today = today_in(settings.DEFAULT_TZ)
        year, month, day = today.year, today.month, today.day

    resp = describe_date(year, month, day, settings.MESSAGES_FILE)

    if args.json:
        print(json.dumps(resp.model_dump(exclude_none=True), ensure_ascii=False, indent=2))
    elif resp.success:
        print(format_result(resp))
    else:
        print(f"{resp.error}: {year}", file=sys.stderr)

    return 0 if resp.success else 1


if __name__ == "__main__":
    sys.exit(main())
