"""
Domain — OHLCV Bar 與時間序列。
純資料結構：依加入順序保存 Bar，不去重、不排序、不檢查時間單調性。
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Bar:
    """單日 OHLCV 資料（timestamp 為該日 00:00 UTC）。"""

    timestamp: datetime
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: Decimal


@dataclass
class TimeSeries:
    """以商品代號命名的 Bar 序列。"""

    name: str
    bars: list[Bar] = field(default_factory=list)

    def add_bar(self, bar: Bar) -> None:
        self.bars.append(bar)

    @property
    def bar_count(self) -> int:
        return len(self.bars)

    @property
    def is_empty(self) -> bool:
        return not self.bars

    @property
    def first_bar(self) -> Bar | None:
        return self.bars[0] if self.bars else None

    @property
    def last_bar(self) -> Bar | None:
        return self.bars[-1] if self.bars else None

    def __len__(self) -> int:
        return len(self.bars)

    def __iter__(self) -> Iterator[Bar]:
        return iter(self.bars)
