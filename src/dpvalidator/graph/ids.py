"""
Monotonic id allocation for one graph-build session.
"""
# 说明：单次建图会话内的节点 id 分配器。
# 职责：
# - 以锁保护的计数器保证 id 在并发扩展的分支之间依然唯一且单调递增
# - advance(...)：在应用外部补丁后把计数器推进到补丁中的最大 id

from __future__ import annotations

import threading
from typing import List


class IdAllocator:
    """Lock-guarded counter handing out strictly increasing node ids."""

    def __init__(self, maximum_id: int = 0) -> None:
        self._maximum_id = int(maximum_id)
        self._lock = threading.Lock()

    @property
    def maximum_id(self) -> int:
        with self._lock:
            return self._maximum_id

    def allocate(self, count: int = 1) -> List[int]:
        if count < 0:
            raise ValueError("count must be non-negative")
        with self._lock:
            start = self._maximum_id + 1
            self._maximum_id += count
            return list(range(start, start + count))

    def next_id(self) -> int:
        return self.allocate(1)[0]

    def advance(self, maximum_id: int) -> None:
        with self._lock:
            self._maximum_id = max(self._maximum_id, int(maximum_id))
