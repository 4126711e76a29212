from typing import Any, Dict, Hashable, Optional


class PostCache:
    """
    In-memory memo of computed post lists, pages and single posts.

    Entries are valid for the lifetime of the process; there is no TTL and no
    eviction. invalidate() is the only way to drop them. Each full invalidate
    bumps `generation`, and set_if_current() refuses values computed under an
    older generation.
    """

    def __init__(self):
        self._entries: Dict[Hashable, Any] = {}
        self.generation = 0

    def get(self, key: Hashable, default: Any = None) -> Any:
        return self._entries.get(key, default)

    def set(self, key: Hashable, value: Any) -> Any:
        self._entries[key] = value
        return value

    def set_if_current(self, key: Hashable, value: Any, generation: int) -> Any:
        if generation == self.generation:
            self._entries[key] = value
        return value

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        if key is None:
            self._entries.clear()
            self.generation += 1
        else:
            self._entries.pop(key, None)
