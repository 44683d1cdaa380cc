class MessageTable:
    """Message key -> ordered per-language values, in the order keys were first seen"""

    def __init__(self):
        self._rows: dict[str, list[str]] = {}

    def append(self, key: str, value: str):
        # same key in several files (or twice in one file) accumulates
        self._rows.setdefault(key, []).append(value)

    def replace(self, key: str, values: list[str]):
        self._rows[key] = list(values)

    def rows(self):
        return self._rows.items()

    def keys(self):
        return self._rows.keys()

    def short_rows(self, width: int) -> list[str]:
        """Keys holding fewer than `width` values"""
        return [key for key, values in self._rows.items() if len(values) < width]

    def __getitem__(self, key: str) -> list[str]:
        return self._rows[key]

    def __contains__(self, key) -> bool:
        return key in self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __repr__(self):
        return f"MessageTable({self._rows!r})"
