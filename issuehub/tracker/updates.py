# ============================================
# tracker/updates.py
# ============================================
from typing import Any, Dict, Iterator, Mapping, Tuple


class FieldUpdateSet:
    """
    The fields a caller explicitly asked to change.

    A field is either present (with any value, including '' or None) or
    absent. Absent fields are left untouched by the update.
    """
    fields: Tuple[str, ...] = ()

    def __init__(self, **values: Any):
        unknown = set(values) - set(self.fields)
        if unknown:
            raise TypeError(f"Unknown fields for {type(self).__name__}: {sorted(unknown)}")
        self._values: Dict[str, Any] = dict(values)

    @classmethod
    def from_data(cls, data: Mapping[str, Any]):
        """Build from a payload, keeping only the known keys it contains"""
        return cls(**{name: data[name] for name in cls.fields if name in data})

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def __bool__(self) -> bool:
        return bool(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __getitem__(self, name: str) -> Any:
        return self._values[name]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def items(self):
        return self._values.items()


class ProjectUpdateSet(FieldUpdateSet):
    fields = ('title', 'description')


class IssueUpdateSet(FieldUpdateSet):
    fields = ('title', 'description', 'status', 'priority')
