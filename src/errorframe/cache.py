from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class TransformResult:
    code: str | None = None
    map: Any = None  # source map payload: dict, JSON text or a decoded index


@dataclass(frozen=True, slots=True)
class CachedModule:
    transform_result: TransformResult | None = None


class ModuleCache(Protocol):
    def has(self, file: str) -> bool: ...

    def get(self, file: str) -> CachedModule | None: ...


class ModuleRegistry:
    """In-memory `ModuleCache`: executed file path -> its last transform."""

    def __init__(self, modules: dict[str, CachedModule] | None = None) -> None:
        self._modules: dict[str, CachedModule] = dict(modules or {})

    def register(self, file: str, *, code: str | None = None, map: Any = None) -> CachedModule:
        mod = CachedModule(transform_result=TransformResult(code=code, map=map))
        self._modules[file] = mod
        return mod

    def forget(self, file: str) -> None:
        self._modules.pop(file, None)

    def has(self, file: str) -> bool:
        return file in self._modules

    def get(self, file: str) -> CachedModule | None:
        return self._modules.get(file)

    def __len__(self) -> int:
        return len(self._modules)
