"""
Curriculum Store.

CurriculumBuilder is the mutable collection owned by an aggregation pass.
Once the pass is finished, build() freezes it into a CurriculumStore that
consumers can only query.
"""

from __future__ import annotations

from collections.abc import Iterator

from loguru import logger

from .models import Module, ModuleDraft
from .titles import normalize

MAX_MODULES = 10


class CurriculumStore:
    """Read-only, insertion-ordered collection of modules."""

    def __init__(self, modules: tuple[Module, ...] = ()):
        self._modules = tuple(modules)

    def count(self) -> int:
        return len(self._modules)

    def by_index(self, index: int) -> Module | None:
        """Module at position index, or None when out of range."""
        if 0 <= index < len(self._modules):
            return self._modules[index]
        return None

    def by_id(self, module_id: str) -> Module | None:
        """First module whose id matches, or None."""
        for module in self._modules:
            if module.id == module_id:
                return module
        return None

    def ids(self) -> list[str]:
        return [module.id for module in self._modules]

    def __len__(self) -> int:
        return len(self._modules)

    def __iter__(self) -> Iterator[Module]:
        return iter(self._modules)

    def __repr__(self) -> str:
        return f"CurriculumStore(modules={self.ids()!r})"


class CurriculumBuilder:
    """Capacity-bounded module collection filled during aggregation."""

    def __init__(self, max_modules: int = MAX_MODULES):
        self.max_modules = max_modules
        self._modules: list[ModuleDraft] = []

    @property
    def module_count(self) -> int:
        return len(self._modules)

    @property
    def is_full(self) -> bool:
        return len(self._modules) >= self.max_modules

    def find(self, module_id: str) -> ModuleDraft | None:
        for module in self._modules:
            if module.id == module_id:
                return module
        return None

    def get_or_create(self, module_id: str) -> ModuleDraft | None:
        """
        Return the module for module_id, creating it if there is room.

        Returns None when the module does not exist and capacity is exhausted;
        existing modules are never replaced.
        """
        module = self.find(module_id)
        if module is not None:
            return module

        if self.is_full:
            return None

        module = ModuleDraft(id=module_id, display_name=normalize(module_id), valid=True)
        self._modules.append(module)
        logger.debug(f"Created module: {module.display_name}")
        return module

    def discard(self, module: ModuleDraft) -> None:
        """Remove a provisionally created module."""
        self._modules = [m for m in self._modules if m is not module]

    def build(self) -> CurriculumStore:
        """Freeze into a store, dropping modules with neither lessons nor quiz."""
        kept = []
        for module in self._modules:
            if module.has_content:
                kept.append(module)
            else:
                logger.info(f"Dropping empty module: {module.id}")
        return CurriculumStore(tuple(module.freeze() for module in kept))
