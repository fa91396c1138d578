"""Counterweight slab stack."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..common.errors import CounterweightInvalid, UnsafeConfiguration


@dataclass(frozen=True)
class CounterweightSlab:
    id: str
    weight_kg: float
    stack_index: int


@dataclass
class CounterweightConfig:
    """Stack of identical slabs on the superstructure.

    ``add_slab`` and ``set_slab_count`` only enforce the slab ceiling. The
    weight envelope (one slab to ``max_slabs`` slabs) is checked by
    ``validate``.
    """

    slab_weight_kg: float
    max_slabs: int
    moment_arm_m: float
    slabs: list[CounterweightSlab] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.slab_weight_kg <= 0.0:
            raise ValueError("slab_weight_kg must be positive")
        if self.max_slabs < 1:
            raise ValueError("max_slabs must be at least 1")

    @property
    def min_weight_kg(self) -> float:
        return self.slab_weight_kg

    @property
    def max_weight_kg(self) -> float:
        return self.slab_weight_kg * self.max_slabs

    def get_total_weight_kg(self) -> float:
        return sum(s.weight_kg for s in self.slabs)

    def get_slab_count(self) -> int:
        return len(self.slabs)

    def add_slab(self) -> CounterweightSlab:
        if len(self.slabs) >= self.max_slabs:
            raise UnsafeConfiguration(f"Cannot add more than {self.max_slabs} counterweight slabs")

        index = len(self.slabs)
        slab = CounterweightSlab(id=f"slab_{index + 1}", weight_kg=self.slab_weight_kg, stack_index=index)
        self.slabs.append(slab)
        return slab

    def remove_slab(self) -> CounterweightSlab | None:
        """Remove the top slab; ``None`` when the stack is empty."""
        if not self.slabs:
            return None
        return self.slabs.pop()

    def set_slab_count(self, count: int) -> None:
        if count < 0 or count > self.max_slabs:
            raise CounterweightInvalid(count * self.slab_weight_kg, self.min_weight_kg, self.max_weight_kg)

        self.slabs.clear()
        for _ in range(count):
            self.add_slab()

    def calculate_moment(self) -> float:
        """Counter-moment in kg·m about the slew centre."""
        return self.get_total_weight_kg() * self.moment_arm_m

    def validate(self) -> None:
        total = self.get_total_weight_kg()
        if len(self.slabs) > self.max_slabs:
            raise CounterweightInvalid(total, self.min_weight_kg, self.max_weight_kg)
        if total < self.min_weight_kg or total > self.max_weight_kg:
            raise CounterweightInvalid(total, self.min_weight_kg, self.max_weight_kg)

    def preset_max(self) -> None:
        self.set_slab_count(self.max_slabs)

    def preset_medium(self) -> None:
        self.set_slab_count(self.max_slabs // 2)

    def preset_min(self) -> None:
        self.set_slab_count(1)


__all__ = ["CounterweightSlab", "CounterweightConfig"]
