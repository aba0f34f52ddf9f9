"""Alchemy trait discovery and two-ingredient experiment rules."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

from alchimera.ids import MaterialId
from alchimera.inventory import ItemStack
from alchimera.material import AlchemyTrait, MaterialDefinition


@dataclass(frozen=True)
class TraitDiscovery:
    """Traits found on a single inspected material."""

    material_id: MaterialId
    discovered_traits: tuple[AlchemyTrait, ...]


class AlchemyKnowledge:
    """Player-facing knowledge discovered by inspecting materials."""

    def __init__(self) -> None:
        self._discoveries: list[TraitDiscovery] = []

    @property
    def discoveries(self) -> tuple[TraitDiscovery, ...]:
        return tuple(self._discoveries)

    def inspect_material(self, material: MaterialDefinition) -> TraitDiscovery:
        """Record every trait the material exposes and return the discovery."""
        discovery = TraitDiscovery(material.id, tuple(material.traits))
        for position, existing in enumerate(self._discoveries):
            if existing.material_id == material.id:
                self._discoveries[position] = discovery
                break
        else:
            self._discoveries.append(discovery)
        return discovery

    def has_discovered_trait(self, material_id: MaterialId, alchemy_trait: AlchemyTrait) -> bool:
        """Return True when the trait has been discovered for the material."""
        discovery = next(
            (found for found in self._discoveries if found.material_id == material_id), None
        )
        return discovery is not None and alchemy_trait in discovery.discovered_traits

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlchemyKnowledge):
            return NotImplemented
        return self._discoveries == other._discoveries

    def __repr__(self) -> str:
        return f"AlchemyKnowledge(discoveries={self._discoveries!r})"


@dataclass(frozen=True)
class AlchemyExperimentRule:
    """A compatible trait pair and the reagent it produces."""

    first_trait: AlchemyTrait
    second_trait: AlchemyTrait
    output: ItemStack

    def matches(self, first_trait: AlchemyTrait, second_trait: AlchemyTrait) -> bool:
        """Return True when the pair matches this rule in either order."""
        return {
            (self.first_trait, self.second_trait),
            (self.second_trait, self.first_trait),
        }.__contains__((first_trait, second_trait))


class AlchemyExperimentStatus(enum.Enum):
    """Outcome state of an alchemy experiment."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class AlchemyExperimentResult:
    """Result of combining two ingredients."""

    status: AlchemyExperimentStatus
    output: ItemStack | None = None
    matched_traits: tuple[AlchemyTrait, AlchemyTrait] | None = None

    @classmethod
    def success(
        cls, output: ItemStack, matched_traits: tuple[AlchemyTrait, AlchemyTrait]
    ) -> AlchemyExperimentResult:
        return cls(AlchemyExperimentStatus.SUCCESS, output, tuple(matched_traits))

    @classmethod
    def failed(cls) -> AlchemyExperimentResult:
        return cls(AlchemyExperimentStatus.FAILED)


class AlchemyExperiment:
    """Two-ingredient experiment rule table."""

    def __init__(self, rules: Iterable[AlchemyExperimentRule]) -> None:
        self.rules: tuple[AlchemyExperimentRule, ...] = tuple(rules)

    def combine(
        self, first: MaterialDefinition, second: MaterialDefinition
    ) -> AlchemyExperimentResult:
        """Combine two materials by matching trait pairs against the rules, in order."""
        for first_trait in first.traits:
            for second_trait in second.traits:
                rule = next(
                    (rule for rule in self.rules if rule.matches(first_trait, second_trait)),
                    None,
                )
                if rule is not None:
                    return AlchemyExperimentResult.success(rule.output, (first_trait, second_trait))
        return AlchemyExperimentResult.failed()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AlchemyExperiment):
            return NotImplemented
        return self.rules == other.rules

    def __repr__(self) -> str:
        return f"AlchemyExperiment(rules={self.rules!r})"