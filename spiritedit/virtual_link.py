"""Virtual links between entities named through their custom properties."""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any

YELLOW = (1.0, 1.0, 0.0)
BLUE = (0.0, 0.0, 1.0)

UNIQUE_NAME_KEY = "unique_name"
SOURCE_NAME_KEY = "source_unique_name"
TARGET_NAME_KEY = "target_unique_name"

Entity = Hashable
Position = tuple[float, float, float]
Color = tuple[float, float, float]


@dataclass(frozen=True)
class VirtualLink:
    """Link from an entity to its target and an optional secondary target."""

    target_entity: Entity
    secondary_target_entity: Entity | None = None


@dataclass(frozen=True)
class LinkArrow:
    """An arrow drawn from a linking entity to one of its targets."""

    start: Position
    end: Position
    color: Color


class VirtualLinkWorld:
    """Tracks custom properties, unique names and the links derived from them."""

    def __init__(self) -> None:
        self._custom_props: dict[Entity, dict[str, Any]] = {}
        self._unique_names: dict[Entity, str] = {}
        self._registry: dict[str, Entity] = {}
        self._links: dict[Entity, VirtualLink] = {}
        self._changed_props: dict[Entity, None] = {}

    def set_custom_props(self, entity: Entity, props: Mapping[str, Any]) -> None:
        """Set an entity's custom properties; they take effect on ``update``."""
        self._custom_props[entity] = dict(props)
        self._changed_props[entity] = None

    def refresh_link(self, entity: Entity) -> None:
        """Rebuild the link of ``entity`` from its custom properties."""
        self._links.pop(entity, None)
        props = self._custom_props.get(entity)
        if props is None:
            return

        secondary = None
        if SOURCE_NAME_KEY in props:
            secondary = self._find_named(str(props[SOURCE_NAME_KEY]))

        if TARGET_NAME_KEY in props:
            target = self._find_named(str(props[TARGET_NAME_KEY]))
            if target is not None:
                self._links[entity] = VirtualLink(target, secondary)

    def update(self) -> None:
        """Process changed properties: record unique names and refresh links."""
        changed = list(self._changed_props)
        self._changed_props.clear()

        names_changed = False
        for entity in changed:
            props = self._custom_props[entity]
            if UNIQUE_NAME_KEY in props:
                name = str(props[UNIQUE_NAME_KEY])
                self._registry[name] = entity
                self._unique_names[entity] = name
                names_changed = True

        for entity in changed:
            self.refresh_link(entity)

        if names_changed:
            for entity in list(self._custom_props):
                self.refresh_link(entity)

    def link_for(self, entity: Entity) -> VirtualLink | None:
        """The link of ``entity``, or None if it has none."""
        return self._links.get(entity)

    def unique_name_of(self, entity: Entity) -> str | None:
        """The unique name recorded for ``entity``, or None."""
        return self._unique_names.get(entity)

    def entity_named(self, name: str) -> Entity | None:
        """The entity last registered under ``name``, or None."""
        return self._registry.get(name)

    def link_arrows(self, positions: Mapping[Entity, Position]) -> list[LinkArrow]:
        """Arrows for every link whose endpoints have a known position.

        Primary targets are drawn in yellow, secondary targets in blue.
        """
        arrows: list[LinkArrow] = []
        for source, link in self._links.items():
            start = positions.get(source)
            end = positions.get(link.target_entity)
            if start is None or end is None:
                continue
            arrows.append(LinkArrow(tuple(start), tuple(end), YELLOW))
            if link.secondary_target_entity is not None:
                secondary = positions.get(link.secondary_target_entity)
                if secondary is not None:
                    arrows.append(LinkArrow(tuple(start), tuple(secondary), BLUE))
        return arrows

    def _find_named(self, name: str) -> Entity | None:
        return next(
            (entity for entity, unique in self._unique_names.items() if unique == name),
            None,
        )