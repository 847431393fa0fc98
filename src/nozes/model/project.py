"""Project model for matrix identification keys.

A project is a set of features (each with discrete states) and a set of
entities tagged with the states they exhibit per feature. The model is
read-only from the engine's point of view; authoring happens elsewhere.

Dictionaries produced by ``to_dict`` use the camelCase field names of the
structured project format, and optional fields are omitted when unset so a
round-trip never fills in defaults.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

Category = Literal["FLORA", "FAUNA", "OTHER"]
CATEGORIES: tuple[str, ...] = ("FLORA", "FAUNA", "OTHER")


def _get_str(data: dict[str, Any], key: str, where: str) -> str:
    """Get a required string value, raising ValueError when missing."""
    if key not in data:
        raise ValueError(f"{where}: missing '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"{where}: '{key}' must be a string")
    return value


def _get_optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    """Get an optional string value (None when absent)."""
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{where}: '{key}' must be a string")
    return value


def _get_list(data: dict[str, Any], key: str, where: str) -> list[Any]:
    """Get a list value, defaulting to empty when absent."""
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ValueError(f"{where}: '{key}' must be a list")
    return value


def _ensure_dict(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected an object")
    return data


@dataclass(frozen=True)
class FeatureState:
    """One discrete value a feature can take."""

    id: str
    label: str
    image_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        d: dict[str, Any] = {"id": self.id, "label": self.label}
        if self.image_url is not None:
            d["imageUrl"] = self.image_url
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FeatureState:
        """Create from dictionary."""
        data = _ensure_dict(data, "state")
        return cls(
            id=_get_str(data, "id", "state"),
            label=_get_str(data, "label", "state"),
            image_url=_get_optional_str(data, "imageUrl", "state"),
        )


@dataclass(frozen=True)
class Feature:
    """An observable attribute with discrete states."""

    id: str
    name: str
    states: list[FeatureState] = field(default_factory=list)
    image_url: str | None = None

    def get_state(self, state_id: str) -> FeatureState | None:
        """Get a state by id."""
        for state in self.states:
            if state.id == state_id:
                return state
        return None

    def state_labels(self, state_ids: list[str], placeholder: str | None = None) -> list[str]:
        """Resolve state ids to labels.

        Args:
            state_ids: State ids in the order they should be listed.
            placeholder: Label used for ids with no matching state. When
                None, unknown ids are dropped.

        Returns:
            List of labels.
        """
        labels = []
        for state_id in state_ids:
            state = self.get_state(state_id)
            if state is not None:
                labels.append(state.label)
            elif placeholder is not None:
                labels.append(placeholder)
        return labels

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        d: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.image_url is not None:
            d["imageUrl"] = self.image_url
        d["states"] = [s.to_dict() for s in self.states]
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Feature:
        """Create from dictionary."""
        data = _ensure_dict(data, "feature")
        return cls(
            id=_get_str(data, "id", "feature"),
            name=_get_str(data, "name", "feature"),
            states=[FeatureState.from_dict(s) for s in _get_list(data, "states", "feature")],
            image_url=_get_optional_str(data, "imageUrl", "feature"),
        )


@dataclass(frozen=True)
class ExternalLink:
    """Free-form citation attached to an entity."""

    id: str
    label: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"id": self.id, "label": self.label, "url": self.url}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExternalLink:
        """Create from dictionary."""
        data = _ensure_dict(data, "link")
        return cls(
            id=_get_str(data, "id", "link"),
            label=_get_str(data, "label", "link"),
            url=_get_str(data, "url", "link"),
        )


@dataclass(frozen=True)
class Entity:
    """A candidate item being identified."""

    id: str
    name: str
    description: str = ""
    image_url: str | None = None
    links: list[ExternalLink] = field(default_factory=list)
    traits: dict[str, list[str]] = field(default_factory=dict)
    """Map of feature id -> state ids the entity exhibits for it."""

    scientific_name: str | None = None
    family: str | None = None

    def states_for(self, feature_id: str) -> list[str]:
        """State ids recorded for a feature (empty when unknown)."""
        return self.traits.get(feature_id, [])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        d: dict[str, Any] = {"id": self.id, "name": self.name}
        if self.scientific_name is not None:
            d["scientificName"] = self.scientific_name
        if self.family is not None:
            d["family"] = self.family
        d["description"] = self.description
        if self.image_url is not None:
            d["imageUrl"] = self.image_url
        d["links"] = [link.to_dict() for link in self.links]
        d["traits"] = {k: list(v) for k, v in self.traits.items()}
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entity:
        """Create from dictionary."""
        data = _ensure_dict(data, "entity")
        raw_traits = _ensure_dict(data.get("traits", {}), "entity traits")
        traits: dict[str, list[str]] = {}
        for feature_id, state_ids in raw_traits.items():
            if not isinstance(state_ids, list) or not all(
                isinstance(s, str) for s in state_ids
            ):
                raise ValueError(f"entity traits: '{feature_id}' must be a list of state ids")
            traits[feature_id] = list(state_ids)

        return cls(
            id=_get_str(data, "id", "entity"),
            name=_get_str(data, "name", "entity"),
            description=_get_optional_str(data, "description", "entity") or "",
            image_url=_get_optional_str(data, "imageUrl", "entity"),
            links=[ExternalLink.from_dict(link) for link in _get_list(data, "links", "entity")],
            traits=traits,
            scientific_name=_get_optional_str(data, "scientificName", "entity"),
            family=_get_optional_str(data, "family", "entity"),
        )


@dataclass(frozen=True)
class SubKeyReference:
    """Reference from a hub key to a linked sub-key."""

    id: str
    name: str
    description: str = ""
    project_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
        if self.project_id is not None:
            d["projectId"] = self.project_id
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SubKeyReference:
        """Create from dictionary."""
        data = _ensure_dict(data, "subKey")
        return cls(
            id=_get_str(data, "id", "subKey"),
            name=_get_str(data, "name", "subKey"),
            description=_get_optional_str(data, "description", "subKey") or "",
            project_id=_get_optional_str(data, "projectId", "subKey"),
        )


@dataclass(frozen=True)
class Project:
    """Root aggregate of an identification key.

    Owns its features and entities by value.
    """

    id: str
    name: str
    description: str = ""
    features: list[Feature] = field(default_factory=list)
    entities: list[Entity] = field(default_factory=list)

    category: Category | None = None
    sub_keys: list[SubKeyReference] | None = None
    parent_key_id: str | None = None
    is_sub_key: bool | None = None

    @property
    def state_count(self) -> int:
        """Total number of states across all features."""
        return sum(len(f.states) for f in self.features)

    def get_feature(self, feature_id: str) -> Feature | None:
        """Get a feature by id."""
        for feature in self.features:
            if feature.id == feature_id:
                return feature
        return None

    def get_entity(self, entity_id: str) -> Entity | None:
        """Get an entity by id."""
        for entity in self.entities:
            if entity.id == entity_id:
                return entity
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary in the structured project format."""
        d: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
        }
        if self.category is not None:
            d["category"] = self.category
        d["features"] = [f.to_dict() for f in self.features]
        d["entities"] = [e.to_dict() for e in self.entities]
        if self.sub_keys is not None:
            d["subKeys"] = [s.to_dict() for s in self.sub_keys]
        if self.parent_key_id is not None:
            d["parentKeyId"] = self.parent_key_id
        if self.is_sub_key is not None:
            d["isSubKey"] = self.is_sub_key
        return d

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Project:
        """Create from dictionary.

        Raises:
            ValueError: If a field has the wrong shape.
        """
        data = _ensure_dict(data, "project")

        category = data.get("category")
        if category is not None and category not in CATEGORIES:
            raise ValueError(f"project: unknown category '{category}'")

        sub_keys = None
        if data.get("subKeys") is not None:
            sub_keys = [SubKeyReference.from_dict(s) for s in _get_list(data, "subKeys", "project")]

        is_sub_key = data.get("isSubKey")
        if is_sub_key is not None and not isinstance(is_sub_key, bool):
            raise ValueError("project: 'isSubKey' must be a boolean")

        # Imported files may come from tools that never assigned an id
        project_id = _get_optional_str(data, "id", "project") or ""

        return cls(
            id=project_id,
            name=_get_str(data, "name", "project"),
            description=_get_optional_str(data, "description", "project") or "",
            features=[Feature.from_dict(f) for f in _get_list(data, "features", "project")],
            entities=[Entity.from_dict(e) for e in _get_list(data, "entities", "project")],
            category=category,
            sub_keys=sub_keys,
            parent_key_id=_get_optional_str(data, "parentKeyId", "project"),
            is_sub_key=is_sub_key,
        )
