"""Project model for matrix identification keys."""

from nozes.model.demo import demo_project
from nozes.model.project import (
    Entity,
    ExternalLink,
    Feature,
    FeatureState,
    Project,
    SubKeyReference,
)
from nozes.model.validation import IssueKind, ValidationIssue, validate_project

__all__ = [
    # Model
    "Project",
    "Feature",
    "FeatureState",
    "Entity",
    "ExternalLink",
    "SubKeyReference",
    # Validation
    "IssueKind",
    "ValidationIssue",
    "validate_project",
    # Demo
    "demo_project",
]
