"""Bundled demo project."""

from nozes.model.project import Entity, Feature, FeatureState, Project


def demo_project() -> Project:
    """Small key of big cats, useful to try the player and exporters."""
    return Project(
        id="demo-1",
        name="Exemplo: Grandes Felinos",
        description="Identifique espécies comuns de grandes felinos.",
        features=[
            Feature(
                id="f1",
                name="Padrão da Pelagem",
                states=[
                    FeatureState(id="s1", label="Listras"),
                    FeatureState(id="s2", label="Manchas"),
                    FeatureState(id="s3", label="Liso"),
                ],
            ),
            Feature(
                id="f2",
                name="Habitat",
                states=[
                    FeatureState(id="s4", label="Selva"),
                    FeatureState(id="s5", label="Savana"),
                ],
            ),
        ],
        entities=[
            Entity(
                id="e1",
                name="Tigre",
                description="O maior dos felinos.",
                image_url="https://picsum.photos/id/237/400/300",
                traits={"f1": ["s1"], "f2": ["s4"]},
            ),
            Entity(
                id="e2",
                name="Leão",
                description="O rei da selva.",
                image_url="https://picsum.photos/id/1003/400/300",
                traits={"f1": ["s3"], "f2": ["s5"]},
            ),
            Entity(
                id="e3",
                name="Leopardo",
                description="Escalador especialista.",
                image_url="https://picsum.photos/id/1074/400/300",
                traits={"f1": ["s2"], "f2": ["s4", "s5"]},
            ),
        ],
    )
