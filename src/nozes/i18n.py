"""Display languages and label tables.

Language only changes the text shown to people. It never reaches the
matching engine.
"""

from __future__ import annotations

from enum import Enum

from nozes.exceptions import ConfigError


class Language(str, Enum):
    """Supported display languages."""

    EN = "en"
    PT = "pt"


STRINGS: dict[Language, dict[str, str]] = {
    Language.EN: {
        "player": "PLAYER",
        "restart": "Restart",
        "features": "Features",
        "selected": "selected",
        "matches": "Matches",
        "discarded": "Discarded",
        "identified": "1 Entity identified",
        "potential": "potential matches",
        "excluded": "Excluded by selection",
        "no_matches": "No matches found.",
        "try_unselecting": "Try unselecting some features.",
        "species_details": "Species Details",
        "morphology": "Morphology & Traits",
        "close": "Close",
        "resources": "Resources",
        "no_traits": "No traits recorded.",
        "view_details": "View details",
        "entity": "Entity",
        "no_description": "No description",
        "generated_by": "Generated by Nozes",
    },
    Language.PT: {
        "player": "PLAYER",
        "restart": "Reiniciar",
        "features": "Características",
        "selected": "selecionado(s)",
        "matches": "Compatíveis",
        "discarded": "Descartados",
        "identified": "1 Entidade identificada",
        "potential": "matches potenciais",
        "excluded": "Excluído pela seleção",
        "no_matches": "Nenhum resultado.",
        "try_unselecting": "Tente remover seleções.",
        "species_details": "Detalhes da Espécie",
        "morphology": "Morfologia & Características",
        "close": "Fechar",
        "resources": "Recursos Adicionais",
        "no_traits": "Nenhuma característica registrada.",
        "view_details": "Ver Detalhes",
        "entity": "Entidade",
        "no_description": "Sem descrição",
        "generated_by": "Gerado por Nozes",
    },
}


def get_language(value: Language | str) -> Language:
    """Coerce a language code into a Language.

    Raises:
        ConfigError: If the code is not a supported language.
    """
    if isinstance(value, Language):
        return value
    try:
        return Language(str(value).lower())
    except ValueError:
        supported = ", ".join(lang.value for lang in Language)
        raise ConfigError(
            f"Unsupported language: {value}",
            hint=f"Supported languages: {supported}",
        )


def get_strings(language: Language | str) -> dict[str, str]:
    """Get the label table for a language."""
    return STRINGS[get_language(language)]
