"""Localized page titles and descriptions."""

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "prompts.title": "Prompts",
        "prompts.metadata.title": "Browse Prompts | {site_name}",
        "prompts.metadata.description": "Search and discover community prompts on {site_name}.",
        "discovery.metadata.title": "Discover | {site_name}",
        "discovery.metadata.description": "Featured and trending prompts on {site_name}.",
    },
    "es": {
        "prompts.title": "Prompts",
        "prompts.metadata.title": "Explorar prompts | {site_name}",
        "prompts.metadata.description": "Busca y descubre prompts de la comunidad en {site_name}.",
        "discovery.metadata.title": "Descubrir | {site_name}",
        "discovery.metadata.description": "Prompts destacados y populares en {site_name}.",
    },
}

FALLBACK_LOCALE = "en"


def translate(locale: str, key: str, **values: str) -> str:
    """Look up *key* for *locale*, falling back to English, then the key."""
    template = MESSAGES.get(locale, {}).get(key) or MESSAGES[FALLBACK_LOCALE].get(key, key)
    return template.format(**values)
