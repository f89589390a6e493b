"""Public route paths for catalog entities."""


def prompt_path(prompt_id: str, slug: str | None = None) -> str:
    """Path of a prompt's detail page."""
    if slug:
        return f"/prompts/{prompt_id}_{slug}"
    return f"/prompts/{prompt_id}"


def user_path(username: str) -> str:
    """Path of a user's public profile."""
    return f"/@{username}"


def category_path(slug: str) -> str:
    return f"/categories/{slug}"


def tag_path(slug: str) -> str:
    return f"/tags/{slug}"
