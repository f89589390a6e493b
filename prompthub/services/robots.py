"""robots.txt directives."""

from prompthub.services.seo import to_absolute_url

ALLOW = ("/", "/prompts", "/categories", "/tags", "/discover", "/promptmasters")
DISALLOW = ("/api", "/admin", "/settings", "/feed", "/auth", "/prompts/new")


def build_robots_txt(origin: str, user_agent: str = "*") -> str:
    """Render robots.txt pointing crawlers at the absolute sitemap URL."""
    lines = [f"User-agent: {user_agent}"]
    lines.extend(f"Allow: {path}" for path in ALLOW)
    lines.extend(f"Disallow: {path}" for path in DISALLOW)
    lines.append("")
    lines.append(f"Sitemap: {to_absolute_url(origin, '/sitemap.xml')}")
    return "\n".join(lines) + "\n"
