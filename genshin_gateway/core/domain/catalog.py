# genshin_gateway/core/domain/catalog.py
from html import escape
from typing import List, Sequence

from genshin_gateway.core.domain.languages import LOCALE_ALIASES, supported_languages
from genshin_gateway.core.domain.models import HelpCatalog

# Known data folders in genshin-db. Listed for help output only;
# request categories are forwarded upstream without being checked here.
FOLDERS: List[str] = [
    "characters",
    "talents",
    "constellations",

    "weapons",

    "foods",
    "materials",
    "crafts",

    "artifacts",
    "domains",
    "enemies",

    "rarity",
    "elements",

    "achievements",
    "achievementgroups",

    "windgliders",
    "outfits",
    "animals",
    "namecards",
    "geographies",
    "adventureranks",

    "emojis",
    "voiceovers",

    "tcgactioncards",
    "tcgcardbacks",
    "tcgcardboxes",
    "tcgcharactercards",
    "tcgdetailedrules",
    "tcgenemycards",
    "tcgkeywords",
    "tcglevelrewards",
    "tcgstatuseffects",
    "tcgsummons",
]

EXAMPLE_PATHS: List[str] = [
    "/artifacts",
    "/japanese/artifacts",
    "/artifacts/index",
    "/artifacts/all",
    "/artifacts/adventurer",
    "/english/artifacts/adventurer",
    "/artifacts/adventurer?lang=japanese",
    "/artifacts/adventurer?branch=v4",
]


def build_help_catalog(public_base_url: str) -> HelpCatalog:
    """
    Assembles the help payload. Examples are rooted at `public_base_url`
    so they point at wherever this gateway is deployed.
    """
    base = public_base_url.rstrip("/")
    return HelpCatalog(
        languages=supported_languages(),
        locales={alias: lang.value for alias, lang in LOCALE_ALIASES.items()},
        folders=list(FOLDERS),
        examples=[f"{base}{path}" for path in EXAMPLE_PATHS],
    )


def _items(values: Sequence[str]) -> str:
    return "\n".join(f"\t\t<li>{escape(value)}</li>" for value in values)


def render_help_html(catalog: HelpCatalog) -> str:
    """Renders the catalog as the HTML listing page served at the root path."""
    locales = [f"{alias} - {key}" for alias, key in catalog.locales.items()]
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
\t<meta charset="UTF-8">
\t<meta name="viewport" content="width=device-width, initial-scale=1.0">
\t<title>404 Not Found</title>
</head>
<body>
\t<h1>404 Not Found</h1>
\t<h2>Available Folders</h2>
\t<ul>
{_items(catalog.folders)}
\t</ul>
\t<h2>Available Languages</h2>
\t<ul>
{_items(catalog.languages)}
\t</ul>
\t<h2>Available Locales</h2>
\t<ul>
{_items(locales)}
\t</ul>

\t<h2>Examples</h2>
\t<ul>
{_items(catalog.examples)}
\t</ul>
</body>
</html>"""
