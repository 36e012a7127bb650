# genshin_gateway/adapters/api/dependencies.py
from genshin_gateway.core.domain.models import HelpCatalog
from genshin_gateway.core.use_cases.relay_upstream import RelayUpstream
from genshin_gateway.shared.container import container


def get_relay_use_case() -> RelayUpstream:
    """Fresh relay use case per request, wired with the shared upstream client."""
    return container.relay_use_case()


def get_help_catalog() -> HelpCatalog:
    """Process-wide help payload (built on first use, then reused)."""
    return container.help_catalog()
