# genshin_gateway/shared/container.py
from dependency_injector import containers, providers

from genshin_gateway.shared.config import settings
from genshin_gateway.adapters.upstream.httpx_client import HttpxUpstreamClient
from genshin_gateway.core.domain.catalog import build_help_catalog
from genshin_gateway.core.domain.upstream import UpstreamUrlBuilder
from genshin_gateway.core.use_cases.relay_upstream import RelayUpstream

class Container(containers.DeclarativeContainer):
    """
    Dependency Injection Container.

    This declarative container defines the assembly instructions for the application.
    """

    # 1. Gateways (Infrastructure Adapters)

    # Upstream client (Singleton: stateless, opens a client per fetch)
    upstream_client = providers.Singleton(
        HttpxUpstreamClient,
        timeout=settings.UPSTREAM_TIMEOUT,
        user_agent=settings.USER_AGENT,
    )

    # 2. Static Domain Values

    url_builder = providers.Singleton(
        UpstreamUrlBuilder,
        data_base_url=settings.DATA_REPO_URL,
        dist_base_url=settings.DIST_REPO_URL,
    )

    # Help payload is computed once and shared read-only across requests
    help_catalog = providers.Singleton(
        build_help_catalog,
        public_base_url=settings.PUBLIC_BASE_URL,
    )

    # 3. Use Cases (Application Logic)

    # Factory: New instance per request, Singleton dependencies injected.
    relay_use_case = providers.Factory(
        RelayUpstream,
        client=upstream_client,
        url_builder=url_builder,
    )

# Instantiate the container for global access (e.g. by FastAPI)
container = Container()
