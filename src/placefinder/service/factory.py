"""Session initialization service.

Builds a LocationSession with its store and provider from configuration.
"""

from contextlib import AsyncExitStack, asynccontextmanager
from typing import AsyncIterator

from placefinder.config.schema import AppConfig
from placefinder.pipelines.search import SearchPipeline
from placefinder.providers import ProviderConfig, create_place_search_provider
from placefinder.service.session import LocationSession
from placefinder.storage import StorageConfig, create_coordinate_store


@asynccontextmanager
async def open_session(config: AppConfig) -> AsyncIterator[LocationSession]:
    """Create, initialize and eventually close a session's collaborators.

    Args:
        config: Application configuration

    Yields:
        An initialized LocationSession
    """
    async with AsyncExitStack() as stack:
        store = create_coordinate_store(
            StorageConfig(
                store_type=config.coordinate_store.store_type.value,
                connection_string=config.coordinate_store.connection_string,
                extra_params=config.coordinate_store.extra_params,
            )
        )
        # Closed last, even when closing the provider fails
        stack.push_async_callback(store.close)

        provider = create_place_search_provider(
            ProviderConfig(
                provider_type=config.place_search.provider.value,
                api_key=config.place_search.api_key,
                base_url=config.place_search.base_url,
                timeout=config.place_search.timeout,
                extra_params=config.place_search.extra_params,
            )
        )
        stack.push_async_callback(provider.close)

        await store.initialize()
        session = LocationSession(
            store=store,
            pipeline=SearchPipeline(provider, max_results=config.search.max_results),
            default_location=config.initial_location,
        )
        await session.initialize()
        yield session
