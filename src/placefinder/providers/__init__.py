"""Provider abstractions: place-search backends."""

from placefinder.providers.base import PlaceSearchProvider, ProviderConfig, ProviderError


def create_place_search_provider(config: ProviderConfig) -> PlaceSearchProvider:
    """Factory function to create place-search providers based on configuration.

    Args:
        config: Provider configuration with provider_type

    Returns:
        Initialized place-search provider

    Raises:
        ValueError: If provider_type is unknown
        ProviderError: If provider initialization fails

    Example:
        config = ProviderConfig(provider_type="here", api_key="HERE_API_KEY")
        provider = create_place_search_provider(config)
    """
    provider_type = config.provider_type.lower()

    if provider_type == "here":
        from placefinder.providers.here import HerePlaceSearchProvider

        return HerePlaceSearchProvider(config)

    elif provider_type == "static":
        from placefinder.providers.static import StaticPlaceSearchProvider

        return StaticPlaceSearchProvider(config)

    else:
        raise ValueError(
            f"Unknown place-search provider type: '{provider_type}'. "
            f"Supported types: here, static"
        )


__all__ = [
    "PlaceSearchProvider",
    "ProviderConfig",
    "ProviderError",
    "create_place_search_provider",
]
