"""Dependency injection container."""

from collections.abc import Iterable
from typing import Type

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quill.util.di import PROVIDERS, get_provider
from quill.util.di.base import ProviderBase


def assemble_container(provider_classes: Iterable[Type[ProviderBase]]) -> AsyncContainer:
    """Instantiate providers and build an async container from them.

    FastapiProvider is always added so ``Request`` can be injected into
    request-scoped factories.
    """
    return make_async_container(
        *(provider_class() for provider_class in provider_classes),
        FastapiProvider(),
    )


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation.
    Settings are loaded from environment variables when first requested.
    """
    return assemble_container(get_provider(base, use_mock=False) for base in PROVIDERS)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app.

    Installing a second container replaces the first one for requests and
    for the lifespan, which reads ``app.state.dishka_container``.
    """
    setup_dishka(container, app)
