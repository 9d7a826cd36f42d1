"""Production DI container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from agora.util.di import PROVIDERS


def create_container() -> AsyncContainer:
    """Container wired with the production implementation of every component.

    ``FastapiProvider`` makes the incoming ``Request`` resolvable in the
    request scope.
    """
    providers = [base.implementation()() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())
