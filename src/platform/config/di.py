"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html

Providers are looked up by the class they provide, so a binding can be
addressed by interface (``IUserRepo``) rather than by attribute name.
"""

from inspect import isclass
import re
from typing import Any, TypeVar

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.user.app.command.create_user_use_case import CreateUserUseCase
from src.service.user.app.query.get_user_use_case import GetUserUseCase
from src.service.user.app.query.list_users_use_case import ListUsersUseCase
from src.service.user.driven_adapter.repo.in_memory_user_repo_impl import InMemoryUserRepoImpl


_T = TypeVar('_T')


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories (in-memory store lives as long as the container)
    user_repo = providers.Singleton(InMemoryUserRepoImpl)

    # Use cases
    get_user_use_case = providers.Factory(GetUserUseCase, user_repo=user_repo)
    list_users_use_case = providers.Factory(ListUsersUseCase, user_repo=user_repo)
    create_user_use_case = providers.Factory(CreateUserUseCase, user_repo=user_repo)


def binding_name(cls: type) -> str:
    """``IUserRepo`` -> ``i_user_repo``"""
    return re.sub(r'(?<!^)(?=[A-Z][a-z])|(?<=[a-z0-9])(?=[A-Z])', '_', cls.__name__).lower()


def find_providers(
    container: containers.Container, cls: type
) -> list[tuple[str, providers.Provider[Any]]]:
    found = []
    for name, provider in container.providers.items():
        provides = getattr(provider, 'provides', None)
        if isclass(provides) and issubclass(provides, cls):
            found.append((name, provider))

    # Placeholders registered by bind() for classes the container never declared
    name = binding_name(cls)
    placeholder = container.providers.get(name)
    if isinstance(placeholder, providers.Dependency) and all(n != name for n, _ in found):
        found.append((name, placeholder))
    return found


def bind(container: containers.Container, cls: type, instance: Any) -> None:
    """Make every provider of ``cls`` return ``instance`` until ``reset_override()``."""
    matches = find_providers(container, cls)
    if not matches:
        placeholder = providers.Dependency(instance_of=cls)
        container.set_provider(binding_name(cls), placeholder)
        matches = [(binding_name(cls), placeholder)]
    for _, provider in matches:
        provider.override(providers.Object(instance))


def resolve(container: containers.Container, cls: type[_T]) -> _T:
    for _, provider in find_providers(container, cls):
        if isinstance(provider, providers.Dependency) and not provider.overridden:
            continue
        return provider()
    raise LookupError(f'No provider bound for {cls.__module__}.{cls.__qualname__}')
