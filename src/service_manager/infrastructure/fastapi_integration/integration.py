import functools
import inspect
from typing import Any, Awaitable, Callable, Union

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from service_manager.application import ServiceContainer
from service_manager.domain import IServiceManager, TypeRef

ServiceSource = Union[ServiceContainer, IServiceManager]


def create_fastapi_dependency(services: ServiceSource, type_id: TypeRef) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that resolves a service.

    The resolved instance is the manager's cached singleton, or whatever the
    provider claiming the type returns.

    Args:
        services: The service container (or manager) to resolve from.
        type_id: The service class or identifier to resolve.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> manager = ServiceManager()
        >>> manager.register(UserRepository)
        >>> services = manager.get(ServiceContainer)
        >>>
        >>> get_user_repo = create_fastapi_dependency(services, UserRepository)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the service from the container."""
        return services.get(type_id)

    return dependency


def create_request_dependency(type_id: TypeRef) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that resolves from the container attached to the request.

    Requires the ServiceContainerMiddleware to be installed.

    Args:
        type_id: The service class or identifier to resolve.

    Returns:
        A callable that resolves from ``request.state.services``.

    Example:
        >>> app.add_middleware(ServiceContainerMiddleware, services=services)
        >>>
        >>> get_mailer = create_request_dependency(Mailer)
        >>>
        >>> @app.post("/notify")
        >>> async def notify(mailer: Mailer = Depends(get_mailer)):
        ...     return {"sent": mailer.send()}
    """

    def request_dependency(request: Request) -> Any:
        """Resolve from the request's service container."""
        if not hasattr(request.state, "services"):
            raise RuntimeError(
                "Request does not have a service container. Did you forget to add ServiceContainerMiddleware?"
            )
        services: ServiceContainer = request.state.services
        return services.get(type_id)

    return request_dependency


class ServiceContainerMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes a service container on every request.

    The container is accessible via ``request.state.services``.

    Attributes:
        services: The container attached to each request.
    """

    def __init__(self, app: FastAPI, services: ServiceSource):
        """Initialize the middleware.

        Args:
            app: The FastAPI/Starlette application.
            services: A ServiceContainer, or a manager whose container is used.
        """
        super().__init__(app)
        if not isinstance(services, ServiceContainer):
            services = ServiceContainer(services)
        self.services = services

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint."""
        request.state.services = self.services
        return await call_next(request)


def inject_services(services: ServiceSource, **type_ids: TypeRef) -> Callable:
    """Decorator that injects services into an endpoint's keyword arguments.

    Arguments already supplied by the caller are left untouched.

    Args:
        services: The service container (or manager) to resolve from.
        **type_ids: Parameter name to service class or identifier.

    Returns:
        A decorator function.

    Example:
        >>> @app.get("/users")
        >>> @inject_services(services, user_service=UserService)
        >>> async def list_users(user_service: UserService):
        ...     return await user_service.get_all()
    """

    def decorator(func: Callable) -> Callable:
        """Wrap the function with service injection."""
        parameters = inspect.signature(func).parameters
        unknown = [name for name in type_ids if name not in parameters]
        if unknown:
            raise TypeError(f"{func.__name__}() has no parameters named: {', '.join(unknown)}")

        # Injected parameters are hidden from FastAPI's request parsing
        public_signature = inspect.signature(func).replace(
            parameters=[param for name, param in parameters.items() if name not in type_ids]
        )

        def resolve_missing(kwargs: dict) -> dict:
            for param_name, type_id in type_ids.items():
                if param_name not in kwargs:
                    kwargs[param_name] = services.get(type_id)
            return kwargs

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                """Resolve services and await the original function."""
                return await func(*args, **resolve_missing(kwargs))

            async_wrapper.__signature__ = public_signature
            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            """Resolve services and call the original function."""
            return func(*args, **resolve_missing(kwargs))

        wrapper.__signature__ = public_signature
        return wrapper

    return decorator
