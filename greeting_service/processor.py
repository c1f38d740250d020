"""Route table primitives: processors and the actions they expose."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, List

from pydantic import BaseModel


@dataclass(frozen=True)
class StatelessAction:
    """
    One (methods, path) to handler binding, built at startup.

    Attributes:
        name: Short identifier used for logging and OpenAPI docs.
        path: FastAPI route path (e.g., "/").
        handler: Callable invoked with the validated query parameters, if any.
        query_params_model: Optional Pydantic model the query string is parsed into.
        response_model: Optional Pydantic model for response serialization.
        methods: HTTP methods to expose (defaults to GET).
        summary: Optional OpenAPI summary.
        description: Optional longer description.
        tags: Optional OpenAPI tags.
        media_type: Optional response media type for str/bytes results.
    """

    name: str
    path: str
    handler: Callable[..., Awaitable[Any] | Any]
    query_params_model: type[BaseModel] | None = None
    response_model: type[BaseModel] | None = None
    methods: tuple[str, ...] = ("GET",)
    summary: str | None = None
    description: str | None = None
    tags: tuple[str, ...] | None = None
    media_type: str | None = None


class BaseProcessor(ABC):
    """Hook point for services built with create_app."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Processor/service name used for logging and metadata."""

    @property
    def version(self) -> str:
        """Optional semantic version string."""
        return "1.0.0"

    def get_stateless_actions(self) -> List[StatelessAction]:
        """
        Return the route table of this processor.

        Override in subclasses to expose endpoints.
        """
        return []
