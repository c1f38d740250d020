"""FastAPI application factory for the greeting service."""

import inspect
import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from starlette.datastructures import QueryParams

from .errors import MissingParameter
from .models import ErrorResponse, HealthResponse
from .processor import BaseProcessor, StatelessAction

logger = logging.getLogger(__name__)


@dataclass
class ServiceConfig:
    """
    Configuration for building the application.

    Args:
        name: Override service name (defaults to processor.name)
        version: Override service version (defaults to processor.version)
        description: Short description for generated docs
    """

    name: str | None = None
    version: str | None = None
    description: str | None = None


def parse_query_params(model: type[BaseModel], query_params: QueryParams) -> BaseModel:
    """
    Validate a query string against ``model``.

    A parameter repeated for a ``str`` field is joined with commas
    (``?name=a&name=b`` gives ``"a,b"``); other fields take the last value.

    Raises:
        MissingParameter: A required field is absent from the query string
        ValidationError: A present value does not fit the model
    """

    for field_name, field in model.model_fields.items():
        if field.is_required() and field_name not in query_params:
            raise MissingParameter(field_name)

    data = {}
    for key in query_params.keys():
        values = query_params.getlist(key)
        field = model.model_fields.get(key)
        if field is not None and field.annotation is str:
            data[key] = ",".join(values)
        else:
            data[key] = values[-1]
    return model.model_validate(data)


def create_app(processor: BaseProcessor, config: ServiceConfig | None = None) -> FastAPI:
    """
    Create a FastAPI application serving the processor's route table.

    Args:
        processor: The processor instance implementing business logic
        config: Optional service configuration
    """

    config = config or ServiceConfig()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service_name = config.name or processor.name
    service_version = config.version or processor.version
    service_description = config.description or f"{service_name} API"

    app = FastAPI(
        title=f"{service_name.title()} API",
        description=service_description,
        version=service_version,
    )

    app.state.processor = processor
    app.state.service_config = config

    @app.exception_handler(MissingParameter)
    async def missing_parameter_handler(request: Request, exc: MissingParameter):
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=400,
            content={"error": "Missing parameter", "detail": str(exc)},
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        """Handle Pydantic validation errors (e.g., query parameter validation)."""
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "detail": str(exc)},
        )

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(status="healthy", service=service_name, version=service_version)

    actions = processor.get_stateless_actions()
    if not actions:
        logger.warning(
            "Processor %s registered but get_stateless_actions() returned nothing.",
            processor.name,
        )

    def make_endpoint(action: StatelessAction):
        QueryParamsModel = action.query_params_model

        async def endpoint(request: Request):
            args = []
            if QueryParamsModel:
                args.append(parse_query_params(QueryParamsModel, request.query_params))

            call_result = action.handler(*args)

            if inspect.isawaitable(call_result):
                call_result = await call_result
            if isinstance(call_result, Response):
                return call_result
            if action.media_type and isinstance(call_result, (str, bytes, bytearray, memoryview)):
                content = call_result if isinstance(call_result, str) else bytes(call_result)
                return Response(content=content, media_type=action.media_type)
            return call_result

        return endpoint

    for action in actions:
        logger.info("Registering action '%s' at %s %s", action.name, "/".join(action.methods), action.path)

        responses = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
        if action.media_type:
            responses[200] = {"content": {action.media_type: {"schema": {"type": "string"}}}}

        route_kwargs = {
            "methods": list(action.methods),
            "response_model": action.response_model,
            "summary": action.summary,
            "description": action.description,
            "tags": list(action.tags) if action.tags else None,
            "responses": responses,
        }
        route_kwargs = {k: v for k, v in route_kwargs.items() if v is not None}

        app.api_route(action.path, **route_kwargs)(make_endpoint(action))

    return app
