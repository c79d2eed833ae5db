"""Generator settings."""

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_METHODS = ("get", "post", "delete", "head", "patch", "put", "options")


class SwaggerSettings(BaseModel):
    """Fixed values and defaults used while assembling a document."""

    model_config = ConfigDict(frozen=True)

    route_prefix: str = "/api/"
    title: str | None = None  # defaults to the handler inventory's namespace
    version: str = "1.0.0"
    base_path: str = "/"
    default_methods: tuple[str, ...] = DEFAULT_METHODS
    summary_max_length: int = 80
    api_key_name: str = "code"
    swagger_function_name: str = "Swagger"

    @field_validator("route_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = "/" + value.strip("/")
        return value if value == "/" else value + "/"

    @field_validator("default_methods")
    @classmethod
    def _lower_methods(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(m.lower() for m in value)
