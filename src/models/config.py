"""Model with service configuration."""

from typing import Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    FilePath,
    PositiveFloat,
    PositiveInt,
    SecretStr,
    constr,
    model_validator,
)
from typing_extensions import Literal, Self

import constants


class ConfigurationBase(BaseModel):
    """Base class for all configuration models that rejects unknown fields."""

    model_config = ConfigDict(extra="forbid")


class TLSConfiguration(ConfigurationBase):
    """TLS configuration."""

    tls_certificate_path: Optional[FilePath] = None
    tls_key_path: Optional[FilePath] = None
    tls_key_password: Optional[FilePath] = None


class CORSConfiguration(ConfigurationBase):
    """CORS configuration."""

    allow_origins: list[str] = [
        "*"
    ]  # not AnyHttpUrl: we need to support "*" that is not valid URL
    allow_credentials: bool = False
    allow_methods: list[str] = Field(
        default_factory=lambda: list(constants.DEFAULT_CORS_ALLOW_METHODS)
    )
    allow_headers: list[str] = Field(
        default_factory=lambda: list(constants.DEFAULT_CORS_ALLOW_HEADERS)
    )

    @model_validator(mode="after")
    def check_cors_configuration(self) -> Self:
        """Check CORS configuration."""
        # browsers reject credentials combined with wildcard origin
        # see https://fastapi.tiangolo.com/tutorial/cors/
        if self.allow_credentials and "*" in self.allow_origins:
            raise ValueError(
                "Invalid CORS configuration: allow_credentials can not be set to true when "
                "allow origins contains '*' wildcard."
                "Use explicit origins or disable credential."
            )
        return self


class ServiceConfiguration(ConfigurationBase):
    """Service configuration."""

    host: str = "localhost"
    port: PositiveInt = 8080
    workers: PositiveInt = 1
    color_log: bool = True
    access_log: bool = True
    tls_config: TLSConfiguration = Field(default_factory=TLSConfiguration)
    cors: CORSConfiguration = Field(default_factory=CORSConfiguration)

    @model_validator(mode="after")
    def check_service_configuration(self) -> Self:
        """Check service configuration."""
        if self.port > 65535:
            raise ValueError("Port value should be less than 65536")
        return self


class GeminiConfiguration(ConfigurationBase):
    """Generative language model configuration.

    The API key is optional in the configuration file. When it is not set,
    the GEMINI_API_KEY environment variable is consulted on every request.
    """

    url: AnyHttpUrl = Field(
        default=constants.DEFAULT_GEMINI_URL, validate_default=True
    )
    api_key: Optional[SecretStr] = None
    primary_model: constr(min_length=1) = (  # type:ignore
        constants.DEFAULT_PRIMARY_MODEL
    )
    secondary_model: constr(min_length=1) = (  # type:ignore
        constants.DEFAULT_SECONDARY_MODEL
    )
    timeout: PositiveFloat = constants.DEFAULT_MODEL_TIMEOUT

    @property
    def base_url(self) -> str:
        """Return the API base URL without trailing slash."""
        return str(self.url).rstrip("/")


class InsightsCacheConfiguration(ConfigurationBase):
    """Travel insights cache configuration."""

    type: Literal["memory", "noop"] = constants.CACHE_TYPE_MEMORY


class Configuration(ConfigurationBase):
    """Global service configuration."""

    name: str
    service: ServiceConfiguration = Field(default_factory=ServiceConfiguration)
    gemini: GeminiConfiguration = Field(default_factory=GeminiConfiguration)
    insights_cache: InsightsCacheConfiguration = Field(
        default_factory=InsightsCacheConfiguration
    )

    def dump(self, filename: str = "configuration.json") -> None:
        """Dump actual configuration into JSON file."""
        with open(filename, "w", encoding="utf-8") as fout:
            fout.write(self.model_dump_json(indent=4))
