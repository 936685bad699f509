from typing import Annotated, Any, Callable, ClassVar, Type, TypeVar

from fastapi import Body
from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError

from medscribe.common.custom_exceptions import RequestValidationFailed, format_validation_errors
from medscribe.common.logging_setup import get_logger

logger = get_logger("medscribe.validation")

# present, a string, and not blank
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RequestSchema(BaseModel):
    """Base for request bodies. Fields use camelCase aliases on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    # error string returned to the client when the body does not validate
    error_message: ClassVar[str] = "Missing required fields"

    def backend_args(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


SchemaT = TypeVar("SchemaT", bound=RequestSchema)


def validated_body(schema: Type[SchemaT]) -> Callable:
    """Build a dependency that parses the JSON body into ``schema`` or fails with 400."""

    async def _validate(payload: Any = Body(None)) -> SchemaT:
        if not isinstance(payload, dict):
            logger.warning("request.body_not_object", extra={"schema": schema.__name__})
            raise RequestValidationFailed(schema.error_message)

        try:
            return schema.model_validate(payload)
        except ValidationError as exc:
            details = format_validation_errors(exc.errors())
            logger.warning("request.body_invalid", extra={"schema": schema.__name__, "errors": details})
            raise RequestValidationFailed(schema.error_message, details=details)

    return _validate
