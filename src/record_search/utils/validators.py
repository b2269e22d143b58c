"""Input validation utilities."""

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..models.options import SearchOptions, SearchOptionsModel
from ..core.exceptions import ValidationError, ConfigurationError


def build_search_options(base: Optional[SearchOptions] = None, **overrides) -> SearchOptions:
    """
    Build search options from a base and keyword overrides.

    Args:
        base: Options to start from (defaults to SearchOptions())
        **overrides: SearchOptions fields to replace; None keeps the base value
            except for ``limit``, where it means unlimited

    Raises:
        ValidationError: If the resulting options are invalid
    """
    try:
        if base is not None and not isinstance(base, SearchOptions):
            raise ValidationError(f"Invalid options type: {type(base).__name__}")

        unknown = set(overrides) - set(SearchOptions.__dataclass_fields__)
        if unknown:
            raise ValidationError(f"Unknown search options: {', '.join(sorted(unknown))}")

        return (base or SearchOptions()).merged(**overrides)

    except Exception as e:
        if isinstance(e, ValidationError):
            raise
        raise ValidationError(f"Search options validation failed: {str(e)}")


def options_from_config(config: Optional[Mapping[str, Any]]) -> SearchOptions:
    """
    Validate a plain mapping of options and convert it to SearchOptions.

    Raises:
        ConfigurationError: If the mapping does not describe valid options
    """
    if config is None:
        return SearchOptions()
    if not isinstance(config, Mapping):
        raise ConfigurationError(f"Search config must be a mapping, got {type(config).__name__}")

    try:
        return SearchOptionsModel(**config).to_options()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid search config: {str(e)}")
