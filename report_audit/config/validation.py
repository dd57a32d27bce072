"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams, ParserParams, SafetyParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _unknown_keys(section: str, params: dict[str, Any], known: type) -> list[ValidationError]:
        allowed = {f.name for f in fields(known)}
        return [
            ValidationError(field=f"{section}.{key}", message="Unknown parameter", value=value)
            for key, value in params.items()
            if key not in allowed
        ]

    @staticmethod
    def validate_safety_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate safety rule parameters."""
        errors = ConfigValidator._unknown_keys("safety", params, SafetyParams)

        min_step = params.get("min_step", SafetyParams.min_step)
        max_step = params.get("max_step", SafetyParams.max_step)

        if "min_step" in params and (not _is_int(min_step) or min_step < 0):
            errors.append(ValidationError(
                field="safety.min_step",
                message="Must be a non-negative integer",
                value=min_step
            ))

        if "max_step" in params and (not _is_int(max_step) or max_step < 0):
            errors.append(ValidationError(
                field="safety.max_step",
                message="Must be a non-negative integer",
                value=max_step
            ))
        elif _is_int(min_step) and _is_int(max_step) and max_step < min_step:
            errors.append(ValidationError(
                field="safety.max_step",
                message="Must be greater than or equal to min_step",
                value=max_step
            ))

        if "max_workers" in params:
            value = params["max_workers"]
            if not _is_int(value) or value < 1:
                errors.append(ValidationError(
                    field="safety.max_workers",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_parser_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate parser parameters."""
        errors = ConfigValidator._unknown_keys("parser", params, ParserParams)

        if "skip_blank_lines" in params:
            value = params["skip_blank_lines"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="parser.skip_blank_lines",
                    message="Must be a boolean",
                    value=value
                ))

        if "max_value" in params:
            value = params["max_value"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="parser.max_value",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = ConfigValidator._unknown_keys("logging", params, LoggingParams)

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []
        validators = {
            "safety": ConfigValidator.validate_safety_params,
            "parser": ConfigValidator.validate_parser_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section, params in config.items():
            if section not in validators:
                errors.append(ValidationError(field=section, message="Unknown section", value=params))
            elif not isinstance(params, dict):
                errors.append(ValidationError(field=section, message="Must be a mapping", value=params))
            else:
                errors.extend(validators[section](params))

        return errors
