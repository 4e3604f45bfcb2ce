"""Loading of the secrets and dataset files into validated records."""

import json
import logging
import os
import tomllib

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import Credentials, DatasetTarget

logger = logging.getLogger("pbi-refresh.loader")


def load_credentials(secrets_file: str) -> Credentials:
    """Load Credentials from a TOML secrets file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid UTF-8 TOML, or a
            field is missing or empty.
    """
    logger.debug(f"Loading credentials from {secrets_file}")
    path = os.path.expanduser(secrets_file)

    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (FileNotFoundError, PermissionError, IsADirectoryError) as e:
        raise ConfigError(
            f"Secrets file not readable: {secrets_file}",
            errors=[str(e)],
            suggestions=[
                f"Create the secrets file at {secrets_file}",
                "Check file permissions",
            ],
            context={"secrets_path": secrets_file},
        ) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(
            f"Invalid TOML in secrets file: {secrets_file}",
            errors=[f"TOML error: {e}"],
            suggestions=["Fix TOML syntax in secrets file"],
            context={"secrets_path": secrets_file},
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Secrets file is not valid UTF-8: {secrets_file}",
            errors=[str(e)],
            suggestions=["Save the secrets file with UTF-8 encoding"],
            context={"secrets_path": secrets_file},
        ) from e

    try:
        return Credentials.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid credentials in secrets file: {secrets_file}",
            errors=describe_validation_error(e),
            suggestions=[
                "Set client_id, username and password (all non-empty)",
                "grant_type, when present, must be 'password'",
            ],
            context={"secrets_path": secrets_file},
        ) from e


def load_dataset_target(dataset_file: str) -> DatasetTarget:
    """Load a DatasetTarget from a JSON dataset file.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid UTF-8 JSON, or
            dataset_id is missing or empty.
    """
    logger.debug(f"Loading dataset target from {dataset_file}")
    path = os.path.expanduser(dataset_file)

    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (FileNotFoundError, PermissionError, IsADirectoryError) as e:
        raise ConfigError(
            f"Dataset file not readable: {dataset_file}",
            errors=[str(e)],
            suggestions=[
                f"Create the dataset file at {dataset_file}",
                "Check file permissions",
            ],
            context={"dataset_path": dataset_file},
        ) from e
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in dataset file: {dataset_file}",
            errors=[f"JSON error: {e.msg}"],
            suggestions=["Fix JSON syntax in dataset file"],
            context={"dataset_path": dataset_file},
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigError(
            f"Dataset file is not valid UTF-8: {dataset_file}",
            errors=[str(e)],
            suggestions=["Save the dataset file with UTF-8 encoding"],
            context={"dataset_path": dataset_file},
        ) from e

    try:
        return DatasetTarget.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(
            f"Invalid dataset target in dataset file: {dataset_file}",
            errors=describe_validation_error(e),
            suggestions=['Use {"dataset_id": "...", "group_id": "..."}'],
            context={"dataset_path": dataset_file},
        ) from e


def describe_validation_error(error: ValidationError) -> list[str]:
    # str(error) would echo input values, which may include the password
    return [
        f"{'.'.join(str(p) for p in err['loc']) or '<root>'}: {err['msg']}"
        for err in error.errors()
    ]
