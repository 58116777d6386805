import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings

from shapecodec.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['shapecodec.yaml', 'shapecodec.yml']

LogLevel = Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


class ServiceConfig(BaseModel):
    """Represents a single service definition to be resolved."""

    source: str = Field(..., description='Path or URL to the service definition.')

    output: str = Field(..., description='Output directory for the manifest.')

    manifest_file: str = Field(
        'shapes.json', description='File name for the resolved descriptor manifest.'
    )


class ShapecodecConfig(BaseSettings):
    services: list[ServiceConfig] = Field(
        ..., description='List of service definitions to process.'
    )

    log_level: LogLevel = Field('WARNING', description='Logging level for the CLI.')


def load_yaml(path: str | Path) -> dict:
    import yaml

    try:
        return yaml.safe_load(Path(path).read_text())
    except yaml.YAMLError as e:
        raise ConfigurationError(f'Invalid YAML: {e}', config_path=str(path))


def _validate(data: Any, config_path: str | Path) -> ShapecodecConfig:
    if not isinstance(data, dict):
        raise ConfigurationError(
            'Configuration must be a mapping', config_path=str(config_path)
        )

    try:
        return ShapecodecConfig.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        field = '.'.join(str(part) for part in err['loc'])
        raise ConfigurationError(
            err['msg'], config_path=str(config_path), field=field or None
        )


def get_config(path: str | None = None) -> ShapecodecConfig:
    """Load configuration from a file, the working directory or pyproject.toml.

    Raises:
        ConfigurationError: If no configuration is found, or the one found
            cannot be parsed or validated.
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', config_path=path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        path = Path(cwd) / filename
        if path.exists():
            return _validate(load_yaml(path), path)

    path = Path(os.getcwd()) / 'pyproject.toml'

    if path.exists():
        import tomllib

        try:
            pyproject = tomllib.loads(path.read_text())
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f'Invalid TOML: {e}', config_path=str(path))
        tools = pyproject.get('tool', {})

        if 'shapecodec' in tools:
            return _validate(tools['shapecodec'], path)

    raise ConfigurationError('Configuration not found', config_path=cwd)
