"""Loading utilities for service definitions.

This module provides utilities for loading service definitions (metadata,
operations and shapes) from URLs or local JSON/YAML files.
"""

import json
import logging
from pathlib import Path
from urllib.parse import urlparse

import httpx
import yaml
from pydantic import ValidationError

from shapecodec.exceptions import DefinitionLoadError, DefinitionValidationError
from shapecodec.shapes import ServiceDefinition

logger = logging.getLogger(__name__)


class ServiceLoader:
    """Loads service definitions from URLs or file paths.

    Example:
        >>> loader = ServiceLoader()
        >>> definition = loader.load('https://example.com/sqs-2012-11-05.normal.json')
        >>> # or
        >>> definition = loader.load('/path/to/service.yaml')
        >>> definition.input_shapes
        ['SendMessageRequest', ...]
    """

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        base_path: str | Path | None = None,
    ):
        """Initialize the service loader.

        Args:
            http_client: Optional HTTP client to use for URL requests.
                        If not provided, httpx module functions are used.
            base_path: Base path for resolving relative file paths.
                      Defaults to current working directory.
        """
        self._http_client = http_client
        self._base_path = Path(base_path) if base_path else Path.cwd()

    def load(self, source: str) -> ServiceDefinition:
        """Load and validate a service definition from a URL or file path.

        Args:
            source: URL or file path to the service definition.

        Returns:
            The validated ServiceDefinition.

        Raises:
            DefinitionLoadError: If the definition cannot be read or parsed.
            DefinitionValidationError: If the content is not a service
                definition.
        """
        try:
            if self._is_url(source):
                content = self._load_from_url(source)
            else:
                content = self._load_from_file(source)
        except DefinitionLoadError:
            raise
        except Exception as e:
            raise DefinitionLoadError(source, cause=e)

        if not isinstance(content, dict):
            raise DefinitionValidationError(
                source, errors=['Top level of the document must be a mapping']
            )

        try:
            definition = ServiceDefinition.model_validate(content)
        except ValidationError as e:
            raise DefinitionValidationError(
                source, errors=[err['msg'] for err in e.errors()]
            )

        logger.info(
            f'Loaded {len(definition.shapes)} shapes and '
            f'{len(definition.operations)} operations from {source}'
        )
        return definition

    def _is_url(self, text: str) -> bool:
        """Check if a string is a URL."""
        try:
            result = urlparse(text)
            return result.scheme in ('http', 'https')
        except ValueError:
            return False

    def _load_from_url(self, url: str) -> dict:
        """Load definition content from a URL."""
        try:
            if self._http_client:
                response = self._http_client.get(url)
            else:
                response = httpx.get(url, follow_redirects=True, timeout=30.0)

            response.raise_for_status()
            content_type = response.headers.get('content-type', '')
            content = response.text

            if 'yaml' in content_type or url.endswith(('.yaml', '.yml')):
                return yaml.safe_load(content)
            else:
                return json.loads(content)

        except httpx.HTTPError as e:
            raise DefinitionLoadError(url, cause=e)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DefinitionLoadError(url, cause=e)

    def _load_from_file(self, file_path: str) -> dict:
        """Load definition content from a file."""
        path = Path(file_path)
        if not path.is_absolute():
            path = self._base_path / path

        if not path.exists():
            raise DefinitionLoadError(
                str(file_path), cause=FileNotFoundError(f'File not found: {path}')
            )

        try:
            content = path.read_text(encoding='utf-8')
            if path.suffix.lower() in ('.yaml', '.yml'):
                return yaml.safe_load(content)
            else:
                return json.loads(content)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise DefinitionLoadError(str(file_path), cause=e)
        except OSError as e:
            raise DefinitionLoadError(str(file_path), cause=e)
