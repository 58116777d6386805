"""Writing resolved descriptors to disk.

The manifest is the JSON form of a ResolvedTypes run, the hand-off format for
the renderer that turns descriptors into source modules.
"""

import logging
from pathlib import Path

from upath import UPath

from shapecodec.descriptors import ResolvedTypes
from shapecodec.exceptions import OutputError

logger = logging.getLogger(__name__)


class ManifestWriter:
    """Writes resolved descriptors as a JSON manifest.

    Example:
        >>> writer = ManifestWriter()
        >>> writer.write(resolve_shapes(shapes), 'build/shapes.json')
    """

    def __init__(self, indent: int | None = 2):
        self.indent = indent

    def write(self, resolved: ResolvedTypes, path: UPath | Path | str) -> UPath:
        """Write the manifest for ``resolved`` to ``path``.

        Args:
            resolved: The descriptors of one resolution run.
            path: Destination file; parent directories are created.

        Returns:
            The path that was written.

        Raises:
            OutputError: If the file cannot be written.
        """
        path = UPath(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(resolved.to_json(indent=self.indent), encoding='utf-8')
        except OSError as e:
            raise OutputError(str(path), cause=e)

        logger.info(f'Wrote {len(resolved)} descriptors to {path}')
        return path
