"""
Provisioning of bundled default resources into a data folder.
"""

import logging
import shutil
from importlib.resources import files
from pathlib import Path

from commandtree.exceptions import ResourceProvisioningError

logger = logging.getLogger(__name__)

RESOURCE_PACKAGE = "commandtree"
RESOURCE_DIRECTORY = "resources"


def copy_resource_if_absent(resource: str, destination: str | Path) -> Path:
    """
    Copy a bundled resource to ``destination`` unless a file already exists there.

    An existing file is never overwritten, so user edits survive restarts.

    Params:
        resource: File name inside the bundled resources directory
        destination: Target file path; parent directories are created

    Returns:
        The destination path

    Raises:
        ResourceProvisioningError: When the resource is missing or cannot be written
    """
    target = Path(destination)
    if target.is_file():
        return target

    source = files(RESOURCE_PACKAGE) / RESOURCE_DIRECTORY / resource
    if not source.is_file():
        raise ResourceProvisioningError(resource, target, "bundled resource does not exist")

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with source.open("rb") as src, target.open("wb") as dst:
            shutil.copyfileobj(src, dst)
    except OSError as e:
        raise ResourceProvisioningError(resource, target, str(e)) from e

    logger.info("Created default %s at %s", resource, target)
    return target
