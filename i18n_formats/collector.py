import logging
import os

from .errors import MalformedFilename, NoInputFiles

logger = logging.getLogger(__name__)

RESOURCE_EXTENSION = ".properties"


def language_from_filename(path) -> str:
    """<prefix>_<language>.properties -> <language>"""
    filename = os.path.basename(path)
    base_name = filename[:-len(RESOURCE_EXTENSION)]
    parts = base_name.split("_") + [RESOURCE_EXTENSION]
    if len(parts) != 3:
        raise MalformedFilename(path, len(parts))
    return parts[1]


def walk_resources(directory):
    # lexical order, so column order does not depend on the filesystem
    for root, dirs, files in os.walk(directory, onerror=_raise):
        dirs.sort()
        for filename in sorted(files):
            if filename.endswith(RESOURCE_EXTENSION):
                yield os.path.join(root, filename)


def _raise(error: OSError):
    raise error


def collect_resources(directory) -> tuple[list[str], list[str]]:
    """Languages and resource file paths under a directory, positionally aligned"""
    languages = []
    files = []
    for path in walk_resources(directory):
        languages.append(language_from_filename(path))
        files.append(path)

    if not files:
        raise NoInputFiles(directory)

    logger.debug("found %d resource files in %s: %s", len(files), directory, ", ".join(languages))
    return languages, files
