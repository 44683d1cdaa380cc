import logging

from .errors import MalformedRecord, MissingTranslation, UndecodableFile
from .message_table import MessageTable

logger = logging.getLogger(__name__)

COMMENT = "#"
SEPARATOR = "="


def parse_resource_line(line: str, path, line_number: int):
    """Parse one key=value line; returns None for blank and comment lines"""
    line = line.strip()
    if not line or line.startswith(COMMENT):
        return None
    parts = line.split(SEPARATOR)
    if len(parts) != 2:
        raise MalformedRecord(path, line_number, len(parts))
    k, v = parts
    return k.strip(), v.strip()


def read_resource(path, table: MessageTable) -> int:
    """Append every record of a resource file to the table, returns the record count"""
    count = 0
    try:
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                record = parse_resource_line(line, path, line_number)
                if record is None:
                    continue
                table.append(*record)
                count += 1
    except UnicodeDecodeError as e:
        raise UndecodableFile(path, e.reason) from e

    logger.debug("read %d records from %s", count, path)
    return count


def check_resources(table: MessageTable, languages: list[str]):
    """Raise MissingTranslation for the first key that lacks a value for some language"""
    short = table.short_rows(len(languages))
    if short:
        key = short[0]
        raise MissingTranslation(key, languages[len(table[key])])


def write_resources(table: MessageTable, languages: list[str], outs):
    """Write one key=value listing per language into the matching stream, then close it"""
    if len(outs) != len(languages):
        raise ValueError(f"expected {len(languages)} output streams, got {len(outs)}")
    check_resources(table, languages)

    for key, values in table.rows():
        if len(values) > len(languages):
            logger.warning("key %s has %d values for %d languages, extra values are dropped",
                           key, len(values), len(languages))

    for idx, out in enumerate(outs):
        lines = [f"{key}{SEPARATOR}{values[idx]}\n" for key, values in table.rows()]
        out.write("".join(lines))
        out.close()
        logger.debug("wrote %d %s messages", len(lines), languages[idx])
