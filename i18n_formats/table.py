import logging

from .errors import MalformedTable, UndecodableFile
from .message_table import MessageTable

logger = logging.getLogger(__name__)

DELIMITER = ","
KEY_COLUMN = "Key"


def parse_header(line: str) -> list[str]:
    """Languages named by a header row, in column order"""
    return line.rstrip("\r\n").split(DELIMITER)[1:]


def parse_table_line(line: str):
    line = line.rstrip("\r\n")
    if not line:
        return None
    key, *values = line.split(DELIMITER)
    return key, values


def read_table(path, table: MessageTable) -> list[str]:
    """Fill the table from a table file and return its languages"""
    # only universal newlines end a row, like read_resource
    try:
        with open(path, encoding="utf-8") as f:
            lines = [line for line in f]
    except UnicodeDecodeError as e:
        raise UndecodableFile(path, e.reason) from e

    if not lines:
        raise MalformedTable(f"{path}: missing header")

    languages = parse_header(lines[0])
    for line in lines[1:]:
        record = parse_table_line(line)
        if record is None:
            continue
        # later rows for the same key win
        table.replace(*record)

    logger.debug("read %d keys in %d languages from %s", len(table), len(languages), path)
    return languages


def render_table(table: MessageTable, languages: list[str]) -> str:
    lines = [f"{KEY_COLUMN}{DELIMITER}{DELIMITER.join(languages)}\n"]
    for key, values in table.rows():
        lines.append(f"{key}{DELIMITER}{DELIMITER.join(values)}\n")
    return "".join(lines)


def write_table(table: MessageTable, languages: list[str], out):
    short = table.short_rows(len(languages))
    for key in short:
        logger.warning("key %s has %d of %d translations", key, len(table[key]), len(languages))

    out.write(render_table(table, languages))
