import logging

from langgraph.graph import END
from langgraph.types import Command

from i18n_formats.collector import collect_resources
from i18n_formats.message_table import MessageTable
from i18n_formats.properties import read_resource
from i18n_formats.table import write_table
from .base import TABLE_FILENAME, ConversionState

logger = logging.getLogger(__name__)


def to_table_node(state: ConversionState):
    languages, files = collect_resources(state["input_path"])

    table = MessageTable()
    for path in files:
        read_resource(path, table)

    out_path = state["output_dir"] / TABLE_FILENAME
    with open(out_path, "w", encoding="utf-8", newline="") as f:
        write_table(table, languages, f)
    logger.debug("table with %d keys saved as %s", len(table), out_path)

    return Command(
        update={"languages": languages, "written": [str(out_path)]},
        goto=END,
    )
