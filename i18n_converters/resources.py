import logging
from contextlib import ExitStack

from langgraph.graph import END
from langgraph.types import Command

from i18n_formats.message_table import MessageTable
from i18n_formats.properties import check_resources, write_resources
from i18n_formats.table import read_table
from .base import ConversionState, resource_filename

logger = logging.getLogger(__name__)


def to_resources_node(state: ConversionState):
    table = MessageTable()
    languages = read_table(state["input_path"], table)
    if not languages:
        logger.warning("%s names no languages, nothing to write", state["input_path"])

    # write_resources checks again, but only once its streams are open;
    # checking here keeps a short row from leaving empty output files
    check_resources(table, languages)

    out_paths = [state["output_dir"] / resource_filename(language) for language in languages]
    with ExitStack() as stack:
        outs = [stack.enter_context(open(path, "w", encoding="utf-8", newline="")) for path in out_paths]
        write_resources(table, languages, outs)
    logger.debug("resource files saved: %s", ", ".join(str(p) for p in out_paths))

    return Command(
        update={"languages": languages, "written": [str(p) for p in out_paths]},
        goto=END,
    )
