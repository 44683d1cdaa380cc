import logging
import os

from langgraph.graph import START, StateGraph
from langgraph.types import Command

from .base import TO_RESOURCES, TO_TABLE, ConversionConfig, ConversionState, Direction
from .resources import to_resources_node
from .table import to_table_node

logger = logging.getLogger(__name__)


def decision_node(state: ConversionState) -> Command[Direction]:
    """Route a directory to the table writer and a single file to the resource writer"""
    # stat first so a missing input surfaces as the filesystem error
    os.stat(state["input_path"])
    step = TO_TABLE if os.path.isdir(state["input_path"]) else TO_RESOURCES
    logger.debug("%s conversion was chosen for %s", step, state["input_path"])
    return Command(
        update={"direction": step},
        goto=step,
    )


workflow = StateGraph(ConversionState)
workflow.add_node("decision", decision_node)
workflow.add_node(TO_TABLE, to_table_node)
workflow.add_node(TO_RESOURCES, to_resources_node)

workflow.add_edge(START, "decision")
graph = workflow.compile()


def run_conversion(config: ConversionConfig) -> ConversionState:
    state = ConversionState(input_path=config.input_path, output_dir=config.output_dir)
    events = graph.stream(state,
        {"recursion_limit": config.recursion_limit},
        stream_mode="values"
    )
    final_state = None
    for s in events:
        logger.debug("step: %s", s)
        final_state = s

    assert final_state is not None, "Final state was None."

    return final_state
