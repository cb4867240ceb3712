"""LangGraph graph builder: assembles the lesson plan pipeline."""

from langgraph.graph import StateGraph, START, END

from lesson_planner.agents.lesson_plan_agent import (
    finalize_node,
    make_generate_node,
    prompt_node,
)
from lesson_planner.llm.base import PlanGenerator
from lesson_planner.models.state import LessonGraphState


def build_graph(generator: PlanGenerator):
    """Construct and compile the generation pipeline.

    Graph topology::

        START → prompt → generate → finalize → END

    Parameters
    ----------
    generator : PlanGenerator
        Backend used by the ``generate`` node.

    Returns
    -------
    langgraph.graph.CompiledGraph
        The compiled, ready-to-invoke graph.
    """
    graph = StateGraph(LessonGraphState)

    graph.add_node("prompt", prompt_node)
    graph.add_node("generate", make_generate_node(generator))
    graph.add_node("finalize", finalize_node)

    graph.add_edge(START, "prompt")
    graph.add_edge("prompt", "generate")
    graph.add_edge("generate", "finalize")
    graph.add_edge("finalize", END)

    return graph.compile()
