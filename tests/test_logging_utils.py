import logging

import numpy as np
import pytest

from pairlink.logging_utils import _safe_repr, debug_log_call
from pairlink.types import CandidatePath


def test_debug_log_call_traces_entry_and_exit(caplog):
    logger = logging.getLogger("pairlink.tests.trace")

    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="pairlink.tests.trace"):
        assert add(2, b=3) == 5

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering") and "add" in m and "b=3" in m for m in messages)
    assert any(m.startswith("Exiting") and m.endswith("-> 5") for m in messages)


def test_debug_log_call_reraises(caplog):
    logger = logging.getLogger("pairlink.tests.raise")

    @debug_log_call(logger)
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.DEBUG, logger="pairlink.tests.raise"):
        with pytest.raises(RuntimeError):
            boom()
    assert any("Exception in" in record.getMessage() for record in caplog.records)


def test_safe_repr_summarises_domain_objects(tokens):
    assert _safe_repr(tokens) == "[6 tokens]"

    path = CandidatePath(start_token=tokens[0], color="#fff", points=[(50.0, 50.0), (60.0, 70.0)])
    assert _safe_repr(path) == "CandidatePath(start=0, 2 pts (50.0, 50.0)->(60.0, 70.0))"

    summary = _safe_repr(np.zeros((200, 2)))
    assert "shape=(200, 2)" in summary
    assert "max=0" in summary


def test_placement_functions_are_traced_at_debug(caplog):
    from pairlink.config import PuzzleConfig
    from pairlink.placement import generate_layout

    with caplog.at_level(logging.DEBUG, logger="pairlink.placement"):
        generate_layout(PuzzleConfig(), np.random.default_rng(4), pair_count=3)

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Entering generate_layout") and "Generator(PCG64)" in m for m in messages)
    assert any(m.startswith("Exiting place_tokens -> [6 tokens]") for m in messages)
