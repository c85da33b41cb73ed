from __future__ import annotations

from typing import Callable, Dict, List

import pytest

from graph_test_helpers import graph_from
from smartcat.domain.graph_models import DependencyGraph


@pytest.fixture
def make_graph() -> Callable[[Dict[str, List[str]]], DependencyGraph]:
    return graph_from
