import pytest
import shutil
import sys
from pathlib import Path
from typing import Dict, Any

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from jgf.config import settings
from jgf.graph.container import JgfContainer
from jgf.graph.graph import JgfGraph


EXAMPLES_DIR = Path(__file__).parent / "examples"


@pytest.fixture
def examples_dir() -> Path:
    """Directory holding the JGF example files."""
    return EXAMPLES_DIR


@pytest.fixture
def test_settings():
    """Restore graph policy settings after a test changes them."""
    original_settings = {
        'cascade_node_removal': settings.cascade_node_removal,
        'legacy_force_directed': settings.legacy_force_directed,
        'pretty_print_spaces': settings.pretty_print_spaces,
    }
    
    yield settings
    
    for key, value in original_settings.items():
        setattr(settings, key, value)


@pytest.fixture
def container() -> JgfContainer:
    """Empty single-graph container."""
    return JgfContainer(single_graph=True)


@pytest.fixture
def graph(container: JgfContainer) -> JgfGraph:
    """The empty graph of a single-graph container."""
    return container.graph


@pytest.fixture
def player_metadata() -> Dict[str, Any]:
    """Sample node metadata."""
    return {
        'type': 'NBAPlayer',
        'position': 'Power Forward',
        'shirt': 35
    }


@pytest.fixture
def nba_graph(player_metadata: Dict[str, Any]) -> JgfGraph:
    """Small populated graph with two players and two teams."""
    graph = JgfGraph(type="sports", label="NBA Demo Graph", metadata={"season": "2018-19"})
    graph.add_node("lebron-james#2254", "LeBron James")
    graph.add_node("kevin-durant#4497", "Kevin Durant", player_metadata)
    graph.add_node("la-lakers#1610616839", "Los Angeles Lakers")
    graph.add_node("golden-state-warriors#1610612744", "Golden State Warriors")
    graph.add_edge("lebron-james#2254", "la-lakers#1610616839", relation="plays_for", label="Plays for")
    graph.add_edge("kevin-durant#4497", "golden-state-warriors#1610612744", relation="plays_for")
    graph.add_edge("kevin-durant#4497", "golden-state-warriors#1610612744", relation="champion_with",
                   metadata={"seasons": [2017, 2018]}, directed=True)
    return graph


@pytest.fixture
def partial_files(tmp_path: Path):
    """Copy the partial fragments into a temp dir with a chosen file order.
    
    Returns a function taking the fragment names in the order they should be
    listed and returning the glob pattern that matches them.
    """
    def _arrange(*names: str) -> str:
        target_dir = tmp_path / "fragments"
        target_dir.mkdir(exist_ok=True)
        for index, name in enumerate(names):
            shutil.copy(EXAMPLES_DIR / "partial" / name, target_dir / f"{index:02d}_{name}")
        return str(target_dir / "*.json")
    
    return _arrange
