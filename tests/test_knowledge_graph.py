"""Tests for the knowledge graph."""

import pytest

from jarvy.config import Settings
from jarvy.exceptions import KnowledgeNodeNotFoundError
from jarvy.knowledge.graph import KnowledgeGraph, concept_similarity, slugify
from jarvy.knowledge.seed import KNOWLEDGE_SEED
from jarvy.models.knowledge import KnowledgeNode


def _node(name: str, relations: list[str] | None = None) -> KnowledgeNode:
    return KnowledgeNode(
        id=name, concept=name, category="test", relations=relations or []
    )


@pytest.fixture
def graph(settings: Settings) -> KnowledgeGraph:
    return KnowledgeGraph(settings=settings)


@pytest.fixture
def chain(settings: Settings) -> KnowledgeGraph:
    """alpha -> beta -> gamma -> delta"""
    return KnowledgeGraph(
        settings=settings,
        nodes=[
            _node("alpha", ["beta"]),
            _node("beta", ["gamma"]),
            _node("gamma", ["delta"]),
            _node("delta"),
        ],
    )


class TestHelpers:
    """Tests for slugify() and concept_similarity()."""

    def test_slugify(self):
        assert slugify("AI Ethics") == "ai_ethics"
        assert slugify("  Deep   Learning\tModels ") == "deep_learning_models"

    def test_concept_similarity(self):
        assert concept_similarity("machine learning", "deep learning") == pytest.approx(1 / 3)
        assert concept_similarity("AI", "ai") == 1.0
        assert concept_similarity("", "") == 0.0


class TestSeed:
    """Tests for the seeded graph."""

    def test_seed_loaded(self, graph):
        assert len(graph) == len(KNOWLEDGE_SEED) == 6
        assert "ai_fundamentals" in graph
        node = graph.require("ai_fundamentals")
        assert node.concept == "Artificial Intelligence"
        assert node.confidence == 0.95

    def test_require_missing(self, graph):
        with pytest.raises(KnowledgeNodeNotFoundError) as exc_info:
            graph.require("nope")
        assert exc_info.value.node_id == "nope"
        assert isinstance(exc_info.value, KeyError)

    def test_reset_restores_seed(self, graph):
        graph.add_knowledge("Testing", "quality", [], [])
        graph.adjust_confidence("ai_ethics", -0.5)
        graph.reset()
        assert len(graph) == 6
        assert "testing" not in graph
        assert graph.require("ai_ethics").confidence == 0.92


class TestAddKnowledge:
    """Tests for add_knowledge() and relation linking."""

    def test_links_same_category(self, graph):
        node = graph.add_knowledge("Testing", "technology", ["Tests are useful"], [])
        assert node.id == "testing"
        assert node.confidence == 0.7
        assert node.relations == ["Artificial Intelligence"]
        assert graph.require("ai_fundamentals").relations[-1] == "Testing"

    def test_links_similar_concepts(self, graph):
        node = graph.add_knowledge("Quantum Computing Hardware", "engineering", [], [])
        # 2/3 word overlap with "Quantum Computing" clears the 0.6 threshold
        assert node.relations == ["Quantum Computing"]
        assert "Quantum Computing Hardware" in graph.require("quantum_computing").relations

    def test_unrelated_node_has_no_links(self, graph):
        node = graph.add_knowledge("Gardening", "hobbies", [], [])
        assert node.relations == []

    def test_relations_stay_unique(self, graph):
        graph.add_knowledge("Testing", "technology", [], [])
        graph.add_knowledge("Linting", "technology", [], [])
        graph.add_knowledge("Linting", "technology", [], [])
        relations = graph.require("ai_fundamentals").relations
        assert relations.count("Linting") == 1

    def test_same_slug_replaces(self, graph):
        graph.add_knowledge("Testing", "technology", ["old"], [])
        graph.add_knowledge("testing", "technology", ["new"], [])
        assert graph.require("testing").facts == ["new"]
        assert len(graph) == 7

    def test_added_node_is_reachable(self, graph):
        graph.add_knowledge("Testing", "quality", ["Tests catch regressions"], [])
        concepts = {node.concept for node in graph.traverse(["Testing"])}
        assert "Testing" in concepts


class TestConfidence:
    """Tests for adjust_confidence()."""

    def test_clamped_high_and_low(self, graph):
        assert graph.adjust_confidence("ai_fundamentals", 0.2).confidence == 1.0
        assert graph.adjust_confidence("ai_fundamentals", -5).confidence == 0.1

    def test_touches_timestamp(self, graph):
        before = graph.require("ai_ethics").last_updated
        node = graph.adjust_confidence("ai_ethics", 0.01)
        assert node.last_updated >= before

    def test_missing_node(self, graph):
        with pytest.raises(KnowledgeNodeNotFoundError):
            graph.adjust_confidence("nope", 0.1)


class TestTraverse:
    """Tests for traverse()."""

    @pytest.mark.parametrize(
        "depth,expected",
        [
            (0, {"alpha"}),
            (1, {"alpha", "beta"}),
            (2, {"alpha", "beta", "gamma"}),
            (3, {"alpha", "beta", "gamma", "delta"}),
        ],
    )
    def test_depth_bound(self, chain, depth, expected):
        found = {node.concept for node in chain.traverse(["alpha"], max_depth=depth)}
        assert found == expected

    def test_default_depth_from_settings(self, settings):
        graph = KnowledgeGraph(
            settings=settings.model_copy(update={"reasoning_depth": 1}),
            nodes=[_node("alpha", ["beta"]), _node("beta", ["gamma"]), _node("gamma")],
        )
        assert {node.concept for node in graph.traverse(["alpha"])} == {"alpha", "beta"}

    def test_cycle_terminates(self, settings):
        graph = KnowledgeGraph(
            settings=settings,
            nodes=[_node("ping", ["pong"]), _node("pong", ["ping"])],
        )
        found = graph.traverse(["ping"], max_depth=50)
        assert {node.concept for node in found} == {"ping", "pong"}

    def test_case_insensitive(self, graph):
        found = graph.traverse(["quantum computing"], max_depth=0)
        assert [node.id for node in found] == ["quantum_computing"]

    def test_empty_and_unknown_seeds(self, graph):
        assert graph.traverse([]) == []
        assert graph.traverse([""]) == []
        assert graph.traverse(["zzzz"]) == []


class TestQueries:
    """Tests for extract_concepts(), metrics() and export()."""

    def test_extract_concepts(self, graph):
        assert graph.extract_concepts("Tell me about quantum physics") == ["Quantum Computing"]
        assert graph.extract_concepts("nothing relevant here") == []

    def test_extract_concepts_punctuated_concept(self, graph):
        graph.add_knowledge("what's new", "news", ["News is fresh"], [])
        assert graph.extract_concepts("what's going on") == ["what's new"]
        graph.add_knowledge("evidence-based", "health", ["Evidence is weighed"], [])
        assert "evidence-based" in graph.extract_concepts("is this evidence based")

    def test_extract_concepts_deduplicated(self, graph):
        concepts = graph.extract_concepts("artificial intelligence and more intelligence")
        assert concepts == ["Artificial Intelligence"]

    def test_metrics(self, graph):
        metrics = graph.metrics()
        assert metrics.total_concepts == 6
        assert metrics.categories == [
            "technology", "science", "philosophy",
            "mathematics", "psychology", "communication",
        ]
        assert metrics.total_relations == 18
        assert metrics.average_confidence == pytest.approx(
            (0.95 + 0.88 + 0.92 + 0.96 + 0.89 + 0.91) / 6
        )

    def test_metrics_empty_graph(self, settings):
        metrics = KnowledgeGraph(settings=settings, nodes=[]).metrics()
        assert metrics.total_concepts == 0
        assert metrics.average_confidence == 0.0

    def test_export_is_json_ready(self, graph):
        exported = graph.export()
        assert len(exported) == 6
        assert isinstance(exported[0]["last_updated"], str)
