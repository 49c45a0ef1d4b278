"""Tests for records.py - NodeRecord and EdgeRecord wiring."""

import pytest

from idgraph import EdgeRecord, NodeRecord


class TestNodeRecord:
    """Test NodeRecord identity and incidence."""

    def test_creation(self):
        record = NodeRecord({"name": "a"}, "a")

        assert record.payload == {"name": "a"}
        assert record.id == "a"
        assert record.incoming == frozenset()
        assert record.outgoing == frozenset()
        assert record.degree == 0

    def test_equality_uses_id_only(self):
        """Test records with equal ids are equal whatever their payloads."""
        a = NodeRecord("payload one", 1)
        b = NodeRecord("payload two", 1)

        assert a == b
        assert hash(a) == hash(b)
        assert a != NodeRecord("payload one", 2)
        assert len({a, b}) == 1

    def test_not_equal_to_edge_with_same_id(self):
        node = NodeRecord("n", 1)
        edge = EdgeRecord("e", 1, node, node)

        assert node != edge

    @pytest.mark.parametrize(
        "payload, node_id, message",
        [
            (None, 1, "node payload must not be None"),
            ("a", None, "node id must not be None"),
        ],
    )
    def test_none_rejected(self, payload, node_id, message):
        with pytest.raises(ValueError) as exc_info:
            NodeRecord(payload, node_id)

        assert message in str(exc_info.value)

    def test_incidence_views_are_read_only(self):
        record = NodeRecord("a", "a")

        with pytest.raises(AttributeError):
            record.incoming.add("e")

    def test_frozen_copy_is_detached(self):
        record = NodeRecord("a", "a")
        record._add_outgoing("e1")

        copy = record.frozen()
        record._add_outgoing("e2")

        assert copy == record
        assert copy.payload == "a"
        assert copy.outgoing == frozenset({"e1"})
        assert record.outgoing == frozenset({"e1", "e2"})


class TestEdgeRecord:
    """Test EdgeRecord construction side effects."""

    def test_construction_wires_endpoints(self):
        source = NodeRecord("s", "s")
        target = NodeRecord("t", "t")

        edge = EdgeRecord("s->t", "st", source, target)

        assert edge.source_id == "s"
        assert edge.target_id == "t"
        assert source.outgoing == frozenset({"st"})
        assert source.incoming == frozenset()
        assert target.incoming == frozenset({"st"})
        assert target.outgoing == frozenset()

    def test_self_loop_wires_both_sets(self):
        node = NodeRecord("n", "n")

        EdgeRecord("loop", "loop", node, node)

        assert node.incoming == frozenset({"loop"})
        assert node.outgoing == frozenset({"loop"})
        assert node.degree == 2

    def test_equality_uses_id_only(self):
        a, b = NodeRecord("a", "a"), NodeRecord("b", "b")

        assert EdgeRecord("one", 1, a, b) == EdgeRecord("two", 1, b, a)
        assert EdgeRecord("one", 1, a, b) != EdgeRecord("one", 2, a, b)

    @pytest.mark.parametrize("position", [0, 1, 2, 3])
    def test_none_rejected_without_wiring(self, position):
        """Test a rejected edge leaves both endpoints untouched."""
        source = NodeRecord("s", "s")
        target = NodeRecord("t", "t")
        args = ["e", "e", source, target]
        args[position] = None

        with pytest.raises(ValueError):
            EdgeRecord(*args)

        assert source.degree == 0
        assert target.degree == 0

    def test_repr(self):
        a, b = NodeRecord("a", "a"), NodeRecord("b", "b")

        assert repr(EdgeRecord("e", "ab", a, b)) == "EdgeRecord(id='ab', 'a' -> 'b')"
        assert repr(a) == "NodeRecord(id='a', in=0, out=1)"
