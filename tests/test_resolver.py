from builders import ref
from codebehind.core.resolver import resolve_reference, resolved_id
from codebehind.models import GenericNode, ProxyNode, Reference


class TestResolveReference:

    def test_concrete_node_is_returned_unchanged(self):
        node = GenericNode(id=1, class_tag="IBUIView")
        assert resolve_reference(node) is node

    def test_single_hop(self):
        node = GenericNode(id=1, class_tag="IBUIView")
        assert resolve_reference(ref(node)) is node

    def test_deep_chain(self):
        node = ProxyNode(id=4)
        assert resolve_reference(ref(node, depth=6)) is node

    def test_non_node_values_pass_through(self):
        assert resolve_reference("IBFilesOwner") == "IBFilesOwner"
        assert resolve_reference(None) is None

    def test_empty_reference_resolves_to_none(self):
        assert resolve_reference(Reference()) is None


class TestResolvedId:

    def test_identity_of_target(self):
        assert resolved_id(ref(GenericNode(id=42, class_tag="IBUIView"), depth=3)) == 42

    def test_missing_identity(self):
        assert resolved_id(ref(GenericNode(class_tag="IBUIView"))) is None

    def test_non_node(self):
        assert resolved_id(ref("label")) is None
