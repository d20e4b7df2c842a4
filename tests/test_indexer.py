from codebehind.core.indexer import DocumentIndexer
from codebehind.models import (
    ArrayNode, DictionaryNode, GenericNode, PartialClassDescription,
    SynthesisContext,
)

from builders import build_document


class TestClassNames:

    def setup_method(self):
        self.indexer = DocumentIndexer()

    def test_only_custom_class_entries_are_kept(self):
        flattened = DictionaryNode(entries={
            "5.CustomClassName": "MyLabel",
            "5.IBPluginDependency": "com.apple.InterfaceBuilder.IBCocoaTouchPlugin",
            "7.CustomClassName": "MyController",
        })
        assert self.indexer.build_class_names(flattened) == {
            5: "MyLabel",
            7: "MyController",
        }

    def test_reserved_names_are_dropped(self):
        flattened = DictionaryNode(entries={
            "-1.CustomClassName": "UIApplication",
            "2.CustomClassName": "UIResponder",
            "3.CustomClassName": "AppDelegate",
        })
        assert self.indexer.build_class_names(flattened) == {3: "AppDelegate"}

    def test_suffix_must_match_exactly(self):
        flattened = DictionaryNode(entries={
            "5.MyCustomClassName": "Nope",
            "5.CustomClassNameExtra": "Nope",
        })
        assert self.indexer.build_class_names(flattened) == {}

    def test_malformed_entries_are_skipped(self):
        flattened = DictionaryNode(entries={
            "owner.CustomClassName": "Nope",
            "8.CustomClassName": 12,
            "9.CustomClassName": "Kept",
        })
        assert self.indexer.build_class_names(flattened) == {9: "Kept"}

    def test_only_plain_decimal_ids_are_accepted(self):
        flattened = DictionaryNode(entries={
            "1_0.CustomClassName": "Underscored",
            "+3.CustomClassName": "Signed",
            " 4.CustomClassName": "Padded",
            "\u0665.CustomClassName": "ArabicIndic",
            "-2.CustomClassName": "Negative",
            "12.CustomClassName": "Plain",
        })
        assert self.indexer.build_class_names(flattened) == {-2: "Negative", 12: "Plain"}

    def test_missing_flattened_properties(self):
        assert self.indexer.build_class_names(None) == {}


class TestApprovedClasses:

    def setup_method(self):
        self.indexer = DocumentIndexer()

    def test_collects_non_empty_names(self):
        classes = GenericNode(class_tag="IBClassDescriber", properties={
            "referencedPartialClassDescriptions": ArrayNode(values=[
                PartialClassDescription(class_name="AppDelegate"),
                PartialClassDescription(class_name=""),
                PartialClassDescription(),
                PartialClassDescription(class_name="MyLabel"),
                "not a description",
            ]),
        })
        assert self.indexer.build_approved_classes(classes) == {"AppDelegate", "MyLabel"}

    def test_missing_catalogue_is_empty(self):
        assert self.indexer.build_approved_classes(None) == set()

    def test_catalogue_without_descriptions_is_empty(self):
        assert self.indexer.build_approved_classes(GenericNode(class_tag="IBClassDescriber")) == set()


def test_analyze_populates_context():
    document = build_document(custom_classes={5: "MyLabel"}, approved=["MyLabel"])
    context = SynthesisContext(document=document)
    DocumentIndexer().analyze(context)
    assert context.class_names == {5: "MyLabel"}
    assert context.approved_class_names == {"MyLabel"}
    assert context.is_approved("MyLabel")
