"""Main code-behind generator — orchestrates indexing, synthesis and member rules."""

from __future__ import annotations
import logging

from codebehind.models import (
    ArrayNode, CodeBehind, GenerationConfig, IBDocument, OrderedSetNode,
    SynthesisContext,
)
from codebehind.core.grouper import ConnectionGrouper
from codebehind.core.indexer import DocumentIndexer
from codebehind.core.registry import MemberRuleRegistry
from codebehind.core.synthesizer import TypeSynthesizer


logger = logging.getLogger(__name__)


class CodeBehindGenerator:
    """
    Stateless code-behind generator.

    Takes a document graph, groups its connections by owner, indexes
    custom class names, synthesizes approved classes, runs member rules,
    and returns the declarations in document order.
    """

    def __init__(self, registry: MemberRuleRegistry) -> None:
        self.registry = registry
        self.grouper = ConnectionGrouper()
        self.indexer = DocumentIndexer()
        self.synthesizer = TypeSynthesizer()

    def generate(
        self,
        document: IBDocument,
        config: GenerationConfig | None = None,
    ) -> CodeBehind:
        if config is None:
            config = GenerationConfig()

        objects = document.objects
        if objects is None:
            return CodeBehind(declarations=[])

        connection_records = objects.get_property("connectionRecords")
        if not isinstance(connection_records, ArrayNode):
            return CodeBehind(declarations=[])

        context = SynthesisContext(document=document, config=config)

        # Grouping phase — raises on connections without an owner identity
        context.connection_groups = self.grouper.group(connection_records)

        # Index phase — custom class names and approved classes
        self.indexer.analyze(context)

        # Synthesis phase — one pending declaration per approved object
        object_records = objects.get_property("objectRecords")
        if isinstance(object_records, OrderedSetNode):
            self.synthesizer.synthesize(context, object_records)

        # Member phase — run applicable rules per owner
        for owner_id, records in context.connection_groups.items():
            declaration = context.get_declaration(owner_id)
            if declaration is None:
                continue
            for rule in self.registry.get_applicable_rules(context, records):
                declaration.add_members(rule.generate(context, declaration, records))

        result = CodeBehind(declarations=list(context.declarations.values()))
        logger.info(
            "Generated %d classes (%d outlets, %d actions)",
            result.stats.classes, result.stats.outlets, result.stats.actions,
        )
        return result
