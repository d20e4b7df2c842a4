"""Document indexing — custom class names and the approved class catalogue."""

from __future__ import annotations
import logging
import re

from codebehind.models import (
    ArrayNode, DictionaryNode, GenericNode, PartialClassDescription,
    SynthesisContext,
)


logger = logging.getLogger(__name__)

CUSTOM_CLASS_SUFFIX = ".CustomClassName"
OBJECT_ID_PATTERN = re.compile(r"-?[0-9]+")

# UIApplication/UIResponder never get partial classes
RESERVED_CLASS_NAMES = frozenset({"UIApplication", "UIResponder"})


class DocumentIndexer:
    """Builds the identity -> class name map and the approved class set."""

    def analyze(self, context: SynthesisContext) -> None:
        """Run both index passes and populate the context."""
        objects = context.document.objects
        flattened = objects.get_property("flattenedProperties") if objects else None
        context.class_names = self.build_class_names(flattened)
        context.approved_class_names = self.build_approved_classes(context.document.classes)

    def build_class_names(self, flattened: object) -> dict[int, str]:
        """Map object identity to its CustomClassName, minus reserved names."""
        class_names: dict[int, str] = {}
        if not isinstance(flattened, DictionaryNode):
            return class_names

        for key, value in flattened.entries.items():
            if not key.endswith(CUSTOM_CLASS_SUFFIX):
                continue

            prefix = key.partition(".")[0]
            if not OBJECT_ID_PATTERN.fullmatch(prefix):
                logger.warning("Ignoring flattened property with non-numeric id: %r", key)
                continue
            object_id = int(prefix)
            if not isinstance(value, str):
                logger.warning("Ignoring non-string class name for %r", key)
                continue

            if value in RESERVED_CLASS_NAMES:
                continue

            class_names[object_id] = value

        return class_names

    def build_approved_classes(self, classes: GenericNode | None) -> set[str]:
        """Class names listed in the document's partial class catalogue."""
        approved: set[str] = set()
        if classes is None:
            return approved

        descriptions = classes.get_property("referencedPartialClassDescriptions")
        if not isinstance(descriptions, ArrayNode):
            return approved

        for item in descriptions.values:
            if isinstance(item, PartialClassDescription) and item.class_name:
                approved.add(item.class_name)
        return approved
