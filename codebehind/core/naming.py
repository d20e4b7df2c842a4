"""Naming-convention mapping from document class tags to binding types."""

from __future__ import annotations

from codebehind.models import GenerationConfig


FOUNDATION_PREFIX = "NS"
BUILDER_PREFIX = "IB"


def map_type_name(class_tag: str, config: GenerationConfig) -> str:
    """
    Map a document class tag to a fully qualified binding type name.

        NSString    -> <foundation>.NSString
        IBUIButton  -> <uikit>.UIButton
        IBMKMapView -> <mapkit>.MKMapView

    Anything else falls back to the foundation root object type.
    """
    if class_tag.startswith(FOUNDATION_PREFIX):
        return f"{config.foundation_namespace}.{class_tag}"

    if class_tag.startswith(BUILDER_PREFIX) and len(class_tag) > len(BUILDER_PREFIX):
        name = class_tag[len(BUILDER_PREFIX):]
        if name.startswith("UI"):
            return f"{config.uikit_namespace}.{name}"
        if name.startswith("MK"):
            return f"{config.mapkit_namespace}.{name}"

    return config.foundation_object_type
