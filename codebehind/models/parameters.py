"""Code-behind generation configuration."""

from __future__ import annotations
from pydantic import BaseModel


class GenerationConfig(BaseModel):
    """Naming conventions and toggles for code-behind generation."""
    # Target binding namespaces
    foundation_namespace: str = "MonoTouch.Foundation"
    uikit_namespace: str = "MonoTouch.UIKit"
    mapkit_namespace: str = "MonoTouch.MapKit"
    generic_object_type: str = "System.Object"

    # Binding markers and native field accessors
    register_attribute: str = "Register"
    export_attribute: str = "Export"
    connect_attribute: str = "Connect"
    native_field_getter: str = "GetNativeField"
    native_field_setter: str = "SetNativeField"

    # Document conventions
    custom_object_tag: str = "IBUICustomObject"
    external_nib_key: str = "IBUINibName"
    selector_separator: str = ":"

    stub_listing: bool = True            # Attach readable action stubs as comments
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules

    @property
    def foundation_object_type(self) -> str:
        return f"{self.foundation_namespace}.NSObject"

    @property
    def view_controller_type(self) -> str:
        return f"{self.uikit_namespace}.UIViewController"

    def attribute(self, name: str) -> str:
        """Fully qualified binding attribute name."""
        return f"{self.foundation_namespace}.{name}"
