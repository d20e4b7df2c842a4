"""High-level code-behind service — facade for the API layer."""

from __future__ import annotations

from codebehind.models import CodeBehind, GenerationConfig, IBDocument
from codebehind.core.generator import CodeBehindGenerator
from codebehind.core.registry import MemberRuleRegistry, create_default_registry


class CodeBehindService:
    """Delegates to the generator and exposes the registered rules."""

    def __init__(self, registry: MemberRuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.generator = CodeBehindGenerator(self.registry)

    def generate(
        self,
        document: IBDocument,
        config: GenerationConfig | None = None,
    ) -> CodeBehind:
        if config is None:
            config = GenerationConfig()

        return self.generator.generate(document, config)

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
