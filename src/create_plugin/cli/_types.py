"""Enums for CLI options."""

from enum import Enum


class StarterTemplate(str, Enum):
    """Built-in registry templates offered when no template is given."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @property
    def label(self) -> str:
        labels: dict[StarterTemplate, str] = {
            StarterTemplate.TYPESCRIPT: "Typescript",
            StarterTemplate.JAVASCRIPT: "Javascript",
        }
        return labels[self]

    @property
    def package(self) -> str:
        return f"csp-template-{self.value}"

    @property
    def description(self) -> str:
        descriptions: dict[StarterTemplate, str] = {
            StarterTemplate.TYPESCRIPT: "Plugin skeleton written in TypeScript with a typed build.",
            StarterTemplate.JAVASCRIPT: "Plugin skeleton written in plain JavaScript.",
        }
        return descriptions[self]


DEFAULT_STARTER = StarterTemplate.TYPESCRIPT
