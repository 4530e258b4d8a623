"""Diagnostic records handed back to the host for reporting."""

from dataclasses import dataclass

from region_ruler.domain.descriptors import DiagnosticDescriptor


@dataclass(frozen=True)
class RegionDiagnostic:
    """One reportable violation: category, where it occurred, and the formatted argument."""

    descriptor: DiagnosticDescriptor
    location: object
    """Opaque host handle; the core never inspects it."""
    argument: str

    @property
    def message_args(self) -> tuple[str, ...]:
        """Args for pylint add_message; empty when the template has no placeholder."""
        return (self.argument,) if self.descriptor.takes_argument else ()

    @property
    def message(self) -> str:
        template = self.descriptor.message_template
        args = self.message_args
        return template % args if args else template
