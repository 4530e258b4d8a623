"""Pure message-building from diagnostic descriptors. No I/O or infrastructure imports."""

from collections.abc import Iterable

from region_ruler.domain.descriptors import DiagnosticDescriptor

MsgDefinition = tuple[str, str, str] | tuple[str, str, str, dict[str, bool]]


class RuleMsgBuilder:
    """Builds the Pylint ``msgs`` dict for a checker from descriptors."""

    @staticmethod
    def build_msgs(descriptors: Iterable[DiagnosticDescriptor]) -> dict[str, MsgDefinition]:
        """Return ``{msgid: (message_template, symbol, description[, options])}``.

        Categories that are not enabled by default carry the
        ``default_enabled`` option so pylint leaves them off until enabled.
        """
        result: dict[str, MsgDefinition] = {}
        for descriptor in descriptors:
            definition: MsgDefinition = (
                descriptor.message_template,
                descriptor.symbol,
                f"{descriptor.title} ({descriptor.id}). {descriptor.description}",
            )
            if not descriptor.enabled_by_default:
                definition = (*definition, {"default_enabled": False})
            result[descriptor.msgid] = definition
        return result
