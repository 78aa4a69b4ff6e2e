"""Base mixin for envlens widgets."""


class EnvlensMixin:
    """Mixin for widgets that render entry text verbatim.

    Only disables auto links. Markup is never parsed because `EntryList` wraps
    each entry in a rich `Text` before handing it to Textual.
    """

    auto_links = False
