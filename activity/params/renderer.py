#!filepath: activity/params/renderer.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, List, Optional, Sequence

from markupsafe import escape

from activity.l10n.translator import Translator
from activity.params import markup
from activity.params.path_resolver import PathResolver
from activity.params.types import Classification, ParameterType
from activity.utils.logger import logs

"""
ParameterRenderer

Semantics:
- One output string per input parameter, order preserved.
- The type of each position comes from the classification map passed in;
  no map / missing position means unclassified.
- highlight=False never emits markup; highlight=True emits markup with
  every untrusted value escaped.

Invariants:
- Never raises on malformed values; degrades to verbatim / placeholder text.
- Catalog text is trusted, parameter values never are.
- Link construction only depends on the webroot given at construction.
"""

REMOTE_USER = '"remote user"'


class ParameterRenderer:
    """
    Renderer

    Contract:
    - format(params, classification, strip_path, highlight) -> list[str]
    - file     → display text / files-app link (with folder tooltip)
    - username → avatar marker + name, or the remote-user placeholder
    - other    → verbatim, or <strong> when highlighting
    """

    def __init__(
        self,
        resolver: PathResolver,
        l10n: Translator,
        *,
        webroot: str = "",
        files_link: str = "/index.php/apps/files",
        enable_avatars: bool = True,
        display_name: Optional[Callable[[str], str]] = None,
    ):
        self.resolver = resolver
        self.l10n = l10n
        self.webroot = webroot.rstrip("/")
        self.files_link = files_link
        self.enable_avatars = enable_avatars
        self.display_name = display_name

    def set_l10n(self, l10n: Translator) -> None:
        self.l10n = l10n

    # --------------------------------------------------
    def format(
        self,
        params: Sequence[str],
        classification: Classification = None,
        strip_path: bool = False,
        highlight: bool = False,
    ) -> List[str]:
        types = classification if isinstance(classification, Mapping) else {}

        return [
            self.format_value(value, types.get(i), strip_path, highlight)
            for i, value in enumerate(params)
        ]

    def format_value(self, value: str, param_type, strip_path: bool, highlight: bool) -> str:
        typ = ParameterType.coerce(param_type)

        if typ is ParameterType.FILE:
            return str(self.format_file(value, strip_path, highlight))
        if typ is ParameterType.USERNAME:
            return str(self.format_user(value, highlight))
        return str(self.format_plain(value, highlight))

    # --------------------------------------------------
    # unclassified
    # --------------------------------------------------
    @staticmethod
    def format_plain(value: str, highlight: bool):
        if highlight:
            return markup.strong(value)
        return value

    # --------------------------------------------------
    # file
    # --------------------------------------------------
    def format_file(self, value: str, strip_path: bool, highlight: bool):
        if not highlight:
            desc = self.resolver.describe(value)
            return escape(desc.basename if strip_path else desc.normalized)

        desc = self.resolver.resolve(value)

        if desc.is_dir:
            query = {"dir": self.resolver.link_dir(desc)}
        else:
            query = {"dir": self.resolver.link_dir(desc), "scrollto": desc.basename}
        target = markup.href(self.webroot + self.files_link, query)

        # 根目录下的条目没有可提示的上级目录
        if not strip_path or desc.containing_dir == "":
            return markup.link(target, desc.normalized, cls="filename")

        title = self.l10n.t("in %s", [desc.containing_dir])
        return markup.link(target, desc.basename, cls="filename tooltip", title=title)

    # --------------------------------------------------
    # username
    # --------------------------------------------------
    def format_user(self, value: str, highlight: bool):
        if value == "":
            placeholder = markup.trusted(self.l10n.t(REMOTE_USER))
            return markup.strong(placeholder) if highlight else placeholder

        name = self._display_name(value)

        if not highlight:
            return escape(name)

        if self.enable_avatars:
            return markup.avatar(value) + markup.strong(name)
        return markup.strong(name)

    def _display_name(self, user: str) -> str:
        if self.display_name is None:
            return user

        name = self.display_name(user)
        if not name:
            logs.debug(f"[Renderer] no display name for user={user!r}, using user id")
            return user
        return name
