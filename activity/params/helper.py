#!filepath: activity/params/helper.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, Iterable, List, Optional, Sequence, Union

from activity.config.app_config import AppConfig
from activity.l10n.translator import Translator
from activity.params.aggregator import ArrayAggregator
from activity.params.classifier import ClassifierFn, ParameterClassifier
from activity.params.path_resolver import PathResolver
from activity.params.renderer import ParameterRenderer
from activity.params.types import Classification, ParameterType
from activity.utils.filesystem import FilesView, LocalFilesView
from activity.utils.logger import logs


class ParameterHelper:
    """
    ParameterHelper

    把 classifier / resolver / renderer / aggregator 组装在一起，
    给调用方一个入口：

        helper.get_special_parameter_list("files", "shared_with_by")
        helper.prepare_parameters(params, types, strip_path=True, highlight=True)

    list / tuple 参数交给 ArrayAggregator，其余交给 ParameterRenderer。
    """

    def __init__(
        self,
        classifier: ParameterClassifier,
        renderer: ParameterRenderer,
    ):
        self.classifier = classifier
        self.renderer = renderer
        self.aggregator = ArrayAggregator(renderer)

    @classmethod
    def from_config(
        cls,
        cfg: AppConfig,
        user: str,
        providers: Iterable[ClassifierFn] = (),
        view: Optional[FilesView] = None,
        l10n: Optional[Translator] = None,
        display_name: Optional[Callable[[str], str]] = None,
    ) -> "ParameterHelper":
        if view is None:
            view = LocalFilesView(cfg.render.data_dir)
        if l10n is None:
            l10n = Translator.load(cfg.locale.language, cfg.locale.catalog_dir)

        renderer = ParameterRenderer(
            PathResolver(view, user),
            l10n,
            webroot=cfg.render.webroot,
            files_link=cfg.render.files_link,
            enable_avatars=cfg.render.enable_avatars,
            display_name=display_name,
        )
        logs.debug(f"[ParameterHelper] user={user} language={l10n.language} webroot={cfg.render.webroot!r}")
        return cls(ParameterClassifier(providers), renderer)

    @property
    def l10n(self) -> Translator:
        return self.renderer.l10n

    def set_l10n(self, l10n: Translator) -> None:
        self.renderer.set_l10n(l10n)

    # --------------------------------------------------
    def get_special_parameter_list(self, module: str, subject: str):
        return self.classifier.special_parameter_list(module, subject)

    def prepare_parameters(
        self,
        params: Sequence[Union[str, Sequence[str]]],
        classification: Classification = None,
        strip_path: bool = False,
        highlight: bool = False,
    ) -> List[str]:
        types = classification if isinstance(classification, Mapping) else {}
        prepared: List[str] = []

        for i, param in enumerate(params):
            typ = ParameterType.coerce(types.get(i))
            if isinstance(param, (list, tuple)):
                prepared.append(self.aggregator.join(param, typ, strip_path, highlight))
            else:
                prepared.append(self.renderer.format_value(param, typ, strip_path, highlight))

        return prepared

    def prepare_array_parameter(
        self,
        params: Sequence[str],
        param_type=ParameterType.UNCLASSIFIED,
        strip_path: bool = False,
        highlight: bool = False,
    ) -> str:
        return self.aggregator.join(params, param_type, strip_path, highlight)
