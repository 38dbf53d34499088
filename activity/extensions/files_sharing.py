#!filepath: activity/extensions/files_sharing.py
from __future__ import annotations

from typing import Optional, Sequence

from activity.extensions.base import Extension, subject_table
from activity.l10n.translator import Translator

"""
File sharing extension

Subjects of module "files" emitted when something is shared:
    shared_user_self   You shared <file> with <user>
    shared_group_self  You shared <file> with group <group>
    shared_with_by     <user> shared <file> with you
    shared_link_self   You shared <file> via link
"""

MODULE = "files"

SUBJECT_TEMPLATES = {
    "shared_user_self": "You shared %1$s with %2$s",
    "shared_group_self": "You shared %1$s with group %2$s",
    "shared_with_by": "%2$s shared %1$s with you",
    "shared_link_self": "You shared %1$s via link",
}

# group 名不是用户名，只标注文件
SPECIAL_PARAMETERS = {
    "shared_user_self": {0: "file", 1: "username"},
    "shared_group_self": {0: "file"},
    "shared_with_by": {0: "file", 1: "username"},
    "shared_link_self": {0: "file", 1: "username"},
}


def translate(module: str, subject: str, params: Sequence[str], l10n: Translator) -> Optional[str]:
    if module != MODULE:
        return None

    template = SUBJECT_TEMPLATES.get(subject)
    if template is None:
        return None

    return l10n.t(template, params)


files_sharing = Extension(
    name="files_sharing",
    special_parameters=subject_table(MODULE, SPECIAL_PARAMETERS),
    translate=translate,
)
