"""``constants`` command: export class constants declared on models."""

from __future__ import annotations

from ..reflection import ConstantsReflector, MemberReflector
from .base import ExportCommand


class ConstantsCommand(ExportCommand):
    name = "constants"
    help = "Export model constants to a JavaScript (and optionally TypeScript) file."
    noun = "Constants"
    label = "Models"
    default_path = "models"
    default_output = "resources/js/constants.js"
    default_suffix = "Model"
    empty_message = "No constants found in models."

    def reflector(self) -> MemberReflector:
        return ConstantsReflector()
