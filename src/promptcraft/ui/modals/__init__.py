"""Modal components for the Promptcraft TUI."""

from promptcraft.ui.modals.base import PromptcraftModalScreen
from promptcraft.ui.modals.confirm import ConfirmModal
from promptcraft.ui.modals.debug_log import DebugLogModal
from promptcraft.ui.modals.fields_form import FieldsFormModal
from promptcraft.ui.modals.select_many import SelectManyModal
from promptcraft.ui.modals.select_one import SelectOneModal

__all__ = [
    "ConfirmModal",
    "DebugLogModal",
    "FieldsFormModal",
    "PromptcraftModalScreen",
    "SelectManyModal",
    "SelectOneModal",
]
