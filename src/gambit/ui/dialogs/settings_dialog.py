"""SettingsDialog: piece set, piece colours, board theme and rule options."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QLabel,
    QVBoxLayout,
    QWidget,
)

from gambit.game.config import GameSetup, RuleOptions
from gambit.ui.styles.theme import THEMES

PIECE_COLORS: dict[str, str] = {
    "White": "#FFFFFF",
    "Ivory": "#F5F0DC",
    "Gold": "#E0B040",
    "Black": "#000000",
    "Navy": "#1A2A5A",
    "Crimson": "#8B1A1A",
}

# ── Settings data class ──────────────────────────────────────────────────────


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Pieces
    light_filled: bool = False
    dark_filled: bool = True
    light_color: str = "#FFFFFF"
    dark_color: str = "#000000"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True

    # Rules
    strict_rules: bool = False

    def game_setup(self) -> GameSetup:
        return GameSetup(
            light_filled=self.light_filled,
            dark_filled=self.dark_filled,
            light_color=self.light_color,
            dark_color=self.dark_color,
        )

    def rule_options(self) -> RuleOptions:
        return RuleOptions(
            strict_geometry=self.strict_rules,
            check_double_step_path=self.strict_rules,
        )


class SettingsDialog(QDialog):
    """Modal settings form. Accepting writes the widgets back into the
    :class:`AppSettings` it was given."""

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(380)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )
        self._settings = settings

        root = QVBoxLayout(self)
        form = QFormLayout()
        form.setSpacing(12)

        self._light_filled_check = QCheckBox()
        self._light_filled_check.setChecked(settings.light_filled)
        form.addRow(QLabel("Filled light pieces"), self._light_filled_check)

        self._dark_filled_check = QCheckBox()
        self._dark_filled_check.setChecked(settings.dark_filled)
        form.addRow(QLabel("Filled dark pieces"), self._dark_filled_check)

        self._light_color_combo = self._color_combo(settings.light_color)
        form.addRow(QLabel("Light piece colour"), self._light_color_combo)

        self._dark_color_combo = self._color_combo(settings.dark_color)
        form.addRow(QLabel("Dark piece colour"), self._dark_color_combo)

        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        form.addRow(QLabel("Board theme"), self._theme_combo)

        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        form.addRow(QLabel("Show coordinates"), self._coords_check)

        self._strict_check = QCheckBox()
        self._strict_check.setChecked(settings.strict_rules)
        self._strict_check.setToolTip(
            "Mask knight and pawn-capture wrap-around at the board edge and "
            "require a clear path for a pawn's double step."
        )
        form.addRow(QLabel("Strict board geometry"), self._strict_check)

        root.addLayout(form)

        self._error_label = QLabel()
        self._error_label.setStyleSheet("color: #e06c75;")
        self._error_label.setVisible(False)
        root.addWidget(self._error_label)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        root.addWidget(self._btn_box)

    @staticmethod
    def _color_combo(current: str) -> QComboBox:
        combo = QComboBox()
        for name, value in PIECE_COLORS.items():
            combo.addItem(name, value)
        idx = combo.findData(current)
        if idx < 0:
            combo.addItem(current, current)
            idx = combo.count() - 1
        combo.setCurrentIndex(idx)
        return combo

    def _on_accept(self) -> None:
        light_color = str(self._light_color_combo.currentData())
        dark_color = str(self._dark_color_combo.currentData())
        if light_color.lower() == dark_color.lower():
            self._error_label.setText("Light and dark pieces need different colours.")
            self._error_label.setVisible(True)
            return

        s = self._settings
        s.light_filled = self._light_filled_check.isChecked()
        s.dark_filled = self._dark_filled_check.isChecked()
        s.light_color = light_color
        s.dark_color = dark_color
        s.board_theme = self._theme_combo.currentText()
        s.show_coordinates = self._coords_check.isChecked()
        s.strict_rules = self._strict_check.isChecked()
        self.accept()
