"""Qt widgets for the wall layout editor.

`WallDisplayWidget` draws the wall and forwards pointer events to `WallInteractor`.
`LayoutWindow` adds the monitor form, add/remove/apply buttons and the Back/Next
wizard navigation around it. Both are thin: every state change goes through `Wall`
or `ModeStepper`, and the widgets only re-read state to repaint and enable controls.
"""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtGui import QIntValidator, QPainter
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ui.layout.interaction import WallInteractor
from ui.layout.paint import WallPainter
from wall.geometry import Geometry, Point
from wall.modes import ModeStepper
from wall.wall import Wall


class WallDisplayWidget(QWidget):
    """
    Scaled-down drawing of the wall.

    The widget rectangle is the master rectangle for snapping, so the wall frame
    the operator sees is the frame monitors snap to.
    """

    def __init__(
        self,
        *,
        wall: Wall,
        modes: ModeStepper,
        canvas_width: int,
        canvas_height: int,
        on_change: Callable[[str], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._wall = wall
        self._modes = modes
        self._on_change = on_change
        self._painter = WallPainter()

        self._interact = WallInteractor(
            wall=wall,
            modes=modes,
            master_rect=self._master_rect,
            on_change=self._handle_change,
        )

        self.setMinimumSize(
            max(1, int(canvas_width * wall.scale)),
            max(1, int(canvas_height * wall.scale)),
        )

    def _master_rect(self) -> Geometry:
        return Geometry(self.width(), self.height(), 0, 0)

    def _handle_change(self, reason: str) -> None:
        self.update()
        self._on_change(reason)

    def paintEvent(self, event) -> None:  # type: ignore[override]
        _ = event
        p = QPainter(self)
        self._painter.paint(p, widget_rect=self.rect(), wall=self._wall, mode=self._modes.current)

    def mousePressEvent(self, event) -> None:  # type: ignore[override]
        pos = event.position().toPoint()
        self._interact.on_mouse_press(Point(pos.x(), pos.y()))

    def mouseMoveEvent(self, event) -> None:  # type: ignore[override]
        pos = event.position().toPoint()
        self._interact.on_mouse_move(Point(pos.x(), pos.y()))

    def mouseReleaseEvent(self, event) -> None:  # type: ignore[override]
        pos = event.position().toPoint()
        self._interact.on_mouse_release(Point(pos.x(), pos.y()))


class LayoutWindow(QWidget):
    """
    Top-level editor window.

    Layout:
    - row 1: name, width, height, x, y, horizontal/vertical letterbox fields
    - row 2: Add monitor / Remove monitor / Apply
    - wall display
    - row 3: Back / mode label / Next

    Text fields only ever hand validated integers to the wall; zero-sized
    monitors are rejected here, before the wall sees them.
    """

    def __init__(
        self,
        *,
        wall: Wall,
        modes: ModeStepper,
        canvas_width: int,
        canvas_height: int,
        default_name: str,
        default_width: int,
        default_height: int,
        on_state_change: Callable[[], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._wall = wall
        self._modes = modes
        self._on_state_change = on_state_change

        self.setWindowTitle("Video wall layout")

        int_validator = QIntValidator(0, 1_000_000, self)
        offset_validator = QIntValidator(-1_000_000, 1_000_000, self)

        def number_field(value: int, placeholder: str, validator: QIntValidator = int_validator) -> QLineEdit:
            f = QLineEdit(str(int(value)), self)
            f.setValidator(validator)
            f.setPlaceholderText(placeholder)
            return f

        self._name_input = QLineEdit(str(default_name), self)
        self._name_input.setPlaceholderText("name")
        self._width_input = number_field(default_width, "width")
        self._height_input = number_field(default_height, "height")
        self._x_input = number_field(0, "x", offset_validator)
        self._y_input = number_field(0, "y", offset_validator)
        self._hlb_input = number_field(0, "horizontal letterbox")
        self._vlb_input = number_field(0, "vertical letterbox")

        self._add_button = QPushButton("Add monitor", self)
        self._delete_button = QPushButton("Remove monitor", self)
        self._apply_button = QPushButton("Apply", self)
        self._back_button = QPushButton("Back", self)
        self._next_button = QPushButton("Next", self)
        self._mode_label = QLabel(self)

        self._display = WallDisplayWidget(
            wall=wall,
            modes=modes,
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            on_change=self._on_display_change,
            parent=self,
        )

        fields = QHBoxLayout()
        for w in (
            self._name_input,
            self._width_input,
            self._height_input,
            self._x_input,
            self._y_input,
            self._hlb_input,
            self._vlb_input,
        ):
            fields.addWidget(w)

        buttons = QHBoxLayout()
        buttons.addWidget(self._add_button)
        buttons.addWidget(self._delete_button)
        buttons.addWidget(self._apply_button)

        nav = QHBoxLayout()
        nav.addWidget(self._back_button)
        nav.addStretch(1)
        nav.addWidget(self._mode_label)
        nav.addStretch(1)
        nav.addWidget(self._next_button)

        main = QVBoxLayout(self)
        main.addLayout(fields)
        main.addLayout(buttons)
        main.addWidget(self._display, 1)
        main.addLayout(nav)

        self._add_button.clicked.connect(self._on_add)  # type: ignore[arg-type]
        self._delete_button.clicked.connect(self._on_delete)  # type: ignore[arg-type]
        self._apply_button.clicked.connect(self._on_apply)  # type: ignore[arg-type]
        self._back_button.clicked.connect(self._on_back)  # type: ignore[arg-type]
        self._next_button.clicked.connect(self._on_next)  # type: ignore[arg-type]

        self._sync_controls()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _int_of(field: QLineEdit) -> int:
        text = field.text().strip()
        return int(text) if text else 0

    def _sync_controls(self) -> None:
        """Re-derive enable state and labels from wall/mode state."""
        configuring = self._modes.current.edge_class is None
        has_selection = self._wall.current_selection() is not None

        for w in (
            self._name_input,
            self._width_input,
            self._height_input,
            self._x_input,
            self._y_input,
            self._hlb_input,
            self._vlb_input,
            self._add_button,
        ):
            w.setEnabled(configuring)
        self._delete_button.setEnabled(configuring and has_selection)
        self._apply_button.setEnabled(configuring and has_selection)

        self._back_button.setEnabled(self._modes.can_retreat)
        self._next_button.setEnabled(self._modes.can_advance)
        self._mode_label.setText(self._modes.current.label)

    def _load_selected_into_fields(self) -> None:
        name = self._wall.current_selection()
        m = self._wall.monitor(name) if name is not None else None
        if m is None:
            return
        self._width_input.setText(str(m.width))
        self._height_input.setText(str(m.height))
        self._x_input.setText(str(m.x_offset))
        self._y_input.setText(str(m.y_offset))
        self._hlb_input.setText(str(m.horizontal_letterbox_bar_height))
        self._vlb_input.setText(str(m.vertical_letterbox_bar_width))

    def _changed(self) -> None:
        self._sync_controls()
        self._display.update()
        self._on_state_change()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_display_change(self, reason: str) -> None:
        # Drags move the selected monitor; keep x/y in the form current.
        if reason in ("click", "release"):
            self._load_selected_into_fields()
        self._changed()

    def _on_add(self) -> None:
        width = self._int_of(self._width_input)
        height = self._int_of(self._height_input)

        # Only monitors with a non-zero area.
        if width <= 0 or height <= 0:
            return

        name = self._name_input.text()
        added = self._wall.add_monitor(
            name,
            width,
            height,
            self._int_of(self._x_input),
            self._int_of(self._y_input),
            self._int_of(self._hlb_input),
            self._int_of(self._vlb_input),
        )
        if not added:
            QMessageBox.warning(self, "Invalid name", "Monitor names must be unique", QMessageBox.StandardButton.Ok)
            return

        self._name_input.setText(name + "x")
        self._changed()

    def _on_delete(self) -> None:
        selected = self._wall.current_selection()
        if selected is None:
            return

        answer = QMessageBox.warning(
            self,
            "Delete monitor",
            f"Do you really want to delete {selected}?",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if answer == QMessageBox.StandardButton.Yes:
            self._wall.delete_monitor(selected)
            self._changed()

    def _on_apply(self) -> None:
        selected = self._wall.current_selection()
        if selected is None:
            return

        width = self._int_of(self._width_input)
        height = self._int_of(self._height_input)
        if width <= 0 or height <= 0:
            return

        self._wall.update_monitor(
            selected,
            width=width,
            height=height,
            x_offset=self._int_of(self._x_input),
            y_offset=self._int_of(self._y_input),
            horizontal_letterbox=self._int_of(self._hlb_input),
            vertical_letterbox=self._int_of(self._vlb_input),
        )
        self._changed()

    def _on_back(self) -> None:
        if self._modes.retreat():
            self._changed()

    def _on_next(self) -> None:
        if self._modes.advance():
            self._changed()
